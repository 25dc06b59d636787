"""Serverless function providers."""

from awskit.providers.functions.lambda_provider import LambdaFunctionProvider

__all__ = ["LambdaFunctionProvider"]
