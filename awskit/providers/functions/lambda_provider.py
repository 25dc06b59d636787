"""AWS Lambda provider using boto3.

Serializes the request to JSON, calls ``Invoke`` with the
``RequestResponse`` invocation type, and returns the raw output.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel

from awskit.interfaces.function_provider import IFunctionProvider
from awskit.models.functions import InvocationResult
from awskit.utils.errors import FunctionInvocationError
from awskit.utils.logging import get_logger


class LambdaFunctionProvider(IFunctionProvider):
    """Invokes Lambda functions through a boto3 ``lambda`` client."""

    def __init__(self, client: Any) -> None:
        self._client = client
        self._logger = get_logger(__name__)

    @staticmethod
    def _encode(request: Any) -> bytes:
        if isinstance(request, BaseModel):
            return request.model_dump_json().encode("utf-8")
        return json.dumps(request).encode("utf-8")

    def _invoke_sync(self, function_name: str, payload: bytes) -> InvocationResult:
        response = self._client.invoke(FunctionName=function_name, Payload=payload)
        body = response.get("Payload")
        raw = body.read() if body is not None else b""
        return InvocationResult(
            status_code=response.get("StatusCode", 0),
            payload=raw,
            function_error=response.get("FunctionError"),
            executed_version=response.get("ExecutedVersion"),
            log_result=response.get("LogResult"),
        )

    async def invoke(self, function_name: str, request: Any) -> InvocationResult:
        """Invoke *function_name* with *request* encoded as JSON."""
        try:
            payload = self._encode(request)
        except (TypeError, ValueError) as exc:
            raise FunctionInvocationError(
                message=f"can't marshal lambda {function_name} request, error {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        try:
            result = await asyncio.to_thread(self._invoke_sync, function_name, payload)
        except (ClientError, BotoCoreError) as exc:
            self._logger.error("lambda_invoke_failed", function=function_name, error=str(exc))
            raise FunctionInvocationError(
                message=f"error calling lambda {function_name}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        if result.function_error:
            self._logger.warning(
                "lambda_function_error",
                function=function_name,
                function_error=result.function_error,
            )
        else:
            self._logger.debug(
                "lambda_invoke_complete",
                function=function_name,
                status_code=result.status_code,
            )
        return result

    def get_provider_name(self) -> str:
        """Return the provider identifier."""
        return "lambda"
