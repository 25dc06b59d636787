"""Client factory: wires boto3 clients, providers, and the lookup cache.

``build_clients`` is the one place a boto3 session is created.  Everything
it returns is an explicit object owned by the caller; there is no
module-level client, so two ``AwsClients`` bundles (e.g. for two regions)
never share cache state.

    clients = build_clients()
    data = await clients.storage.get("my-bucket", "path/to/object")
    user = await clients.directory_cache.get("eu-west-1_AbCdEf", sub)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError

from awskit.config.settings import Settings
from awskit.providers.directory.cognito_provider import CognitoDirectoryProvider
from awskit.providers.functions.lambda_provider import LambdaFunctionProvider
from awskit.providers.storage.s3_provider import S3StorageProvider
from awskit.services.lookup_cache import DirectoryLookupCache
from awskit.utils.errors import ConfigurationError
from awskit.utils.logging import get_logger

_logger = get_logger(__name__)


@dataclass
class AwsClients:
    """The providers of one AWS session, plus its directory lookup cache."""

    storage: S3StorageProvider
    functions: LambdaFunctionProvider
    directory: CognitoDirectoryProvider
    directory_cache: DirectoryLookupCache
    region: str | None = None


def _build_session(app_settings: Settings, region: str | None) -> boto3.session.Session:
    """Create the boto3 session; an explicit *region* beats settings."""
    session_args: dict[str, Any] = {}
    if app_settings.aws_profile:
        session_args["profile_name"] = app_settings.aws_profile
    effective_region = region or app_settings.aws_region
    if effective_region:
        session_args["region_name"] = effective_region

    try:
        return boto3.session.Session(**session_args)
    except BotoCoreError as exc:
        raise ConfigurationError(message=f"aws configuration error, {exc}") from exc


def _client(session: boto3.session.Session, service: str, app_settings: Settings) -> Any:
    client_args: dict[str, Any] = {}
    if app_settings.aws_endpoint_url:
        client_args["endpoint_url"] = app_settings.aws_endpoint_url
    try:
        return session.client(service, **client_args)
    except BotoCoreError as exc:
        raise ConfigurationError(
            message=f"aws configuration error, {exc}", provider_name=service
        ) from exc


def build_clients(custom_settings: Settings | None = None, region: str | None = None) -> AwsClients:
    """Create the S3, Lambda and Cognito providers for one session.

    Args:
        custom_settings: Settings to use instead of reading the environment.
        region: Region override, taking precedence over ``aws_region``.

    Raises:
        ConfigurationError: If the profile or region cannot be resolved.
    """
    app_settings = custom_settings or Settings()
    session = _build_session(app_settings, region)

    directory = CognitoDirectoryProvider(_client(session, "cognito-idp", app_settings))
    clients = AwsClients(
        storage=S3StorageProvider(_client(session, "s3", app_settings)),
        functions=LambdaFunctionProvider(_client(session, "lambda", app_settings)),
        directory=directory,
        directory_cache=DirectoryLookupCache(directory),
        region=session.region_name,
    )

    _logger.info(
        "aws_clients_built",
        region=clients.region,
        profile=app_settings.aws_profile or None,
        endpoint_url=app_settings.aws_endpoint_url or None,
    )
    return clients
