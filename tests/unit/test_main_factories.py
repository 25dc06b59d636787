"""Unit tests for the client factory in awskit/main.py.

boto3 is patched at the module level so no credentials, network, or
shared config files are touched.
"""

from __future__ import annotations

from unittest.mock import MagicMock, call, patch

import pytest
from botocore.exceptions import ProfileNotFound, UnknownServiceError

from awskit.config.settings import Settings
from awskit.main import AwsClients, build_clients
from awskit.providers.directory.cognito_provider import CognitoDirectoryProvider
from awskit.providers.functions.lambda_provider import LambdaFunctionProvider
from awskit.providers.storage.s3_provider import S3StorageProvider
from awskit.services.lookup_cache import DirectoryLookupCache
from awskit.utils.errors import ConfigurationError


def _settings(**overrides) -> Settings:
    """Build a Settings instance with nothing configured unless overridden."""
    defaults = {
        "aws_region": "",
        "aws_profile": "",
        "aws_endpoint_url": "",
        "app_env": "test",
    }
    defaults.update(overrides)
    return Settings(**defaults)


@pytest.fixture()
def mock_boto3():
    with patch("awskit.main.boto3") as boto3_mod:
        session = boto3_mod.session.Session.return_value
        session.region_name = "eu-west-1"
        session.client.side_effect = lambda service, **kwargs: MagicMock(name=service)
        yield boto3_mod


class TestBuildClients:
    def test_returns_all_providers(self, mock_boto3: MagicMock) -> None:
        clients = build_clients(_settings(aws_region="eu-west-1"))

        assert isinstance(clients, AwsClients)
        assert isinstance(clients.storage, S3StorageProvider)
        assert isinstance(clients.functions, LambdaFunctionProvider)
        assert isinstance(clients.directory, CognitoDirectoryProvider)
        assert isinstance(clients.directory_cache, DirectoryLookupCache)
        assert clients.region == "eu-west-1"

    def test_cache_wraps_the_directory_provider(self, mock_boto3: MagicMock) -> None:
        clients = build_clients(_settings())

        assert clients.directory_cache.provider is clients.directory

    def test_one_client_per_service(self, mock_boto3: MagicMock) -> None:
        build_clients(_settings())

        session = mock_boto3.session.Session.return_value
        services = sorted(c.args[0] for c in session.client.call_args_list)
        assert services == ["cognito-idp", "lambda", "s3"]

    def test_region_and_profile_from_settings(self, mock_boto3: MagicMock) -> None:
        build_clients(_settings(aws_region="us-east-2", aws_profile="ops"))

        mock_boto3.session.Session.assert_called_once_with(
            profile_name="ops", region_name="us-east-2"
        )

    def test_region_argument_overrides_settings(self, mock_boto3: MagicMock) -> None:
        build_clients(_settings(aws_region="us-east-2"), region="ap-south-1")

        mock_boto3.session.Session.assert_called_once_with(region_name="ap-south-1")

    def test_unconfigured_defers_to_boto3(self, mock_boto3: MagicMock) -> None:
        build_clients(_settings())

        mock_boto3.session.Session.assert_called_once_with()
        session = mock_boto3.session.Session.return_value
        assert call("s3") in session.client.call_args_list

    def test_endpoint_url_passed_to_every_client(self, mock_boto3: MagicMock) -> None:
        build_clients(_settings(aws_endpoint_url="http://localhost:4566"))

        session = mock_boto3.session.Session.return_value
        for c in session.client.call_args_list:
            assert c.kwargs == {"endpoint_url": "http://localhost:4566"}

    def test_unknown_profile_raises_configuration_error(self, mock_boto3: MagicMock) -> None:
        mock_boto3.session.Session.side_effect = ProfileNotFound(profile="nope")

        with pytest.raises(ConfigurationError) as info:
            build_clients(_settings(aws_profile="nope"))

        assert info.value.message.startswith("aws configuration error, ")
        assert "nope" in info.value.message

    def test_client_failure_raises_configuration_error(self, mock_boto3: MagicMock) -> None:
        session = mock_boto3.session.Session.return_value
        session.client.side_effect = UnknownServiceError(
            service_name="cognito-idp", known_service_names="s3, lambda"
        )

        with pytest.raises(ConfigurationError) as info:
            build_clients(_settings())

        assert info.value.provider_name == "cognito-idp"

    def test_bundles_do_not_share_cache(self, mock_boto3: MagicMock) -> None:
        first = build_clients(_settings(), region="eu-west-1")
        second = build_clients(_settings(), region="us-east-1")

        assert first.directory_cache is not second.directory_cache
