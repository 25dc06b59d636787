"""Library settings loaded from environment variables via pydantic-settings.

Sources, highest priority first:

1. Environment variables, e.g. ``AWSKIT_AWS_REGION=eu-central-1``.
2. A ``.env`` file in the working directory (local development only).
3. The defaults below.

Empty strings mean "not configured": boto3 then falls back to its own
resolution chain (``AWS_REGION`` / ``AWS_PROFILE`` / shared config files /
instance metadata), exactly as if awskit had not been involved.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """awskit settings.

    Environment variables use the ``AWSKIT_`` prefix so they never collide
    with the variables boto3 reads itself.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AWSKIT_",
        extra="ignore",
    )

    # === AWS session ===
    aws_region: str = ""
    aws_profile: str = ""
    # Custom endpoint for local emulators (LocalStack, MinIO, moto server).
    aws_endpoint_url: str = ""

    # === Cognito ===
    cognito_list_limit: int = 60  # ListUsers page-size ceiling

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def json_logs(self) -> bool:
        return self.app_env == "production"
