"""Configuration module: exports Settings and a module-level instance."""

from awskit.config.settings import Settings

settings = Settings()

__all__ = ["Settings", "settings"]
