"""Services composed on top of the providers."""

from awskit.services.lookup_cache import DirectoryLookupCache

__all__ = ["DirectoryLookupCache"]
