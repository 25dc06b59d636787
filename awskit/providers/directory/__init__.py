"""Identity-directory providers.

CognitoDirectoryProvider talks to Cognito directly and is never cached
itself.  Wrap it in ``awskit.services.lookup_cache.DirectoryLookupCache``
for memoized lookups by sub.
"""

from awskit.providers.directory.cognito_provider import CognitoDirectoryProvider

__all__ = ["CognitoDirectoryProvider"]
