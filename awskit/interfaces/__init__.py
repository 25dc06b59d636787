"""Public interface definitions for the AWS service providers.

Every AWS service is reached through one of the abstract base classes here.
Concrete boto3 adapters live in ``awskit/providers/`` and are wired together
by ``awskit.main.build_clients``.  Tests substitute fakes for the interfaces
instead of patching boto3 wherever they only care about the contract.

    Interface                →  Concrete implementation
    ─────────────────────────────────────────────────────
    IObjectStorageProvider   →  S3StorageProvider
    IFunctionProvider        →  LambdaFunctionProvider
    IDirectoryProvider       →  CognitoDirectoryProvider
"""

from awskit.interfaces.directory_provider import IDirectoryProvider
from awskit.interfaces.function_provider import IFunctionProvider
from awskit.interfaces.object_storage_provider import IObjectStorageProvider

__all__ = [
    "IDirectoryProvider",
    "IFunctionProvider",
    "IObjectStorageProvider",
]
