"""Object-storage providers.

S3StorageProvider wraps a boto3 S3 client.  It also works against
S3-compatible stores (MinIO, LocalStack) when the client is built with a
custom endpoint URL.
"""

from awskit.providers.storage.s3_provider import S3StorageProvider

__all__ = ["S3StorageProvider"]
