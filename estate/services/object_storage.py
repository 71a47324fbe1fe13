"""
Object Storage

S3-compatible object storage gateway (AWS S3, DigitalOcean Spaces, MinIO)
used for property attachments. Uses boto3; the client is built from
environment configuration on first use.
"""

import os
import logging
import tempfile
from typing import Optional, List, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)


class ObjectStorageError(RuntimeError):
    """Upload or download against object storage failed."""


class ObjectStorageConfig:
    """Configuration for object storage from environment variables."""

    def __init__(self):
        self.access_key_id = os.getenv('AWS_ACCESS_KEY_ID', '')
        self.secret_access_key = os.getenv('AWS_SECRET_ACCESS_KEY', '')
        self.endpoint = os.getenv('ENDPOINT', '')
        self.region = os.getenv('AWS_REGION', '')
        self.bucket = os.getenv('BUCKET', '')

        # Local scratch space
        self.scratch_dir = os.getenv('ATTACHMENT_SCRATCH_DIR', './temp')
        self.download_dir = os.getenv('ATTACHMENT_DOWNLOAD_DIR', tempfile.gettempdir())

    def is_configured(self) -> bool:
        """Check if object storage is properly configured."""
        return bool(self.access_key_id and self.secret_access_key and self.bucket)

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.access_key_id:
            errors.append("AWS_ACCESS_KEY_ID is required")
        if not self.secret_access_key:
            errors.append("AWS_SECRET_ACCESS_KEY is required")
        if not self.bucket:
            errors.append("BUCKET is required")
        if self.endpoint and not self.endpoint.startswith(('http://', 'https://')):
            errors.append("ENDPOINT must be an http(s) URL")

        return errors


def object_key(key_path: str) -> str:
    """Normalise a key path for storage: spaces become underscores."""
    return key_path.replace(' ', '_')


class ObjectStorage:
    """Upload and download files against a single bucket."""

    def __init__(self, config: Optional[ObjectStorageConfig] = None, client=None):
        self.config = config or ObjectStorageConfig()
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client(
                's3',
                aws_access_key_id=self.config.access_key_id or None,
                aws_secret_access_key=self.config.secret_access_key or None,
                endpoint_url=self.config.endpoint or None,
                region_name=self.config.region or None,
            )
        return self._client

    def upload_file(self, file_path: str, key_path: str, is_public: bool = False) -> Tuple[str, str, int]:
        """
        Upload a local file.

        Args:
            file_path: Path of the local file
            key_path: Destination key; spaces are replaced by underscores
            is_public: Use a public-read ACL instead of private

        Returns:
            Tuple of (object_key, etag, size_in_bytes)
        """
        key = object_key(key_path)
        try:
            size = os.path.getsize(file_path)
            with open(file_path, 'rb') as fh:
                response = self.client.put_object(
                    Bucket=self.config.bucket,
                    Key=key,
                    Body=fh,
                    ContentLength=size,
                    ACL='public-read' if is_public else 'private',
                )
        except (BotoCoreError, ClientError, OSError) as e:
            logger.exception(f"Failed to upload {file_path} to {key}")
            raise ObjectStorageError(f"Failed to upload {file_path} to {key}: {e}") from e

        etag = response.get('ETag', '')
        logger.info(f"Uploaded {key} ({size} bytes), ETag {etag}")
        return key, etag, size

    def download_temp_file(self, key: str, filename: str) -> str:
        """Fetch ``key`` into a fresh file in the download directory and return its path.

        The local name ends with the basename of ``filename`` so concurrent
        downloads of the same attachment never share a path.
        """
        name = os.path.basename(filename)
        local_path = None
        try:
            os.makedirs(self.config.download_dir, exist_ok=True)
            fd, local_path = tempfile.mkstemp(dir=self.config.download_dir, suffix=f"-{name}" if name else "")
            with os.fdopen(fd, 'wb') as fh:
                self.client.download_fileobj(self.config.bucket, key, fh)
        except (BotoCoreError, ClientError, OSError) as e:
            logger.exception(f"Failed to download {key}")
            if local_path and os.path.isfile(local_path):
                os.remove(local_path)
            raise ObjectStorageError(f"Failed to download {key}: {e}") from e
        return local_path


# Global object storage instance
_object_storage: Optional[ObjectStorage] = None


def get_object_storage() -> ObjectStorage:
    """Get singleton object storage instance."""
    global _object_storage
    if _object_storage is None:
        _object_storage = ObjectStorage()
    return _object_storage


def reset_object_storage_for_tests() -> None:  # pragma: no cover - used in tests
    global _object_storage
    _object_storage = None
