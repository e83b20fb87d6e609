"""
Shared S3/MinIO storage utilities.
"""
import logging
import os
import uuid
from typing import Optional, BinaryIO

from django.conf import settings

logger = logging.getLogger(__name__)


class S3Storage:
    """S3/MinIO storage utility class."""

    def __init__(self, bucket_name: str = None):
        self.bucket_name = bucket_name or settings.AWS_STORAGE_BUCKET_NAME
        self._client = None

    @property
    def client(self):
        """Lazy load S3 client."""
        if self._client is None:
            import boto3
            self._client = boto3.client(
                's3',
                endpoint_url=settings.AWS_S3_ENDPOINT_URL,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                region_name=settings.AWS_S3_REGION_NAME,
            )
        return self._client

    @property
    def public_base_url(self) -> str:
        base = getattr(settings, 'AWS_S3_PUBLIC_URL', '') or settings.AWS_S3_ENDPOINT_URL
        return f"{base.rstrip('/')}/{self.bucket_name}"

    def upload_file(
        self,
        file_obj: BinaryIO,
        key: str = None,
        content_type: str = None,
    ) -> str:
        """Upload file to S3 and return the key."""
        if key is None:
            key = f"uploads/{uuid.uuid4()}"

        extra_args = {}
        if content_type:
            extra_args['ContentType'] = content_type

        self.client.upload_fileobj(
            file_obj,
            self.bucket_name,
            key,
            ExtraArgs=extra_args,
        )
        return key

    def upload_image(self, uploaded_file, prefix: str = None) -> str:
        """Upload an image under `prefix` and return its public URL."""
        prefix = prefix or getattr(settings, 'ASSET_IMAGE_PREFIX', 'assets')
        _, ext = os.path.splitext(getattr(uploaded_file, 'name', '') or '')
        key = f"{prefix}/{uuid.uuid4()}{ext.lower()}"
        self.upload_file(
            uploaded_file,
            key=key,
            content_type=getattr(uploaded_file, 'content_type', None),
        )
        return self.get_public_url(key)

    def get_public_url(self, key: str) -> str:
        """Public URL for an object key."""
        return f"{self.public_base_url}/{key}"

    def key_from_url(self, url: str) -> Optional[str]:
        """Object key for a URL produced by get_public_url, or None."""
        base = f"{self.public_base_url}/"
        if url and url.startswith(base):
            return url[len(base):]
        return None

    def delete_file(self, key: str) -> bool:
        """Delete file from S3."""
        try:
            self.client.delete_object(Bucket=self.bucket_name, Key=key)
            return True
        except Exception:
            logger.warning(f"Failed to delete object {key}", exc_info=True)
            return False


# Default storage instance
default_storage = S3Storage()
