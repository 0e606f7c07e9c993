"""
S3 Blob Storage
===============

BlobStorage implementation backed by an S3-compatible bucket.
Stores uploaded driver documents; the object key doubles as the public id.
"""
import logging
import mimetypes
import os
import uuid
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from app.core.config import Settings, get_settings
from app.domain.models.driver_application import StoredFile, UploadedDocument
from app.domain.ports.blob_storage import BlobStorage

logger = logging.getLogger(__name__)


class S3BlobStorage(BlobStorage):
    """
    Production storage adapter.

    Credentials fall back to boto3's own discovery (env vars, instance
    profile) when not configured explicitly.
    """

    def __init__(self, settings: Optional[Settings] = None, s3_client: Any = None):
        self._settings = settings or get_settings()
        self._bucket = self._settings.s3_bucket
        self._client = s3_client or boto3.client(
            "s3",
            region_name=self._settings.s3_region,
            endpoint_url=self._settings.s3_endpoint_url,
            aws_access_key_id=self._settings.aws_access_key_id,
            aws_secret_access_key=self._settings.aws_secret_access_key,
        )

    def upload(self, document: UploadedDocument, folder: str) -> StoredFile:
        """Upload a document under ``folder`` and return its reference."""
        key = self._build_key(document.filename, folder)
        content_type = document.content_type or mimetypes.guess_type(document.filename)[0]

        self._put_object(key, document.content, content_type or "application/octet-stream")
        logger.info(f"Uploaded {document.filename} to s3://{self._bucket}/{key}")
        return StoredFile(public_id=key, url=self._public_url(key))

    def delete(self, public_id: str) -> bool:
        """Delete an object; failures are reported, not raised."""
        try:
            self._client.delete_object(Bucket=self._bucket, Key=public_id)
        except (ClientError, BotoCoreError) as e:
            logger.warning(f"Failed to delete s3://{self._bucket}/{public_id}: {e}")
            return False
        logger.info(f"Deleted s3://{self._bucket}/{public_id}")
        return True

    # --- Helpers ---

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception_type((ClientError, BotoCoreError)),
        reraise=True,
    )
    def _put_object(self, key: str, data: bytes, content_type: str) -> None:
        """Sync boto3 upload with retries."""
        self._client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=data,
            ContentType=content_type,
        )

    def _build_key(self, filename: str, folder: str) -> str:
        extension = os.path.splitext(filename or "")[1].lower()
        return f"{folder.strip('/')}/{uuid.uuid4().hex}{extension}"

    def _public_url(self, key: str) -> str:
        if self._settings.s3_public_base_url:
            return f"{self._settings.s3_public_base_url.rstrip('/')}/{key}"
        return f"https://{self._bucket}.s3.{self._settings.s3_region}.amazonaws.com/{key}"
