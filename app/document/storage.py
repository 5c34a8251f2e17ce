# app/document/storage.py
import hashlib
import logging
import threading
from functools import lru_cache
from typing import Any, Protocol

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from requests.exceptions import RequestException
from google.cloud import storage

from app.core.config import get_settings
from app.core.errors import StorageError

logger = logging.getLogger(__name__)


class ObjectStorage(Protocol):
    def put(self, key: str, data: bytes, content_type: str | None = None) -> dict[str, Any]: ...


class GCSStorage:
    def __init__(self, bucket_name: str, client: storage.Client | None = None):
        self.bucket_name = bucket_name
        self._client = client

    @property
    def client(self) -> storage.Client:
        if self._client is None:
            self._client = storage.Client()
        return self._client

    def put(self, key: str, data: bytes, content_type: str | None = None) -> dict[str, Any]:
        try:
            blob = self.client.bucket(self.bucket_name).blob(key)
            blob.upload_from_string(data, content_type=content_type or "application/octet-stream")
        except (GoogleAPIError, GoogleAuthError, RequestException, ValueError) as e:
            raise StorageError(str(e)) from e
        return {
            "bucket": self.bucket_name,
            "key": key,
            "location": blob.public_url,
            "etag": blob.etag,
            "size": blob.size if blob.size is not None else len(data),
        }


class InMemoryStorage:
    """Bucket held in a dict. Useful for local runs and tests."""

    def __init__(self, bucket_name: str = "memory"):
        self.bucket_name = bucket_name
        self.objects: dict[str, bytes] = {}
        self.content_types: dict[str, str | None] = {}
        self._lock = threading.Lock()

    def put(self, key: str, data: bytes, content_type: str | None = None) -> dict[str, Any]:
        with self._lock:
            self.objects[key] = data
            self.content_types[key] = content_type
        return {
            "bucket": self.bucket_name,
            "key": key,
            "location": f"memory://{self.bucket_name}/{key}",
            "etag": hashlib.md5(data).hexdigest(),
            "size": len(data),
        }


@lru_cache
def get_storage() -> ObjectStorage:
    settings = get_settings()
    if settings.STORAGE_BACKEND == "gcs":
        logger.info("Using GCS bucket %s for documents", settings.STORAGE_BUCKET)
        return GCSStorage(settings.STORAGE_BUCKET)
    return InMemoryStorage(settings.STORAGE_BUCKET)
