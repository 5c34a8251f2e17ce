# app/document/services.py
import logging

from app.document.schemas import StoredObject, UploadOut
from app.document.storage import ObjectStorage

logger = logging.getLogger(__name__)


def upload_document(storage: ObjectStorage, filename: str, data: bytes, content_type: str | None = None) -> UploadOut:
    # The original filename is the key, so same-name uploads overwrite each other
    result = storage.put(filename, data, content_type=content_type)
    logger.info("Uploaded %s (%d bytes)", filename, len(data))
    return UploadOut(data=StoredObject(**result))
