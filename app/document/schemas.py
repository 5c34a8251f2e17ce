# app/document/schemas.py
from pydantic import BaseModel


class StoredObject(BaseModel):
    bucket: str
    key: str
    location: str
    etag: str | None = None
    size: int


class UploadOut(BaseModel):
    message: str = "File uploaded successfully"
    data: StoredObject
