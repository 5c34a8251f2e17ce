# app/document/routes.py
from fastapi import APIRouter, Depends, File, UploadFile
from app.document.schemas import UploadOut
from app.document.storage import ObjectStorage, get_storage
from app.document import services as document_service

router = APIRouter(prefix="/api/documents", tags=["Documents"])


@router.post("/upload", response_model=UploadOut)
def upload(file: UploadFile = File(...), storage: ObjectStorage = Depends(get_storage)):
    data = file.file.read()
    return document_service.upload_document(storage, file.filename or "", data, file.content_type)
