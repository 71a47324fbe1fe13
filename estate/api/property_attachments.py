"""
Property attachment API endpoints.

Records are normally created through the property upload route; direct
creation is admin-only. The download route streams the stored object and
removes the local copy once sent.
"""
import os
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session
from starlette.background import BackgroundTask

from estate.api.deps import get_storage, list_params, require_admin
from estate.api.errors import http_errors
from estate.db import models, schemas
from estate.db.database import get_db
from estate.services.object_storage import ObjectStorage
from estate.services.property_attachment_service import PropertyAttachmentService

router = APIRouter(prefix="/api/property-attachments", tags=["property-attachments"])


def _service(db: Session = Depends(get_db), storage: ObjectStorage = Depends(get_storage)) -> PropertyAttachmentService:
    return PropertyAttachmentService(db, storage=storage)


@router.post("", response_model=schemas.PropertyAttachment, status_code=status.HTTP_201_CREATED)
def create_attachment_endpoint(
    attachment: schemas.PropertyAttachmentCreate,
    service: PropertyAttachmentService = Depends(_service),
    current_user: models.User = Depends(require_admin),
):
    with http_errors("property attachment"):
        return service.create(attachment)


@router.get("", response_model=List[schemas.PropertyAttachment])
def list_attachments_endpoint(params: dict = Depends(list_params), service: PropertyAttachmentService = Depends(_service)):
    with http_errors("property attachment"):
        return service.find_all(**params)


@router.get("/{attachment_id}", response_model=schemas.PropertyAttachment)
def get_attachment_endpoint(attachment_id: int, service: PropertyAttachmentService = Depends(_service)):
    with http_errors("property attachment"):
        return service.find_by_id(attachment_id)


@router.get("/{attachment_id}/download")
def download_attachment_endpoint(attachment_id: int, service: PropertyAttachmentService = Depends(_service)):
    with http_errors("property attachment"):
        attachment = service.find_by_id(attachment_id)
        path = service.download_property_attachment(attachment_id)
    return FileResponse(
        path,
        filename=attachment.file_name,
        background=BackgroundTask(os.remove, path),
    )


@router.put("/{attachment_id}", response_model=schemas.PropertyAttachment)
def update_attachment_endpoint(
    attachment_id: int,
    attachment: schemas.PropertyAttachmentUpdate,
    service: PropertyAttachmentService = Depends(_service),
):
    with http_errors("property attachment"):
        return service.update(attachment_id, attachment)


@router.delete("/{attachment_id}")
def delete_attachment_endpoint(attachment_id: int, service: PropertyAttachmentService = Depends(_service)):
    with http_errors("property attachment"):
        service.delete(attachment_id)
    return {"message": "Property attachment deleted successfully"}
