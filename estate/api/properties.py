"""
Property API endpoints, including attachment upload.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from estate.api.deps import get_optional_user, get_storage, list_params
from estate.api.errors import http_errors
from estate.db import models, schemas
from estate.db.database import get_db
from estate.services.object_storage import ObjectStorage
from estate.services.property_attachment_service import PropertyAttachmentService
from estate.services.property_service import PropertyService

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.post("", response_model=schemas.Property, status_code=status.HTTP_201_CREATED)
def create_property_endpoint(prop: schemas.PropertyCreate, db: Session = Depends(get_db)):
    with http_errors("property"):
        return PropertyService(db).create(prop)


@router.get("", response_model=List[schemas.Property])
def list_properties_endpoint(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    with http_errors("property"):
        return PropertyService(db).find_all(**params)


@router.get("/{property_id}", response_model=schemas.Property)
def get_property_endpoint(property_id: int, db: Session = Depends(get_db)):
    with http_errors("property"):
        return PropertyService(db).find_by_id(property_id)


@router.put("/{property_id}", response_model=schemas.Property)
def update_property_endpoint(
    property_id: int,
    prop: schemas.PropertyUpdate,
    db: Session = Depends(get_db),
    actor: Optional[models.User] = Depends(get_optional_user),
):
    with http_errors("property"):
        return PropertyService(db).update(property_id, prop, actor_id=actor.id if actor else None)


@router.delete("/{property_id}")
def delete_property_endpoint(property_id: int, db: Session = Depends(get_db)):
    with http_errors("property"):
        PropertyService(db).delete(property_id)
    return {"message": "Property deleted successfully"}


@router.post(
    "/{property_id}/attachments",
    response_model=schemas.PropertyAttachment,
    status_code=status.HTTP_201_CREATED,
)
def upload_property_attachment_endpoint(
    property_id: int,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    storage: ObjectStorage = Depends(get_storage),
):
    service = PropertyAttachmentService(db, storage=storage)
    with http_errors("property"):
        try:
            return service.attach_to_property(property_id, file)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{property_id}/attachments", response_model=List[schemas.PropertyAttachment])
def list_property_attachments_endpoint(
    property_id: int,
    db: Session = Depends(get_db),
    storage: ObjectStorage = Depends(get_storage),
):
    with http_errors("property"):
        return PropertyAttachmentService(db, storage=storage).find_by_property(property_id)
