"""
Property log API endpoints.

Hand-written log entries are attributed to the proxy-resolved user unless
the body names one explicitly.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estate.api.deps import get_current_user, list_params
from estate.api.errors import http_errors
from estate.db import models, schemas
from estate.db.database import get_db
from estate.services.property_log_service import PropertyLogService

router = APIRouter(prefix="/api/property-logs", tags=["property-logs"])


@router.post("", response_model=schemas.PropertyLog, status_code=status.HTTP_201_CREATED)
def create_property_log_endpoint(
    log: schemas.PropertyLogCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
):
    if log.user_id is None:
        log = log.model_copy(update={"user_id": current_user.id})
    with http_errors("property log"):
        return PropertyLogService(db).create(log)


@router.get("", response_model=List[schemas.PropertyLog])
def list_property_logs_endpoint(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    with http_errors("property log"):
        return PropertyLogService(db).find_all(**params)


@router.get("/{log_id}", response_model=schemas.PropertyLog)
def get_property_log_endpoint(log_id: int, db: Session = Depends(get_db)):
    with http_errors("property log"):
        return PropertyLogService(db).find_by_id(log_id)


@router.put("/{log_id}", response_model=schemas.PropertyLog)
def update_property_log_endpoint(log_id: int, log: schemas.PropertyLogUpdate, db: Session = Depends(get_db)):
    with http_errors("property log"):
        return PropertyLogService(db).update(log_id, log)


@router.delete("/{log_id}")
def delete_property_log_endpoint(log_id: int, db: Session = Depends(get_db)):
    with http_errors("property log"):
        PropertyLogService(db).delete(log_id)
    return {"message": "Property log deleted successfully"}
