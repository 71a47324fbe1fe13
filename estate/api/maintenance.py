"""
Maintenance request API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estate.api.deps import list_params
from estate.api.errors import http_errors
from estate.db import schemas
from estate.db.database import get_db
from estate.services.maintenance_service import MaintenanceRequestService

router = APIRouter(prefix="/api/maintenance", tags=["maintenance"])


@router.post("", response_model=schemas.MaintenanceRequest, status_code=status.HTTP_201_CREATED)
def create_maintenance_request_endpoint(maintenance_request: schemas.MaintenanceRequestCreate, db: Session = Depends(get_db)):
    with http_errors("maintenance request"):
        return MaintenanceRequestService(db).create(maintenance_request)


@router.get("", response_model=List[schemas.MaintenanceRequest])
def list_maintenance_endpoint(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    with http_errors("maintenance request"):
        return MaintenanceRequestService(db).find_all(**params)


@router.get("/{request_id}", response_model=schemas.MaintenanceRequest)
def get_maintenance_request_endpoint(request_id: int, db: Session = Depends(get_db)):
    with http_errors("maintenance request"):
        return MaintenanceRequestService(db).find_by_id(request_id)


@router.put("/{request_id}", response_model=schemas.MaintenanceRequest)
def update_maintenance_request_endpoint(request_id: int, maintenance_request: schemas.MaintenanceRequestUpdate, db: Session = Depends(get_db)):
    with http_errors("maintenance request"):
        return MaintenanceRequestService(db).update(request_id, maintenance_request)


@router.delete("/{request_id}")
def delete_maintenance_request_endpoint(request_id: int, db: Session = Depends(get_db)):
    with http_errors("maintenance request"):
        MaintenanceRequestService(db).delete(request_id)
    return {"message": "Maintenance request deleted successfully"}
