"""
Work type API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estate.api.deps import list_params
from estate.api.errors import http_errors
from estate.db import schemas
from estate.db.database import get_db
from estate.services.work_type_service import WorkTypeService

router = APIRouter(prefix="/api/work-types", tags=["work-types"])


@router.post("", response_model=schemas.WorkType, status_code=status.HTTP_201_CREATED)
def create_work_type_endpoint(work_type: schemas.WorkTypeCreate, db: Session = Depends(get_db)):
    with http_errors("work type"):
        return WorkTypeService(db).create(work_type)


@router.get("", response_model=List[schemas.WorkType])
def list_work_types_endpoint(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    with http_errors("work type"):
        return WorkTypeService(db).find_all(**params)


@router.get("/{work_type_id}", response_model=schemas.WorkType)
def get_work_type_endpoint(work_type_id: int, db: Session = Depends(get_db)):
    with http_errors("work type"):
        return WorkTypeService(db).find_by_id(work_type_id)


@router.put("/{work_type_id}", response_model=schemas.WorkType)
def update_work_type_endpoint(work_type_id: int, work_type: schemas.WorkTypeUpdate, db: Session = Depends(get_db)):
    with http_errors("work type"):
        return WorkTypeService(db).update(work_type_id, work_type)


@router.delete("/{work_type_id}")
def delete_work_type_endpoint(work_type_id: int, db: Session = Depends(get_db)):
    with http_errors("work type"):
        WorkTypeService(db).delete(work_type_id)
    return {"message": "Work type deleted successfully"}
