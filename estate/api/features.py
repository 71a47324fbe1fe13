"""
Feature API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estate.api.deps import list_params
from estate.api.errors import http_errors
from estate.db import schemas
from estate.db.database import get_db
from estate.services.feature_service import FeatureService

router = APIRouter(prefix="/api/features", tags=["features"])


@router.post("", response_model=schemas.Feature, status_code=status.HTTP_201_CREATED)
def create_feature_endpoint(feature: schemas.FeatureCreate, db: Session = Depends(get_db)):
    with http_errors("feature"):
        return FeatureService(db).create(feature)


@router.get("", response_model=List[schemas.Feature])
def list_features_endpoint(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    with http_errors("feature"):
        return FeatureService(db).find_all(**params)


@router.get("/{feature_id}", response_model=schemas.Feature)
def get_feature_endpoint(feature_id: int, db: Session = Depends(get_db)):
    with http_errors("feature"):
        return FeatureService(db).find_by_id(feature_id)


@router.put("/{feature_id}", response_model=schemas.Feature)
def update_feature_endpoint(feature_id: int, feature: schemas.FeatureUpdate, db: Session = Depends(get_db)):
    with http_errors("feature"):
        return FeatureService(db).update(feature_id, feature)


@router.delete("/{feature_id}")
def delete_feature_endpoint(feature_id: int, db: Session = Depends(get_db)):
    with http_errors("feature"):
        FeatureService(db).delete(feature_id)
    return {"message": "Feature deleted successfully"}
