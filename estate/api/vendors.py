"""
Vendor API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estate.api.deps import list_params
from estate.api.errors import http_errors
from estate.db import schemas
from estate.db.database import get_db
from estate.services.vendor_service import VendorService

router = APIRouter(prefix="/api/vendors", tags=["vendors"])


@router.post("", response_model=schemas.Vendor, status_code=status.HTTP_201_CREATED)
def create_vendor_endpoint(vendor: schemas.VendorCreate, db: Session = Depends(get_db)):
    with http_errors("vendor"):
        return VendorService(db).create(vendor)


@router.get("", response_model=List[schemas.Vendor])
def list_vendors_endpoint(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    with http_errors("vendor"):
        return VendorService(db).find_all(**params)


@router.get("/{vendor_id}", response_model=schemas.Vendor)
def get_vendor_endpoint(vendor_id: int, db: Session = Depends(get_db)):
    with http_errors("vendor"):
        return VendorService(db).find_by_id(vendor_id)


@router.put("/{vendor_id}", response_model=schemas.Vendor)
def update_vendor_endpoint(vendor_id: int, vendor: schemas.VendorUpdate, db: Session = Depends(get_db)):
    with http_errors("vendor"):
        return VendorService(db).update(vendor_id, vendor)


@router.delete("/{vendor_id}")
def delete_vendor_endpoint(vendor_id: int, db: Session = Depends(get_db)):
    with http_errors("vendor"):
        VendorService(db).delete(vendor_id)
    return {"message": "Vendor deleted successfully"}
