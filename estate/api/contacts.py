"""
Contact API endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from estate.api.deps import list_params
from estate.api.errors import http_errors
from estate.db import schemas
from estate.db.database import get_db
from estate.services.contact_service import ContactService

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.post("", response_model=schemas.Contact, status_code=status.HTTP_201_CREATED)
def create_contact_endpoint(contact: schemas.ContactCreate, db: Session = Depends(get_db)):
    with http_errors("contact"):
        return ContactService(db).create(contact)


@router.get("", response_model=List[schemas.Contact])
def list_contacts_endpoint(params: dict = Depends(list_params), db: Session = Depends(get_db)):
    with http_errors("contact"):
        return ContactService(db).find_all(**params)


@router.get("/{contact_id}", response_model=schemas.Contact)
def get_contact_endpoint(contact_id: int, db: Session = Depends(get_db)):
    with http_errors("contact"):
        return ContactService(db).find_by_id(contact_id)


@router.put("/{contact_id}", response_model=schemas.Contact)
def update_contact_endpoint(contact_id: int, contact: schemas.ContactUpdate, db: Session = Depends(get_db)):
    with http_errors("contact"):
        return ContactService(db).update(contact_id, contact)


@router.delete("/{contact_id}")
def delete_contact_endpoint(contact_id: int, db: Session = Depends(get_db)):
    with http_errors("contact"):
        ContactService(db).delete(contact_id)
    return {"message": "Contact deleted successfully"}
