from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import contacts as contact_repo


class ContactService:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return contact_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, contact_id: int) -> models.Contact:
        return contact_repo.find_by_id(self.db, contact_id)

    def create(self, contact: schemas.ContactCreate) -> models.Contact:
        db_contact = models.Contact(**contact.model_dump(exclude={"property_ids"}))
        return contact_repo.create(self.db, db_contact, property_ids=contact.property_ids)

    def update(self, contact_id: int, contact: schemas.ContactUpdate) -> models.Contact:
        patch = contact.model_dump(exclude_unset=True, exclude={"property_ids"})
        return contact_repo.update(self.db, contact_id, patch, property_ids=contact.property_ids)

    def delete(self, contact_id: int) -> None:
        contact_repo.delete(self.db, contact_id)
