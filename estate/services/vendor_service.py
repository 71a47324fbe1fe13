from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import vendors as vendor_repo


class VendorService:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return vendor_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, vendor_id: int) -> models.Vendor:
        return vendor_repo.find_by_id(self.db, vendor_id)

    def create(self, vendor: schemas.VendorCreate) -> models.Vendor:
        db_vendor = models.Vendor(**vendor.model_dump(exclude={"work_type_ids"}))
        return vendor_repo.create(self.db, db_vendor, work_type_ids=vendor.work_type_ids)

    def update(self, vendor_id: int, vendor: schemas.VendorUpdate) -> models.Vendor:
        patch = vendor.model_dump(exclude_unset=True, exclude={"work_type_ids"})
        return vendor_repo.update(self.db, vendor_id, patch, work_type_ids=vendor.work_type_ids)

    def delete(self, vendor_id: int) -> None:
        vendor_repo.delete(self.db, vendor_id)
