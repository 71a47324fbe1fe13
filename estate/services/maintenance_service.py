from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import maintenance as maintenance_repo


class MaintenanceRequestService:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return maintenance_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, request_id: int) -> models.MaintenanceRequest:
        return maintenance_repo.find_by_id(self.db, request_id)

    def create(self, request: schemas.MaintenanceRequestCreate) -> models.MaintenanceRequest:
        return maintenance_repo.create(self.db, models.MaintenanceRequest(**request.model_dump()))

    def update(self, request_id: int, request: schemas.MaintenanceRequestUpdate) -> models.MaintenanceRequest:
        patch = request.model_dump(exclude_unset=True, exclude={"property_id"})
        return maintenance_repo.update(self.db, request_id, patch, property_id=request.property_id)

    def delete(self, request_id: int) -> None:
        maintenance_repo.delete(self.db, request_id)
