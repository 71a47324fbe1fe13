from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import property_logs as property_log_repo


class PropertyLogService:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return property_log_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, log_id: int) -> models.PropertyLog:
        return property_log_repo.find_by_id(self.db, log_id)

    def create(self, log: schemas.PropertyLogCreate) -> models.PropertyLog:
        return property_log_repo.create(self.db, models.PropertyLog(**log.model_dump()))

    def update(self, log_id: int, log: schemas.PropertyLogUpdate) -> models.PropertyLog:
        return property_log_repo.update(self.db, log_id, log.model_dump(exclude_unset=True))

    def delete(self, log_id: int) -> None:
        property_log_repo.delete(self.db, log_id)
