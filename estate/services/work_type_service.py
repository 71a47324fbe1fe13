from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import work_types as work_type_repo


class WorkTypeService:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return work_type_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, work_type_id: int) -> models.WorkType:
        return work_type_repo.find_by_id(self.db, work_type_id)

    def create(self, work_type: schemas.WorkTypeCreate) -> models.WorkType:
        return work_type_repo.create(self.db, models.WorkType(name=work_type.name))

    def update(self, work_type_id: int, work_type: schemas.WorkTypeUpdate) -> models.WorkType:
        return work_type_repo.update(self.db, work_type_id, work_type.model_dump(exclude_unset=True))

    def delete(self, work_type_id: int) -> None:
        work_type_repo.delete(self.db, work_type_id)
