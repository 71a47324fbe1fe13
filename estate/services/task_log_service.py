from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import task_logs as task_log_repo


class TaskLogService:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return task_log_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, log_id: int) -> models.TaskLog:
        return task_log_repo.find_by_id(self.db, log_id)

    def create(self, log: schemas.TaskLogCreate) -> models.TaskLog:
        return task_log_repo.create(self.db, models.TaskLog(**log.model_dump()))

    def update(self, log_id: int, log: schemas.TaskLogUpdate) -> models.TaskLog:
        return task_log_repo.update(self.db, log_id, log.model_dump(exclude_unset=True))

    def delete(self, log_id: int) -> None:
        task_log_repo.delete(self.db, log_id)
