from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import tasks as task_repo


class TaskService:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return task_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, task_id: int) -> models.Task:
        return task_repo.find_by_id(self.db, task_id)

    def create(self, task: schemas.TaskCreate) -> models.Task:
        db_task = models.Task(**task.model_dump(exclude={"assignment_ids"}))
        return task_repo.create(self.db, db_task, assignment_ids=task.assignment_ids)

    def update(self, task_id: int, task: schemas.TaskUpdate) -> models.Task:
        patch = task.model_dump(exclude_unset=True, exclude={"assignment_ids"})
        return task_repo.update(self.db, task_id, patch, assignment_ids=task.assignment_ids)

    def delete(self, task_id: int) -> None:
        task_repo.delete(self.db, task_id)
