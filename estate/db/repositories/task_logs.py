"""
Task log repository functions.
"""
from __future__ import annotations

from sqlalchemy.orm import Session, joinedload

from estate.db import models
from estate.db.repositories.base import apply_patch, commit, get_row, list_rows, save_new, soft_delete

_DETAIL = (
    joinedload(models.TaskLog.user),
    joinedload(models.TaskLog.task),
)


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.TaskLog, limit, offset, order, options=_DETAIL)


def find_by_id(db: Session, log_id: int) -> models.TaskLog:
    return get_row(db, models.TaskLog, log_id, options=_DETAIL)


def create(db: Session, log: models.TaskLog) -> models.TaskLog:
    get_row(db, models.Task, log.task_id)
    return save_new(db, log, "task log")


def update(db: Session, log_id: int, patch: dict) -> models.TaskLog:
    db_log = find_by_id(db, log_id)
    apply_patch(db_log, patch)
    commit(db, "updating", f"task log {log_id}")
    return find_by_id(db, log_id)


def delete(db: Session, log_id: int) -> None:
    soft_delete(db, models.TaskLog, log_id, "task log")
