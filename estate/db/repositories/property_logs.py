"""
Property log repository functions.
"""
from __future__ import annotations

from sqlalchemy.orm import Session, joinedload

from estate.db import models
from estate.db.repositories.base import apply_patch, commit, get_row, list_rows, save_new, soft_delete

_DETAIL = (
    joinedload(models.PropertyLog.user),
    joinedload(models.PropertyLog.property),
)


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.PropertyLog, limit, offset, order, options=_DETAIL)


def find_by_id(db: Session, log_id: int) -> models.PropertyLog:
    return get_row(db, models.PropertyLog, log_id, options=_DETAIL)


def create(db: Session, log: models.PropertyLog) -> models.PropertyLog:
    # The owning property must be live
    get_row(db, models.Property, log.property_id)
    return save_new(db, log, "property log")


def update(db: Session, log_id: int, patch: dict) -> models.PropertyLog:
    db_log = find_by_id(db, log_id)
    apply_patch(db_log, patch)
    commit(db, "updating", f"property log {log_id}")
    return find_by_id(db, log_id)


def delete(db: Session, log_id: int) -> None:
    soft_delete(db, models.PropertyLog, log_id, "property log")
