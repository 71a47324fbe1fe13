"""
Work type repository functions.
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from estate.db import models
from estate.db.repositories.base import apply_patch, commit, get_row, list_rows, save_new, soft_delete


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.WorkType, limit, offset, order)


def find_by_id(db: Session, work_type_id: int) -> models.WorkType:
    return get_row(db, models.WorkType, work_type_id)


def find_by_name(db: Session, name: str, include_deleted: bool = False):
    """Return the work type called ``name`` or ``None``."""
    q = db.query(models.WorkType).filter(models.WorkType.name == name)
    if include_deleted:
        q = q.execution_options(include_deleted=True)
    return q.first()


def create(db: Session, work_type: models.WorkType) -> models.WorkType:
    return save_new(db, work_type, "work type")


def update(db: Session, work_type_id: int, patch: dict) -> models.WorkType:
    db_work_type = find_by_id(db, work_type_id)
    apply_patch(db_work_type, patch)
    commit(db, "updating", f"work type {work_type_id}")
    return find_by_id(db, work_type_id)


def delete(db: Session, work_type_id: int) -> None:
    soft_delete(db, models.WorkType, work_type_id, "work type")
