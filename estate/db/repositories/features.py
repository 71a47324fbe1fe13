"""
Feature repository functions.
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from estate.db import models
from estate.db.repositories.base import apply_patch, commit, get_row, list_rows, save_new, soft_delete


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.Feature, limit, offset, order)


def find_by_id(db: Session, feature_id: int) -> models.Feature:
    return get_row(db, models.Feature, feature_id)


def create(db: Session, feature: models.Feature) -> models.Feature:
    return save_new(db, feature, "feature")


def update(db: Session, feature_id: int, patch: dict) -> models.Feature:
    db_feature = find_by_id(db, feature_id)
    apply_patch(db_feature, patch)
    commit(db, "updating", f"feature {feature_id}")
    return find_by_id(db, feature_id)


def delete(db: Session, feature_id: int) -> None:
    soft_delete(db, models.Feature, feature_id, "feature")
