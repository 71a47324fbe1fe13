"""
User repository functions.
"""
from __future__ import annotations

from sqlalchemy.orm import Session

from estate.db import models
from estate.db.repositories.base import apply_patch, commit, get_row, list_rows, save_new, soft_delete


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.User, limit, offset, order)


def find_by_id(db: Session, user_id: int) -> models.User:
    return get_row(db, models.User, user_id)


def find_by_email(db: Session, email: str) -> models.User:
    """Return the live user with ``email``; raise ``NoResultFound`` otherwise."""
    return db.query(models.User).filter(models.User.email == email).one()


def create(db: Session, user: models.User) -> models.User:
    if not user.role:
        user.role = "user"
    return save_new(db, user, "user")


def update(db: Session, user_id: int, patch: dict) -> models.User:
    db_user = find_by_id(db, user_id)
    apply_patch(db_user, patch)
    commit(db, "updating", f"user {user_id}")
    return find_by_id(db, user_id)


def delete(db: Session, user_id: int) -> None:
    soft_delete(db, models.User, user_id, "user")
