"""
Property attachment repository functions.
"""
from __future__ import annotations

from sqlalchemy.orm import Session, joinedload

from estate.db import models
from estate.db.repositories.base import apply_patch, commit, get_row, list_rows, save_new, soft_delete

_DETAIL = (joinedload(models.PropertyAttachment.property),)


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.PropertyAttachment, limit, offset, order)


def find_by_id(db: Session, attachment_id: int) -> models.PropertyAttachment:
    return get_row(db, models.PropertyAttachment, attachment_id, options=_DETAIL)


def find_by_property(db: Session, property_id: int):
    return (
        db.query(models.PropertyAttachment)
        .filter(models.PropertyAttachment.property_id == property_id)
        .order_by(models.PropertyAttachment.id)
        .all()
    )


def create(db: Session, attachment: models.PropertyAttachment) -> models.PropertyAttachment:
    get_row(db, models.Property, attachment.property_id)
    db_attachment = save_new(db, attachment, "property attachment")
    return find_by_id(db, db_attachment.id)


def update(db: Session, attachment_id: int, patch: dict) -> models.PropertyAttachment:
    db_attachment = find_by_id(db, attachment_id)
    apply_patch(db_attachment, patch)
    commit(db, "updating", f"property attachment {attachment_id}")
    return find_by_id(db, attachment_id)


def delete(db: Session, attachment_id: int) -> None:
    soft_delete(db, models.PropertyAttachment, attachment_id, "property attachment")
