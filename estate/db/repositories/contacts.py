"""
Contact repository functions.
"""
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy.orm import Session, selectinload

from estate.db import models
from estate.db.repositories.base import (
    append_missing,
    apply_patch,
    commit,
    get_row,
    list_rows,
    resolve_ids,
    save_new,
    soft_delete,
)

_DETAIL = (selectinload(models.Contact.properties),)


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.Contact, limit, offset, order)


def find_by_id(db: Session, contact_id: int) -> models.Contact:
    return get_row(db, models.Contact, contact_id, options=_DETAIL)


def create(db: Session, contact: models.Contact, property_ids: Sequence[int] = ()) -> models.Contact:
    db_contact = save_new(db, contact, "contact")
    if property_ids:
        append_missing(db_contact.properties, resolve_ids(db, models.Property, property_ids))
        commit(db, "linking", f"contact {db_contact.id}")
    return find_by_id(db, db_contact.id)


def update(
    db: Session,
    contact_id: int,
    patch: dict,
    property_ids: Optional[Sequence[int]] = None,
) -> models.Contact:
    db_contact = find_by_id(db, contact_id)
    apply_patch(db_contact, patch)
    commit(db, "updating", f"contact {contact_id}")
    if property_ids:
        db_contact.properties = resolve_ids(db, models.Property, property_ids)
        commit(db, "linking", f"contact {contact_id}")
    return find_by_id(db, contact_id)


def delete(db: Session, contact_id: int) -> None:
    soft_delete(db, models.Contact, contact_id, "contact")
