"""
Transaction repository functions.

Contacts supplied on update are appended to the existing links; the owning
property is fixed at creation.
"""
from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy.orm import Session, joinedload, selectinload

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

_DETAIL = (
    joinedload(models.Transaction.property),
    selectinload(models.Transaction.contacts),
)


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.Transaction, limit, offset, order)


def find_by_id(db: Session, transaction_id: int) -> models.Transaction:
    return get_row(db, models.Transaction, transaction_id, options=_DETAIL)


def create(db: Session, transaction: models.Transaction, contact_ids: Sequence[int] = ()) -> models.Transaction:
    get_row(db, models.Property, transaction.property_id)
    if transaction.task_id is not None:
        get_row(db, models.Task, transaction.task_id)
    db_transaction = save_new(db, transaction, "transaction")
    if contact_ids:
        append_missing(db_transaction.contacts, resolve_ids(db, models.Contact, contact_ids))
        commit(db, "linking", f"transaction {db_transaction.id}")
    return find_by_id(db, db_transaction.id)


def update(
    db: Session,
    transaction_id: int,
    patch: dict,
    contact_ids: Optional[Sequence[int]] = None,
) -> models.Transaction:
    db_transaction = find_by_id(db, transaction_id)
    apply_patch(db_transaction, patch)
    commit(db, "updating", f"transaction {transaction_id}")
    if contact_ids:
        append_missing(db_transaction.contacts, resolve_ids(db, models.Contact, contact_ids))
        commit(db, "linking", f"transaction {transaction_id}")
    return find_by_id(db, transaction_id)


def delete(db: Session, transaction_id: int) -> None:
    soft_delete(db, models.Transaction, transaction_id, "transaction")
