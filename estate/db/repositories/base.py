"""
Shared repository helpers.

List pagination and ordering, live-row lookup, association id resolution,
patch application and commit error wrapping used by every entity module.
Soft-deleted rows are already filtered by the session hook in
``estate.db.models.base``.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from estate.db.models import now_utc

logger = logging.getLogger(__name__)

_DIRECTIONS = {"asc", "desc"}


class RepositoryError(RuntimeError):
    """A write failed and the session was rolled back."""


class InvalidOrderError(ValueError):
    """An order clause names an unknown column or direction."""


class MissingLinkError(NoResultFound):
    """An association id does not resolve to a live row."""


def order_clauses(model, order: str | None):
    """Translate ``"col [asc|desc], ..."`` into SQLAlchemy order clauses.

    An empty clause yields newest-first ordering.
    """
    if not order or not order.strip():
        return [model.created_at.desc(), model.id.desc()]

    columns = {c.key for c in sa_inspect(model).columns}
    clauses = []
    for part in order.split(","):
        tokens = part.split()
        if not tokens:
            raise InvalidOrderError(f"empty order term in {order!r}")
        if len(tokens) > 2:
            raise InvalidOrderError(f"invalid order term {part.strip()!r}")
        name = tokens[0]
        direction = tokens[1].lower() if len(tokens) == 2 else "asc"
        if name not in columns:
            raise InvalidOrderError(f"unknown order column {name!r} for {model.__tablename__}")
        if direction not in _DIRECTIONS:
            raise InvalidOrderError(f"invalid order direction {tokens[1]!r}")
        column = getattr(model, name)
        clauses.append(column.desc() if direction == "desc" else column.asc())
    return clauses


def list_rows(db: Session, model, limit: int = 0, offset: int = 0, order: str = "", options: Sequence = ()):
    """Return live rows of ``model``; ``limit``/``offset`` of 0 disable paging."""
    q = db.query(model)
    if options:
        q = q.options(*options)
    q = q.order_by(*order_clauses(model, order))
    if offset:
        q = q.offset(offset)
    if limit:
        q = q.limit(limit)
    return q.all()


def get_row(db: Session, model, row_id: int, options: Sequence = ()):
    """Return the live row with ``row_id``; raise ``NoResultFound`` otherwise."""
    q = db.query(model)
    if options:
        q = q.options(*options)
    return q.filter(model.id == row_id).one()


def resolve_ids(db: Session, model, ids: Iterable[int]) -> list:
    """Load live rows for ``ids`` preserving order; any miss raises ``NoResultFound``."""
    wanted = list(dict.fromkeys(ids))
    if not wanted:
        return []
    rows = db.query(model).filter(model.id.in_(wanted)).all()
    by_id = {row.id: row for row in rows}
    missing = [i for i in wanted if i not in by_id]
    if missing:
        raise MissingLinkError(f"{model.__tablename__} not found: {missing}")
    return [by_id[i] for i in wanted]


def append_missing(collection: list, rows: Iterable) -> None:
    """Append rows not yet linked; existing links are kept."""
    present = {row.id for row in collection}
    for row in rows:
        if row.id not in present:
            collection.append(row)
            present.add(row.id)


def apply_patch(row, patch: dict) -> None:
    """Copy supplied, non-null values onto ``row``."""
    for key, value in patch.items():
        if value is None:
            continue
        setattr(row, key, value)


def commit(db: Session, action: str, label: str) -> None:
    """Commit or roll back and raise ``RepositoryError`` naming the operation."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed %s %s: %s", action, label, e)
        raise RepositoryError(f"failed {action} {label}: {e}") from e


def save_new(db: Session, row, label: str):
    db.add(row)
    commit(db, "creating", label)
    db.refresh(row)
    return row


def soft_delete(db: Session, model, row_id: int, label: str) -> None:
    row = get_row(db, model, row_id)
    row.deleted_at = now_utc()
    commit(db, "deleting", f"{label} {row_id}")
    logger.info("Deleted %s %s", label, row_id)
