"""
Vendor repository functions.

Work types supplied on update replace the existing links when the vendor
already has some and are appended otherwise.
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

_DETAIL = (selectinload(models.Vendor.work_types),)


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.Vendor, limit, offset, order, options=_DETAIL)


def find_by_id(db: Session, vendor_id: int) -> models.Vendor:
    return get_row(db, models.Vendor, vendor_id, options=_DETAIL)


def create(db: Session, vendor: models.Vendor, work_type_ids: Sequence[int] = ()) -> models.Vendor:
    db_vendor = save_new(db, vendor, "vendor")
    if work_type_ids:
        append_missing(db_vendor.work_types, resolve_ids(db, models.WorkType, work_type_ids))
        commit(db, "linking", f"vendor {db_vendor.id}")
    return find_by_id(db, db_vendor.id)


def update(
    db: Session,
    vendor_id: int,
    patch: dict,
    work_type_ids: Optional[Sequence[int]] = None,
) -> models.Vendor:
    db_vendor = find_by_id(db, vendor_id)
    apply_patch(db_vendor, patch)
    commit(db, "updating", f"vendor {vendor_id}")
    if work_type_ids:
        work_types = resolve_ids(db, models.WorkType, work_type_ids)
        if db_vendor.work_types:
            db_vendor.work_types = work_types
        else:
            append_missing(db_vendor.work_types, work_types)
        commit(db, "linking", f"vendor {vendor_id}")
    return find_by_id(db, vendor_id)


def delete(db: Session, vendor_id: int) -> None:
    soft_delete(db, models.Vendor, vendor_id, "vendor")
