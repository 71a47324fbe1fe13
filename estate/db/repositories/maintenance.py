"""
Maintenance request repository functions.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from estate.db import models
from estate.db.repositories.base import apply_patch, commit, get_row, list_rows, save_new, soft_delete

_DETAIL = (joinedload(models.MaintenanceRequest.property),)


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.MaintenanceRequest, limit, offset, order)


def find_by_id(db: Session, request_id: int) -> models.MaintenanceRequest:
    return get_row(db, models.MaintenanceRequest, request_id, options=_DETAIL)


def create(db: Session, request: models.MaintenanceRequest) -> models.MaintenanceRequest:
    get_row(db, models.Property, request.property_id)
    if request.task_id is not None:
        get_row(db, models.Task, request.task_id)
    db_request = save_new(db, request, "maintenance request")
    return find_by_id(db, db_request.id)


def update(
    db: Session,
    request_id: int,
    patch: dict,
    property_id: Optional[int] = None,
) -> models.MaintenanceRequest:
    db_request = find_by_id(db, request_id)
    if property_id is not None:
        db_request.property = get_row(db, models.Property, property_id)
    apply_patch(db_request, patch)
    commit(db, "updating", f"maintenance request {request_id}")
    return find_by_id(db, request_id)


def delete(db: Session, request_id: int) -> None:
    soft_delete(db, models.MaintenanceRequest, request_id, "maintenance request")
