"""
Property repository functions.

Properties own two many-to-many links: features (replaced when the property
already has some, appended otherwise) and contacts (replaced when a
non-empty list is supplied).
"""
from __future__ import annotations

import logging
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

logger = logging.getLogger(__name__)

_DETAIL = (
    selectinload(models.Property.features),
    selectinload(models.Property.property_logs).selectinload(models.PropertyLog.user),
    selectinload(models.Property.contacts),
)


def find_all(db: Session, limit: int = 0, offset: int = 0, order: str = ""):
    return list_rows(db, models.Property, limit, offset, order, options=(selectinload(models.Property.features),))


def find_by_id(db: Session, property_id: int) -> models.Property:
    return get_row(db, models.Property, property_id, options=_DETAIL)


def create(
    db: Session,
    prop: models.Property,
    feature_ids: Sequence[int] = (),
    contact_ids: Sequence[int] = (),
) -> models.Property:
    db_prop = save_new(db, prop, "property")
    if feature_ids or contact_ids:
        append_missing(db_prop.features, resolve_ids(db, models.Feature, feature_ids))
        append_missing(db_prop.contacts, resolve_ids(db, models.Contact, contact_ids))
        commit(db, "linking", f"property {db_prop.id}")
    return find_by_id(db, db_prop.id)


def update(
    db: Session,
    property_id: int,
    patch: dict,
    feature_ids: Optional[Sequence[int]] = None,
    contact_ids: Optional[Sequence[int]] = None,
) -> models.Property:
    db_prop = find_by_id(db, property_id)
    apply_patch(db_prop, patch)
    commit(db, "updating", f"property {property_id}")

    if feature_ids is not None:
        features = resolve_ids(db, models.Feature, feature_ids)
        if db_prop.features:
            db_prop.features = features
        else:
            append_missing(db_prop.features, features)
    if contact_ids:
        db_prop.contacts = resolve_ids(db, models.Contact, contact_ids)
    if feature_ids is not None or contact_ids:
        commit(db, "linking", f"property {property_id}")
        logger.debug("Updated links for property %s", property_id)

    return find_by_id(db, property_id)


def delete(db: Session, property_id: int) -> None:
    soft_delete(db, models.Property, property_id, "property")
