"""
Property service.

Maps property DTOs onto rows and, when the acting user is known, records a
generated property log summarising which fields an update touched.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import properties as property_repo
from estate.db.repositories import property_logs as property_log_repo

logger = logging.getLogger(__name__)

_LINK_FIELDS = {"feature_ids", "contact_ids"}


def describe_update(changes: dict) -> str:
    """Summarise supplied update fields, e.g. ``"UPDATE: city (Denpa...), bedrooms, []feature_ids"``.

    Empty strings and zero numbers count as not supplied. Returns an empty
    string when nothing was supplied.
    """
    parts = []
    for field, value in changes.items():
        if value is None or value == "":
            continue
        if isinstance(value, (int, float)) and value == 0:
            continue
        if isinstance(value, (list, tuple)):
            parts.append(f"[]{field}")
        elif isinstance(value, str):
            parts.append(f"{field} ({value[:5]}...)")
        else:
            parts.append(field)
    if not parts:
        return ""
    return "UPDATE: " + ", ".join(parts)


class PropertyService:
    """Service class for properties and their generated update logs."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return property_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, property_id: int) -> models.Property:
        return property_repo.find_by_id(self.db, property_id)

    def create(self, prop: schemas.PropertyCreate) -> models.Property:
        db_prop = models.Property(**prop.model_dump(exclude=_LINK_FIELDS))
        return property_repo.create(
            self.db,
            db_prop,
            feature_ids=prop.feature_ids,
            contact_ids=prop.contact_ids,
        )

    def update(
        self,
        property_id: int,
        prop: schemas.PropertyUpdate,
        actor_id: Optional[int] = None,
    ) -> models.Property:
        changes = prop.model_dump(exclude_unset=True)
        patch = {k: v for k, v in changes.items() if k not in _LINK_FIELDS}
        updated = property_repo.update(
            self.db,
            property_id,
            patch,
            feature_ids=prop.feature_ids,
            contact_ids=prop.contact_ids,
        )

        message = describe_update(changes)
        if actor_id is not None and message:
            property_log_repo.create(
                self.db,
                models.PropertyLog(
                    user_id=actor_id,
                    property_id=property_id,
                    log_message=message,
                    type="gen",
                ),
            )
            logger.debug("Recorded update log for property %s", property_id)
            updated = property_repo.find_by_id(self.db, property_id)
        return updated

    def delete(self, property_id: int) -> None:
        property_repo.delete(self.db, property_id)
