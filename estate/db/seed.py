"""
Reference data inserted at startup.
"""
import logging

from sqlalchemy.orm import Session

from estate.db import models
from estate.db.repositories import work_types as work_type_repo

logger = logging.getLogger(__name__)

DEFAULT_WORK_TYPES = (
    "Lighting",
    "Plumbing",
    "Electrical",
    "Painting",
    "Cleaning",
    "Gardening",
    "HVAC",
    "Security",
    "Fire safety",
    "Energy management",
    "Escalators/lifts",
    "Facade",
    "Other",
)


def seed_default_work_types(db: Session) -> int:
    """Insert each default work type that does not exist yet; return how many were added.

    Soft-deleted work types count as existing so the unique name is never reused.
    """
    created = 0
    for name in DEFAULT_WORK_TYPES:
        if work_type_repo.find_by_name(db, name, include_deleted=True) is not None:
            continue
        work_type_repo.create(db, models.WorkType(name=name))
        created += 1
    if created:
        logger.info("Seeded %d default work types", created)
    return created
