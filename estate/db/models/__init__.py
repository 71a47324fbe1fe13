"""
Domain-split SQLAlchemy models with a single aggregator.

Importing this package registers every table on ``Base.metadata``.
"""

from .base import Base, SoftDeleteMixin, now_utc  # re-export

# Domain models
from .users import User
from .properties import Property, Feature, PropertyLog, PropertyAttachment, prop_features
from .contacts import Contact, contact_properties
from .tasks import Task, TaskLog, task_assignments
from .transactions import Transaction, transaction_contacts
from .maintenance import MaintenanceRequest
from .vendors import Vendor, WorkType, vendor_work_types

__all__ = [
    # base
    "Base",
    "SoftDeleteMixin",
    "now_utc",
    # users
    "User",
    # properties
    "Property",
    "Feature",
    "PropertyLog",
    "PropertyAttachment",
    "prop_features",
    # contacts
    "Contact",
    "contact_properties",
    # tasks
    "Task",
    "TaskLog",
    "task_assignments",
    # transactions/maintenance
    "Transaction",
    "transaction_contacts",
    "MaintenanceRequest",
    # vendors
    "Vendor",
    "WorkType",
    "vendor_work_types",
]
