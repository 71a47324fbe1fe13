"""
Domain-split Pydantic schemas with a single aggregator.

Each entity exposes ``<Entity>Create``/``<Entity>Update`` input shapes and an
``<Entity>`` read shape built from ORM attributes.
"""

from .summaries import (
    UserSummary,
    PropertySummary,
    FeatureSummary,
    ContactSummary,
    TaskSummary,
    WorkTypeSummary,
)
from .users import UserBase, UserCreate, UserUpdate, UserLogin, User
from .features import FeatureBase, FeatureCreate, FeatureUpdate, Feature
from .properties import PropertyBase, PropertyCreate, PropertyUpdate, PropertyLogEntry, Property
from .property_logs import PropertyLogCreate, PropertyLogUpdate, PropertyLog
from .contacts import ContactBase, ContactCreate, ContactUpdate, Contact
from .tasks import TaskCreate, TaskUpdate, TaskLogEntry, Task
from .task_logs import TaskLogCreate, TaskLogUpdate, TaskLog
from .transactions import TransactionCreate, TransactionUpdate, Transaction
from .maintenance import MaintenanceRequestCreate, MaintenanceRequestUpdate, MaintenanceRequest
from .vendors import VendorBase, VendorCreate, VendorUpdate, Vendor, WorkTypeCreate, WorkTypeUpdate, WorkType
from .property_attachments import PropertyAttachmentCreate, PropertyAttachmentUpdate, PropertyAttachment

__all__ = [
    # summaries
    "UserSummary",
    "PropertySummary",
    "FeatureSummary",
    "ContactSummary",
    "TaskSummary",
    "WorkTypeSummary",
    # users
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "UserLogin",
    "User",
    # properties
    "FeatureBase",
    "FeatureCreate",
    "FeatureUpdate",
    "Feature",
    "PropertyBase",
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyLogEntry",
    "Property",
    "PropertyLogCreate",
    "PropertyLogUpdate",
    "PropertyLog",
    "PropertyAttachmentCreate",
    "PropertyAttachmentUpdate",
    "PropertyAttachment",
    # contacts
    "ContactBase",
    "ContactCreate",
    "ContactUpdate",
    "Contact",
    # tasks
    "TaskCreate",
    "TaskUpdate",
    "TaskLogEntry",
    "Task",
    "TaskLogCreate",
    "TaskLogUpdate",
    "TaskLog",
    # transactions/maintenance
    "TransactionCreate",
    "TransactionUpdate",
    "Transaction",
    "MaintenanceRequestCreate",
    "MaintenanceRequestUpdate",
    "MaintenanceRequest",
    # vendors
    "VendorBase",
    "VendorCreate",
    "VendorUpdate",
    "Vendor",
    "WorkTypeCreate",
    "WorkTypeUpdate",
    "WorkType",
]
