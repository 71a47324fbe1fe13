"""Business logic services package with public service helpers."""

from .object_storage import (
    ObjectStorage,
    ObjectStorageConfig,
    ObjectStorageError,
    get_object_storage,
    reset_object_storage_for_tests,
)
from .user_service import UserService
from .property_service import PropertyService
from .feature_service import FeatureService
from .property_log_service import PropertyLogService
from .property_attachment_service import PropertyAttachmentService
from .contact_service import ContactService
from .task_service import TaskService
from .task_log_service import TaskLogService
from .transaction_service import TransactionService
from .maintenance_service import MaintenanceRequestService
from .vendor_service import VendorService
from .work_type_service import WorkTypeService

__all__ = [
    "ObjectStorage",
    "ObjectStorageConfig",
    "ObjectStorageError",
    "get_object_storage",
    "reset_object_storage_for_tests",
    "UserService",
    "PropertyService",
    "FeatureService",
    "PropertyLogService",
    "PropertyAttachmentService",
    "ContactService",
    "TaskService",
    "TaskLogService",
    "TransactionService",
    "MaintenanceRequestService",
    "VendorService",
    "WorkTypeService",
]
