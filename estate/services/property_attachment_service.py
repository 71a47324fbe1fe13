"""
Property attachment service.

Uploads go through a local scratch copy: the inbound stream is written to
disk, pushed to object storage under ``property/<id>/attachments/<name>``
and recorded as a PropertyAttachment carrying the storage ETag.
"""
import logging
import os
import shutil
import tempfile
from typing import BinaryIO, Optional, Protocol

from sqlalchemy.orm import Session

from estate.db import models, schemas
from estate.db.repositories import properties as property_repo
from estate.db.repositories import property_attachments as attachment_repo
from estate.services.object_storage import ObjectStorage, get_object_storage

logger = logging.getLogger(__name__)


class Upload(Protocol):
    """The parts of an uploaded file the service reads (FastAPI ``UploadFile`` fits)."""
    filename: Optional[str]
    file: BinaryIO


def attachment_key(property_id: int, filename: str) -> str:
    return f"property/{property_id}/attachments/{filename}"


def file_type_of(filename: str) -> str:
    """Text after the first dot, or an empty string."""
    parts = filename.split(".")
    return parts[1] if len(parts) > 1 else ""


class PropertyAttachmentService:
    """Service class for property attachments and their stored objects."""

    def __init__(self, db: Session, storage: Optional[ObjectStorage] = None):
        self.db = db
        self.storage = storage or get_object_storage()

    def find_all(self, limit: int = 0, offset: int = 0, order: str = ""):
        return attachment_repo.find_all(self.db, limit, offset, order)

    def find_by_id(self, attachment_id: int) -> models.PropertyAttachment:
        return attachment_repo.find_by_id(self.db, attachment_id)

    def find_by_property(self, property_id: int):
        property_repo.find_by_id(self.db, property_id)
        return attachment_repo.find_by_property(self.db, property_id)

    def create(self, attachment: schemas.PropertyAttachmentCreate) -> models.PropertyAttachment:
        data = attachment.model_dump()
        if not data.get("label"):
            data["label"] = attachment.file_name
        return attachment_repo.create(self.db, models.PropertyAttachment(**data))

    def update(self, attachment_id: int, attachment: schemas.PropertyAttachmentUpdate) -> models.PropertyAttachment:
        return attachment_repo.update(self.db, attachment_id, attachment.model_dump(exclude_unset=True))

    def delete(self, attachment_id: int) -> None:
        attachment_repo.delete(self.db, attachment_id)

    def attach_to_property(self, property_id: int, upload: Upload) -> models.PropertyAttachment:
        """Store ``upload`` for the property and persist its attachment record."""
        property_repo.find_by_id(self.db, property_id)

        filename = os.path.basename(upload.filename or "")
        if not filename:
            raise ValueError("uploaded file has no name")

        scratch_dir = self.storage.config.scratch_dir
        os.makedirs(scratch_dir, exist_ok=True)
        # One scratch file per upload; the client file name only shapes the key
        fd, scratch_path = tempfile.mkstemp(dir=scratch_dir, suffix=f"-{filename}")
        try:
            with os.fdopen(fd, "wb") as out:
                shutil.copyfileobj(upload.file, out)
            key, etag, size = self.storage.upload_file(
                scratch_path, attachment_key(property_id, filename), is_public=False
            )
        finally:
            if os.path.isfile(scratch_path):
                os.remove(scratch_path)

        logger.info(f"Uploaded attachment {key} for property {property_id}")
        record = models.PropertyAttachment(
            label=filename,
            file_name=filename,
            file_size=size,
            file_type=file_type_of(filename),
            etag=etag,
            object_key=key,
            property_id=property_id,
        )
        return attachment_repo.create(self.db, record)

    def download_property_attachment(self, attachment_id: int) -> str:
        """Fetch the stored object into the download directory and return the local path."""
        attachment = attachment_repo.find_by_id(self.db, attachment_id)
        return self.storage.download_temp_file(attachment.object_key, attachment.file_name)
