import io
import os
from types import SimpleNamespace

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import NoResultFound

from estate.db import schemas
from estate.services.object_storage import ObjectStorageError
from estate.services.property_attachment_service import (
    PropertyAttachmentService,
    attachment_key,
    file_type_of,
)
from estate.services.property_service import PropertyService


def _property(db, name="Villa Seminyak"):
    return PropertyService(db).create(
        schemas.PropertyCreate(property_name=name, street_address_1="Jl. Kayu Aya 12")
    )


def _upload(name, body=b"hello"):
    return SimpleNamespace(filename=name, file=io.BytesIO(body))


def test_attachment_key_and_file_type():
    assert attachment_key(7, "f.txt") == "property/7/attachments/f.txt"
    assert file_type_of("f.txt") == "txt"
    assert file_type_of("archive.tar.gz") == "tar"
    assert file_type_of("README") == ""


def test_attach_to_property_uploads_and_records(db, storage, s3_client, storage_config):
    prop = _property(db)
    service = PropertyAttachmentService(db, storage=storage)

    attachment = service.attach_to_property(prop.id, _upload("f.txt"))

    assert attachment.object_key == f"property/{prop.id}/attachments/f.txt"
    assert attachment.etag == '"9b2cf535f27731c974343645a3985328"'
    assert attachment.file_name == "f.txt"
    assert attachment.label == "f.txt"
    assert attachment.file_type == "txt"
    assert attachment.file_size == 5
    assert attachment.property_id == prop.id
    assert s3_client.put_object.call_args.kwargs["ACL"] == "private"
    # Scratch copy is removed once uploaded
    assert os.listdir(storage_config.scratch_dir) == []


def test_attach_replaces_spaces_in_key(db, storage):
    prop = _property(db)
    attachment = PropertyAttachmentService(db, storage=storage).attach_to_property(prop.id, _upload("floor plan.pdf"))
    assert attachment.object_key == f"property/{prop.id}/attachments/floor_plan.pdf"
    assert attachment.file_name == "floor plan.pdf"


def test_attach_to_missing_property(db, storage, s3_client):
    with pytest.raises(NoResultFound):
        PropertyAttachmentService(db, storage=storage).attach_to_property(9999, _upload("f.txt"))
    s3_client.put_object.assert_not_called()


def test_attach_storage_failure_leaves_no_record(db, storage, s3_client, storage_config):
    prop = _property(db)
    s3_client.put_object.side_effect = ObjectStorageError("boom")
    service = PropertyAttachmentService(db, storage=storage)
    with pytest.raises(ObjectStorageError):
        service.attach_to_property(prop.id, _upload("f.txt"))
    assert service.find_all() == []
    assert os.listdir(storage_config.scratch_dir) == []


def test_attach_requires_filename(db, storage):
    prop = _property(db)
    with pytest.raises(ValueError):
        PropertyAttachmentService(db, storage=storage).attach_to_property(prop.id, _upload(""))


def test_download_property_attachment(db, storage):
    prop = _property(db)
    service = PropertyAttachmentService(db, storage=storage)
    attachment = service.attach_to_property(prop.id, _upload("f.txt"))

    path = service.download_property_attachment(attachment.id)
    assert os.path.basename(path).endswith("-f.txt")
    with open(path, "rb") as fh:
        assert fh.read() == b"stored object body"


def test_update_changes_label_only(db, storage):
    prop = _property(db)
    service = PropertyAttachmentService(db, storage=storage)
    attachment = service.attach_to_property(prop.id, _upload("f.txt"))

    updated = service.update(attachment.id, schemas.PropertyAttachmentUpdate(label="Floor plan"))
    assert updated.label == "Floor plan"
    assert updated.object_key == attachment.object_key

    service.delete(attachment.id)
    with pytest.raises(NoResultFound):
        service.download_property_attachment(attachment.id)
    assert service.find_by_property(prop.id) == []


class _OverlappingStorage:
    """Starts a second upload of the same name while the first is in flight."""

    def __init__(self, config, start_second):
        self.config = config
        self.start_second = start_second
        self.objects = {}

    def upload_file(self, file_path, key_path, is_public=False):
        second, self.start_second = self.start_second, None
        if second is not None:
            second()
        with open(file_path, "rb") as fh:
            body = fh.read()
        self.objects[key_path] = body
        return key_path, f'"{len(self.objects)}"', len(body)


def test_overlapping_uploads_with_same_name_keep_their_own_bytes(db, storage_config):
    first = _property(db)
    second = _property(db, "Villa Canggu")
    results = {}

    def _upload_second():
        results["second"] = service.attach_to_property(second.id, _upload("lease.pdf", b"BBBB-property-two"))

    storage = _OverlappingStorage(storage_config, _upload_second)
    service = PropertyAttachmentService(db, storage=storage)
    results["first"] = service.attach_to_property(first.id, _upload("lease.pdf", b"AAAA-property-one"))

    assert storage.objects == {
        f"property/{first.id}/attachments/lease.pdf": b"AAAA-property-one",
        f"property/{second.id}/attachments/lease.pdf": b"BBBB-property-two",
    }
    assert results["first"].file_size == len(b"AAAA-property-one")
    assert results["second"].file_size == len(b"BBBB-property-two")
    assert os.listdir(storage_config.scratch_dir) == []


def test_create_rejects_file_name_without_basename(db):
    prop = _property(db)
    with pytest.raises(ValidationError):
        schemas.PropertyAttachmentCreate(file_name="plans/", object_key="k", property_id=prop.id)


def test_download_of_directory_like_record_name_is_a_file(db, storage):
    prop = _property(db)
    service = PropertyAttachmentService(db, storage=storage)
    attachment = service.create(
        schemas.PropertyAttachmentCreate(file_name="plans", object_key="property/1/plans", property_id=prop.id)
    )
    path = service.download_property_attachment(attachment.id)
    assert os.path.isfile(path)
