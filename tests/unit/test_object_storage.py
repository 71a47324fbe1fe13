import os

import pytest
from botocore.exceptions import ClientError

from estate.services.object_storage import ObjectStorage, ObjectStorageConfig, ObjectStorageError, object_key


def test_config_reads_environment(storage_config):
    assert storage_config.is_configured()
    assert storage_config.validate() == []
    assert storage_config.bucket == "test-bucket"
    assert storage_config.region == "sgp1"


def test_config_validate_lists_missing(monkeypatch):
    for var in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "BUCKET"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("ENDPOINT", "spaces.example")
    config = ObjectStorageConfig()
    assert not config.is_configured()
    assert config.validate() == [
        "AWS_ACCESS_KEY_ID is required",
        "AWS_SECRET_ACCESS_KEY is required",
        "BUCKET is required",
        "ENDPOINT must be an http(s) URL",
    ]


def test_object_key_replaces_spaces():
    assert object_key("property/3/attachments/floor plan v2.pdf") == "property/3/attachments/floor_plan_v2.pdf"


def test_upload_file_returns_key_etag_and_size(tmp_path, storage, s3_client):
    local = tmp_path / "floor plan.pdf"
    local.write_bytes(b"%PDF-1.4 body")

    key, etag, size = storage.upload_file(str(local), "property/3/attachments/floor plan.pdf")

    assert key == "property/3/attachments/floor_plan.pdf"
    assert etag == '"9b2cf535f27731c974343645a3985328"'
    assert size == len(b"%PDF-1.4 body")
    kwargs = s3_client.put_object.call_args.kwargs
    assert kwargs["Bucket"] == "test-bucket"
    assert kwargs["Key"] == key
    assert kwargs["ACL"] == "private"
    assert kwargs["ContentLength"] == size


def test_upload_public_uses_public_acl(tmp_path, storage, s3_client):
    local = tmp_path / "photo.jpg"
    local.write_bytes(b"jpeg")
    storage.upload_file(str(local), "public/photo.jpg", is_public=True)
    assert s3_client.put_object.call_args.kwargs["ACL"] == "public-read"


def test_upload_failure_is_wrapped(tmp_path, storage, s3_client):
    local = tmp_path / "notes.txt"
    local.write_bytes(b"x")
    s3_client.put_object.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
    )
    with pytest.raises(ObjectStorageError) as exc:
        storage.upload_file(str(local), "property/1/attachments/notes.txt")
    assert isinstance(exc.value.__cause__, ClientError)


def test_upload_missing_local_file_is_wrapped(tmp_path, storage):
    with pytest.raises(ObjectStorageError):
        storage.upload_file(str(tmp_path / "absent.txt"), "property/1/attachments/absent.txt")


def test_download_temp_file(storage, s3_client, storage_config):
    path = storage.download_temp_file("property/3/attachments/notes.txt", "notes.txt")

    assert os.path.dirname(path) == storage_config.download_dir
    assert os.path.basename(path).endswith("-notes.txt")
    with open(path, "rb") as fh:
        assert fh.read() == b"stored object body"
    s3_client.download_fileobj.assert_called_once()
    assert s3_client.download_fileobj.call_args.args[:2] == ("test-bucket", "property/3/attachments/notes.txt")


def test_concurrent_downloads_of_same_name_get_separate_files(storage):
    first = storage.download_temp_file("property/3/attachments/notes.txt", "notes.txt")
    second = storage.download_temp_file("property/3/attachments/notes.txt", "notes.txt")
    assert first != second
    assert os.path.isfile(first) and os.path.isfile(second)


def test_download_failure_removes_partial_file(storage, s3_client, storage_config):
    s3_client.download_fileobj.side_effect = ClientError(
        {"Error": {"Code": "NoSuchKey", "Message": "missing"}}, "GetObject"
    )
    with pytest.raises(ObjectStorageError):
        storage.download_temp_file("property/3/attachments/gone.txt", "gone.txt")
    assert os.listdir(storage_config.download_dir) == []


def test_download_with_directory_like_name(storage, storage_config):
    path = storage.download_temp_file("property/3/attachments/plans", "plans/")
    assert os.path.isfile(path)
    assert os.path.dirname(path) == storage_config.download_dir


def test_client_built_lazily_from_config(storage_config, monkeypatch):
    calls = {}

    def _fake_client(service, **kwargs):
        calls["service"] = service
        calls.update(kwargs)
        return object()

    monkeypatch.setattr("estate.services.object_storage.boto3.client", _fake_client)
    storage = ObjectStorage(config=storage_config)
    assert storage.client is storage.client
    assert calls["service"] == "s3"
    assert calls["endpoint_url"] == "https://sgp1.digitaloceanspaces.com"
    assert calls["region_name"] == "sgp1"
