import os

import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

# Force the in-memory database before estate.db.database is imported
os.environ.setdefault("PYTEST_RUNNING", "1")

from estate.db import models
from estate.db.database import SessionLocal, engine
from estate.services.object_storage import ObjectStorage, ObjectStorageConfig


@pytest.fixture(autouse=True)
def clean():
    models.Base.metadata.create_all(bind=engine)
    with engine.begin() as conn:
        for table in reversed(models.Base.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def storage_config(tmp_path, monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test-key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test-secret")
    monkeypatch.setenv("BUCKET", "test-bucket")
    monkeypatch.setenv("ENDPOINT", "https://sgp1.digitaloceanspaces.com")
    monkeypatch.setenv("AWS_REGION", "sgp1")
    monkeypatch.setenv("ATTACHMENT_SCRATCH_DIR", str(tmp_path / "scratch"))
    monkeypatch.setenv("ATTACHMENT_DOWNLOAD_DIR", str(tmp_path / "downloads"))
    return ObjectStorageConfig()


@pytest.fixture()
def s3_client():
    client = MagicMock()
    client.put_object.return_value = {"ETag": '"9b2cf535f27731c974343645a3985328"'}

    def _download(bucket, key, fh):
        fh.write(b"stored object body")

    client.download_fileobj.side_effect = _download
    return client


@pytest.fixture()
def storage(storage_config, s3_client):
    return ObjectStorage(config=storage_config, client=s3_client)


@pytest.fixture()
def client(storage):
    from estate.api.main import app
    from estate.api.deps import get_storage

    app.dependency_overrides[get_storage] = lambda: storage
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_storage, None)


@pytest.fixture()
def auth_headers():
    def _headers(email: str) -> dict:
        return {"x-auth-request-user": email.split("@")[0], "x-auth-request-email": email}
    return _headers


@pytest.fixture()
def admin_headers(db, auth_headers):
    from estate.db import schemas
    from estate.services.user_service import UserService

    UserService(db).create(
        schemas.UserCreate(
            name="Site Administrator", username="siteadmin", email="admin@example.com",
            password="adminpass", role="admin",
        )
    )
    return auth_headers("admin@example.com")
