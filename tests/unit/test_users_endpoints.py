def _signup(client, email="jordan.smith@example.com", password="s3cretpass", **extra):
    return client.post("/api/users", json={
        "name": "Jordan Smith",
        "username": "jsmith01",
        "email": email,
        "password": password,
        **extra,
    })


def test_create_user_returns_201_without_password(client):
    r = _signup(client)
    assert r.status_code == 201
    body = r.json()
    assert body["id"] > 0
    assert body["email"] == "jordan.smith@example.com"
    assert body["role"] == "user"
    assert "password" not in body


def test_duplicate_email_conflicts(client):
    assert _signup(client).status_code == 201
    r = _signup(client)
    assert r.status_code == 409


def test_invalid_user_payload_is_rejected(client):
    r = client.post("/api/users", json={"name": "Jo", "email": "not-an-email", "password": "x"})
    assert r.status_code == 422
    r = _signup(client, email="jordan@example.")
    assert r.status_code == 422


def test_login(client):
    _signup(client)
    ok = client.post("/api/users/login", json={"email": "Jordan.Smith@example.com", "password": "s3cretpass"})
    assert ok.status_code == 200
    assert ok.json()["username"] == "jsmith01"

    bad = client.post("/api/users/login", json={"email": "jordan.smith@example.com", "password": "wrong-pass"})
    assert bad.status_code == 401


def test_user_crud_and_soft_delete(client, admin_headers):
    user_id = _signup(client).json()["id"]

    r = client.put(f"/api/users/{user_id}", json={"name": "Jordan Smythe", "password": ""}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["name"] == "Jordan Smythe"

    # Password unchanged by the empty string above
    assert client.post("/api/users/login", json={"email": "jordan.smith@example.com", "password": "s3cretpass"}).status_code == 200

    assert len(client.get("/api/users", headers=admin_headers).json()) == 2
    r = client.delete(f"/api/users/{user_id}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "User deleted successfully"}
    assert client.get(f"/api/users/{user_id}", headers=admin_headers).status_code == 404
    assert client.delete(f"/api/users/{user_id}", headers=admin_headers).status_code == 404
    assert [u["email"] for u in client.get("/api/users", headers=admin_headers).json()] == ["admin@example.com"]


def test_user_management_requires_admin(client, auth_headers):
    user_id = _signup(client).json()["id"]
    headers = auth_headers("jordan.smith@example.com")

    assert client.get("/api/users").status_code == 401
    assert client.get("/api/users", headers=headers).status_code == 403
    assert client.get(f"/api/users/{user_id}", headers=headers).status_code == 403
    r = client.put(f"/api/users/{user_id}", json={"role": "admin"}, headers=headers)
    assert r.status_code == 403
    assert client.delete(f"/api/users/{user_id}", headers=headers).status_code == 403

    me = client.get("/api/me", headers=headers).json()
    assert me["role"] == "user"


def test_signup_cannot_assign_admin_role(client, auth_headers):
    r = _signup(client, role="admin")
    assert r.status_code == 403

    _signup(client, email="bob@example.com")
    r = client.post("/api/users", json={
        "name": "Alice Admin", "username": "alice01", "email": "alice@example.com",
        "password": "s3cretpass", "role": "admin",
    }, headers=auth_headers("bob@example.com"))
    assert r.status_code == 403


def test_admin_can_assign_roles(client, admin_headers):
    r = _signup(client, role="admin")
    assert r.status_code == 403

    r = client.post("/api/users", json={
        "name": "Second Admin", "username": "admin02", "email": "second@example.com",
        "password": "s3cretpass", "role": "admin",
    }, headers=admin_headers)
    assert r.status_code == 201
    assert r.json()["role"] == "admin"

    user_id = _signup(client).json()["id"]
    r = client.put(f"/api/users/{user_id}", json={"role": "admin"}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["role"] == "admin"


def test_admin_emails_grant_admin(client, auth_headers, monkeypatch):
    _signup(client)
    headers = auth_headers("jordan.smith@example.com")
    assert client.get("/api/users", headers=headers).status_code == 403

    monkeypatch.setenv("ADMIN_EMAILS", "Jordan.Smith@example.com, ops@example.com")
    assert client.get("/api/users", headers=headers).status_code == 200


def test_unknown_role_is_rejected(client):
    r = _signup(client, role="superuser")
    assert r.status_code == 422


def test_me_requires_identity(client, auth_headers):
    _signup(client)
    assert client.get("/api/me").status_code == 401
    assert client.get("/api/me", headers=auth_headers("stranger@example.com")).status_code == 401

    r = client.get("/api/me", headers=auth_headers("jordan.smith@example.com"))
    assert r.status_code == 200
    assert r.json()["username"] == "jsmith01"


def test_update_me_cannot_change_role(client, auth_headers):
    _signup(client)
    headers = auth_headers("jordan.smith@example.com")
    r = client.put("/api/me", json={"username": "jordansmith", "role": "admin"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["username"] == "jordansmith"
    assert r.json()["role"] == "user"


def test_list_users_rejects_bad_order(client, admin_headers):
    r = client.get("/api/users", params={"order": "password; drop table users"}, headers=admin_headers)
    assert r.status_code == 400
    assert client.get("/api/users", params={"limit": -1}, headers=admin_headers).status_code == 422
