PROPERTY = {
    "property_name": "Villa Seminyak",
    "street_address_1": "Jl. Kayu Aya 12",
    "suburb": "Seminyak",
    "city": "Badung",
    "bedrooms": 3,
    "bathrooms": 2.5,
}


def _create_property(client, **overrides):
    r = client.post("/api/properties", json={**PROPERTY, **overrides})
    assert r.status_code == 201, r.text
    return r.json()


def test_property_crud(client):
    feature = client.post("/api/features", json={"feature_name": "Swimming pool"}).json()
    prop = _create_property(client, feature_ids=[feature["id"]])
    assert [f["feature_name"] for f in prop["features"]] == ["Swimming pool"]

    r = client.get(f"/api/properties/{prop['id']}")
    assert r.status_code == 200
    assert r.json()["property_name"] == "Villa Seminyak"

    r = client.put(f"/api/properties/{prop['id']}", json={"notes": "Freshly painted"})
    assert r.status_code == 200
    assert r.json()["notes"] == "Freshly painted"
    assert r.json()["bedrooms"] == 3

    assert client.delete(f"/api/properties/{prop['id']}").json() == {"message": "Property deleted successfully"}
    assert client.get(f"/api/properties/{prop['id']}").status_code == 404


def test_property_validation(client):
    r = client.post("/api/properties", json={**PROPERTY, "property_name": "Hut"})
    assert r.status_code == 422


def test_duplicate_property_name_conflicts(client):
    _create_property(client)
    r = client.post("/api/properties", json=PROPERTY)
    assert r.status_code == 409


def test_unknown_feature_id_is_not_found(client):
    r = client.post("/api/properties", json={**PROPERTY, "feature_ids": [9999]})
    assert r.status_code == 404
    assert "features" in r.json()["detail"]


def test_property_update_by_known_user_writes_log(client, auth_headers):
    client.post("/api/users", json={
        "name": "Agent Smith", "username": "agentsmith", "email": "agent@example.com", "password": "secret123",
    })
    prop = _create_property(client)

    r = client.put(
        f"/api/properties/{prop['id']}",
        json={"city": "Denpasar"},
        headers=auth_headers("agent@example.com"),
    )
    assert r.status_code == 200
    logs = r.json()["property_logs"]
    assert len(logs) == 1
    assert logs[0]["type"] == "gen"
    assert logs[0]["log_message"] == "UPDATE: city (Denpa...)"
    assert logs[0]["user"]["email"] == "agent@example.com"


def test_list_properties_paging(client):
    _create_property(client, property_name="Villa Seminyak")
    _create_property(client, property_name="Villa Canggu")
    _create_property(client, property_name="Villa Ubud Asri")

    names = [p["property_name"] for p in client.get("/api/properties").json()]
    assert names == ["Villa Ubud Asri", "Villa Canggu", "Villa Seminyak"]

    r = client.get("/api/properties", params={"limit": 1, "offset": 1, "order": "property_name asc"})
    assert [p["property_name"] for p in r.json()] == ["Villa Seminyak"]


def test_upload_and_download_attachment(client, s3_client):
    prop = _create_property(client)

    r = client.post(
        f"/api/properties/{prop['id']}/attachments",
        files={"file": ("f.txt", b"hello", "text/plain")},
    )
    assert r.status_code == 201, r.text
    attachment = r.json()
    assert attachment["object_key"] == f"property/{prop['id']}/attachments/f.txt"
    assert attachment["etag"] == '"9b2cf535f27731c974343645a3985328"'
    assert attachment["file_size"] == 5
    assert attachment["file_type"] == "txt"

    listed = client.get(f"/api/properties/{prop['id']}/attachments").json()
    assert [a["id"] for a in listed] == [attachment["id"]]

    r = client.get(f"/api/property-attachments/{attachment['id']}/download")
    assert r.status_code == 200
    assert r.content == b"stored object body"

    r = client.put(f"/api/property-attachments/{attachment['id']}", json={"label": "Lease notes"})
    assert r.json()["label"] == "Lease notes"


def test_upload_to_missing_property(client, s3_client):
    r = client.post("/api/properties/9999/attachments", files={"file": ("f.txt", b"hello", "text/plain")})
    assert r.status_code == 404
    s3_client.put_object.assert_not_called()


def test_upload_storage_failure_is_bad_gateway(client, s3_client):
    from botocore.exceptions import EndpointConnectionError

    prop = _create_property(client)
    s3_client.put_object.side_effect = EndpointConnectionError(endpoint_url="https://spaces.example")
    r = client.post(f"/api/properties/{prop['id']}/attachments", files={"file": ("f.txt", b"hello", "text/plain")})
    assert r.status_code == 502


def test_direct_attachment_create_is_admin_only(client, auth_headers, admin_headers):
    prop = _create_property(client)
    client.post("/api/users", json={
        "name": "Property Agent", "username": "agent01", "email": "agent@example.com", "password": "secret123",
    })
    record = {"file_name": "plans.pdf", "object_key": f"property/{prop['id']}/attachments/plans.pdf", "property_id": prop["id"]}

    assert client.post("/api/property-attachments", json=record).status_code == 401
    assert client.post("/api/property-attachments", json=record, headers=auth_headers("agent@example.com")).status_code == 403

    r = client.post("/api/property-attachments", json=record, headers=admin_headers)
    assert r.status_code == 201, r.text
    assert r.json()["label"] == "plans.pdf"

    r = client.post("/api/property-attachments", json={**record, "file_name": "plans/"}, headers=admin_headers)
    assert r.status_code == 422
