import pytest

from app.models.consultation import Consultation


@pytest.fixture
def consultation(db):
    row = Consultation(name="Jane Doe", email="jane@example.com", phone="555-0100", message="Viewing please")
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def test_list_newest_first(client, service_headers, db):
    older = Consultation(name="Older", email="o@example.com")
    db.add(older)
    db.commit()
    newer = Consultation(name="Newer", email="n@example.com")
    db.add(newer)
    db.commit()
    resp = client.get("/manage-consultations", headers=service_headers)
    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()["consultations"]] == ["Newer", "Older"]


def test_update_status_only(client, service_headers, consultation):
    resp = client.put(
        "/manage-consultations",
        json={"id": consultation.id, "status": "Contacted", "name": "Someone Else"},
        headers=service_headers,
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    updated = data["consultation"]
    assert updated["status"] == "Contacted"
    assert updated["id"] == consultation.id
    assert updated["name"] == "Jane Doe"
    assert updated["email"] == "jane@example.com"
    assert updated["message"] == "Viewing please"


def test_update_unknown_id(client, service_headers):
    resp = client.put("/manage-consultations", json={"id": "X", "status": "Contacted"}, headers=service_headers)
    assert resp.status_code == 404
    assert resp.json() == {"error": "Consultation not found"}


def test_update_requires_id(client, service_headers):
    resp = client.put("/manage-consultations", json={"status": "Contacted"}, headers=service_headers)
    assert resp.status_code == 400


def test_delete(client, service_headers, consultation, db):
    resp = client.request("DELETE", "/manage-consultations", json={"id": consultation.id}, headers=service_headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    db.expire_all()
    assert db.query(Consultation).count() == 0


def test_requires_credentials(client):
    assert client.get("/manage-consultations").status_code == 401


def test_no_create_path(client, service_headers):
    resp = client.post("/manage-consultations", json={"name": "x"}, headers=service_headers)
    assert resp.status_code == 405
    assert resp.json() == {"error": "Method not allowed"}


def test_options(client):
    resp = client.options("/manage-consultations")
    assert resp.status_code == 200
    assert resp.text == "ok"


def test_update_and_delete_without_body(client, service_headers):
    resp = client.put("/manage-consultations", headers=service_headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Consultation ID is required"}
    resp = client.request("DELETE", "/manage-consultations", headers=service_headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Consultation ID is required"}


def test_update_status_of_deleted_consultation(client, service_headers, consultation):
    cid = consultation.id
    client.request("DELETE", "/manage-consultations", json={"id": cid}, headers=service_headers)
    resp = client.put("/manage-consultations", json={"id": cid, "status": "Closed"}, headers=service_headers)
    assert resp.status_code == 404
