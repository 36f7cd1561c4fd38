from __future__ import annotations

from src.backend.routes.employees_api import DUPLICATE_MESSAGE

from conftest import API, employee_payload


def test_health_and_security_headers(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_directories_are_seeded_in_order(client):
    resp = client.get(f"{API}/directories")

    assert resp.status_code == 200
    assert resp.json() == ["DIT", "DOI", "DOVI"]


def test_divisions_follow_directory(client):
    assert client.get(f"{API}/divisions/DIT").json() == ["Development", "SDD"]
    assert client.get(f"{API}/divisions/DOI").json() == ["Networking", "CND"]
    assert client.get(f"{API}/divisions/DOVI").json() == ["Verification", "Inspection"]


def test_divisions_for_unknown_directory_is_empty(client):
    resp = client.get(f"{API}/divisions/NOPE")

    assert resp.status_code == 200
    assert resp.json() == []


def test_create_returns_record_with_id(client):
    resp = client.post(API, json=employee_payload())

    assert resp.status_code == 201
    body = resp.json()
    assert isinstance(body["id"], int)
    assert body["empId"] == "20240001"
    assert body["type"] == "Staff"
    assert body["sex"] == "Male"
    assert body["dateOfJoin"] == "2020-01-15"
    assert body["permanentAddress"] == "Village Rampur, Cumilla"


def test_add_alias_creates_too(client):
    resp = client.post(f"{API}/add", json=employee_payload(empId="20240002"))

    assert resp.status_code == 201
    assert [r["empId"] for r in client.get(API).json()] == ["20240002"]


def test_list_is_ordered_by_id(client):
    first = client.post(API, json=employee_payload(empId="20240001")).json()
    second = client.post(API, json=employee_payload(empId="20240002", name="Karim")).json()

    rows = client.get(API).json()

    assert [r["id"] for r in rows] == [first["id"], second["id"]]


def test_get_single_and_missing(client):
    created = client.post(API, json=employee_payload()).json()

    assert client.get(f"{API}/{created['id']}").json()["name"] == "Rahim Uddin"

    missing = client.get(f"{API}/{created['id'] + 1000}")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Employee not found"
    assert missing.json()["status_code"] == 404


def test_empty_date_of_post_is_stored_as_null(client):
    resp = client.post(API, json=employee_payload(dateOfPost=""))

    assert resp.status_code == 201
    assert resp.json()["dateOfPost"] is None


def test_gender_is_accepted_for_sex(client):
    payload = employee_payload()
    del payload["sex"]
    payload["gender"] = "Female"

    resp = client.post(API, json=payload)

    assert resp.status_code == 201
    assert resp.json()["sex"] == "Female"


def test_duplicate_emp_id_is_conflict(client):
    assert client.post(API, json=employee_payload()).status_code == 201

    resp = client.post(API, json=employee_payload(name="Someone Else"))

    assert resp.status_code == 409
    assert resp.json()["message"] == DUPLICATE_MESSAGE
    assert len(client.get(API).json()) == 1


def test_phone_with_trailing_newline_is_stored_trimmed(client):
    resp = client.post(API, json=employee_payload(phone="0171234567\n"))

    assert resp.status_code == 201
    assert resp.json()["phone"] == "0171234567"


def test_phone_with_embedded_newline_is_rejected(client):
    resp = client.post(API, json=employee_payload(phone="01712\n34567"))

    assert resp.status_code == 422


def test_invalid_phone_is_rejected(client):
    resp = client.post(API, json=employee_payload(phone="12345"))

    assert resp.status_code == 422
    body = resp.json()
    assert body["message"] == "Validation error occurred"
    assert body["validation_errors"]
    assert client.get(API).json() == []


def test_post_before_join_is_rejected(client):
    resp = client.post(API, json=employee_payload(dateOfJoin="2022-01-01", dateOfPost="2021-12-31"))

    assert resp.status_code == 422


def test_division_must_belong_to_directory(client):
    resp = client.post(API, json=employee_payload(directory="DIT", division="Networking"))

    assert resp.status_code == 422
    assert "Networking" in resp.json()["message"]
    assert client.get(API).json() == []


def test_update_replaces_fields_and_keeps_emp_id(client):
    created = client.post(API, json=employee_payload()).json()

    resp = client.put(
        f"{API}/{created['id']}",
        json=employee_payload(empId="99999999", name="Rahim U.", directory="DOI", division="CND", dateOfPost=""),
    )

    assert resp.status_code == 200
    assert resp.json() == {"message": "updated", "id": created["id"]}

    row = client.get(f"{API}/{created['id']}").json()
    assert row["name"] == "Rahim U."
    assert row["directory"] == "DOI"
    assert row["division"] == "CND"
    assert row["dateOfPost"] is None
    assert row["empId"] == "20240001"


def test_update_missing_record_is_404(client):
    resp = client.put(f"{API}/4242", json=employee_payload())

    assert resp.status_code == 404
    assert client.get(API).json() == []


def test_update_with_bad_division_leaves_record_alone(client):
    created = client.post(API, json=employee_payload()).json()

    resp = client.put(f"{API}/{created['id']}", json=employee_payload(directory="DOVI", division="SDD"))

    assert resp.status_code == 422
    assert client.get(f"{API}/{created['id']}").json()["division"] == "Development"


def test_delete_then_delete_again(client):
    created = client.post(API, json=employee_payload()).json()

    resp = client.delete(f"{API}/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "deleted", "id": created["id"]}
    assert client.get(API).json() == []

    again = client.delete(f"{API}/{created['id']}")
    assert again.status_code == 404
