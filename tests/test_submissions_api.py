"""
Tests for the public submission endpoints.
"""

import pytest


def _rows(db):
    return db.fetch_all("SELECT id FROM salary_submissions")


def test_create_returns_201_with_id(client, db, make_payload):
    response = client.post("/api/submissions", json=make_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Salary submission created successfully"
    assert _rows(db) == [{"id": body["id"]}]


@pytest.mark.parametrize("field", ["position", "location", "baseSalary", "totalComp", "experience"])
def test_missing_required_field_is_400_and_nothing_stored(client, db, make_payload, field):
    payload = make_payload()
    del payload[field]

    response = client.post("/api/submissions", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}
    assert _rows(db) == []


@pytest.mark.parametrize("value", ["maybe", "Yes", None, 1])
def test_bad_self_employed_is_400(client, db, make_payload, value):
    response = client.post("/api/submissions", json=make_payload(selfEmployed=value))

    assert response.status_code == 400
    assert _rows(db) == []


def test_empty_and_malformed_bodies_are_400(client, db):
    assert client.post("/api/submissions").status_code == 400

    response = client.post(
        "/api/submissions",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "error" in response.json()
    assert _rows(db) == []


def test_listing_returns_submitted_record(client, make_payload):
    created = client.post("/api/submissions", json=make_payload()).json()

    listing = client.get("/api/submissions")

    assert listing.status_code == 200
    (record,) = listing.json()
    assert record["id"] == created["id"]
    assert record["position"] == "General Dentist"
    assert record["location"] == "Austin, TX"
    assert record["baseSalary"] == 180000
    assert record["selfEmployed"] == "no"
    assert record["clinicalHoursPerWeek"] == "32-40"
    assert record["benefits"] == ["Health Insurance", "Dental Insurance"]
    assert record["submittedAt"] == "2024-03-01T12:00:00.000Z"


def test_omitted_benefits_list_as_empty_array(client, make_payload):
    payload = make_payload()
    del payload["benefits"]
    del payload["additionalNotes"]
    client.post("/api/submissions", json=payload)

    (record,) = client.get("/api/submissions").json()

    assert record["benefits"] == []
    assert record["additionalNotes"] == ""


def test_listing_is_newest_first(client, make_payload):
    january = client.post("/api/submissions", json=make_payload(submittedAt="2024-01-01T00:00:00Z")).json()
    june = client.post("/api/submissions", json=make_payload(submittedAt="2024-06-01T00:00:00Z")).json()

    ids = [record["id"] for record in client.get("/api/submissions").json()]

    assert ids == [june["id"], january["id"]]


def test_each_submission_gets_a_fresh_id(client, make_payload):
    ids = {client.post("/api/submissions", json=make_payload()).json()["id"] for _ in range(3)}

    assert len(ids) == 3


def test_stored_self_employed_is_normalized_on_read(client, db):
    db.execute(
        """
        INSERT INTO salary_submissions
        (id, position, location, baseSalary, totalComp, experience, selfEmployed, benefits, submittedAt)
        VALUES ('odd-1', 'Endodontist', 'Reno, NV', 1, 2, 3, 'sometimes', '[]', '2024-01-01T00:00:00Z')
        """
    )

    (record,) = client.get("/api/submissions").json()

    assert record["selfEmployed"] == "no"
    assert record["company"] == ""


def test_storage_failure_is_500_without_details(client, db):
    db.execute("DROP TABLE salary_submissions")

    response = client.get("/api/submissions")

    assert response.status_code == 500
    assert response.json() == {"error": "Database error"}


def test_oversized_salary_is_400_and_nothing_stored(client, db, make_payload):
    response = client.post("/api/submissions", json=make_payload(baseSalary=10**400))

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}
    assert _rows(db) == []


def test_non_string_benefit_labels_are_400(client, db, make_payload):
    response = client.post("/api/submissions", json=make_payload(benefits=["x", None, 3]))

    assert response.status_code == 400
    assert _rows(db) == []
