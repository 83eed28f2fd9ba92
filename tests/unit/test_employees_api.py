from __future__ import annotations

import pytest

ANN_LEE = {
    "firstName": "Ann",
    "lastName": "Lee",
    "email": "ann@x.com",
    "roleId": "1",
    "departmentId": "1",
    "hireDate": "2024-01-01",
    "status": "active",
}


def test_list_employees_uses_camel_case(client):
    response = client.get("/api/v1/employees")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 5
    assert data[0]["firstName"] == "John"
    assert data[0]["hireDate"] == "2020-01-15"
    assert "performanceReviews" not in data[0]


def test_list_employees_filters(client):
    response = client.get("/api/v1/employees", params={"status": "active", "departmentId": "1"})
    assert [e["id"] for e in response.json()] == ["1", "2"]

    response = client.get("/api/v1/employees", params={"search": "williams"})
    assert [e["id"] for e in response.json()] == ["4"]


def test_list_employees_rejects_unknown_status(client):
    response = client.get("/api/v1/employees", params={"status": "retired"})
    assert response.status_code == 422


def test_get_employee_includes_reviews(client):
    response = client.get("/api/v1/employees/3")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "3"
    assert len(data["performanceReviews"]) == 1
    assert data["performanceReviews"][0]["areasToImprove"] == ["Documentation", "Meeting deadlines"]


def test_get_employee_not_found(client):
    response = client.get("/api/v1/employees/999")
    assert response.status_code == 404
    assert "999" in response.json()["detail"]


def test_create_employee(client):
    response = client.post("/api/v1/employees", json=ANN_LEE)
    assert response.status_code == 201
    created = response.json()
    assert created["id"]
    assert created["firstName"] == "Ann"

    listing = client.get("/api/v1/employees").json()
    assert len(listing) == 6
    assert listing[-1]["id"] == created["id"]


def test_create_employee_requires_fields(client):
    payload = {k: v for k, v in ANN_LEE.items() if k != "email"}
    response = client.post("/api/v1/employees", json=payload)
    assert response.status_code == 422


def test_update_employee(client):
    response = client.patch("/api/v1/employees/2", json={"status": "on_leave"})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "on_leave"
    assert data["firstName"] == "Jane"


def test_update_employee_not_found(client):
    response = client.patch("/api/v1/employees/999", json={"status": "on_leave"})
    assert response.status_code == 404
    assert len(client.get("/api/v1/employees").json()) == 5


def test_update_employee_null_required_field_is_rejected(client):
    response = client.patch("/api/v1/employees/2", json={"firstName": None})
    assert response.status_code == 422
    assert client.get("/api/v1/employees/2").json()["firstName"] == "Jane"


def test_delete_employee(client):
    response = client.delete("/api/v1/employees/5")
    assert response.status_code == 204
    assert client.get("/api/v1/employees/5").status_code == 404
    assert client.delete("/api/v1/employees/5").status_code == 404


@pytest.mark.anyio
async def test_async_client_uses_injected_store(async_client, store):
    await store.delete_employee("1")

    response = await async_client.get("/api/v1/employees")
    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == ["2", "3", "4", "5"]


@pytest.mark.anyio
async def test_list_failure_returns_500(async_client, store, monkeypatch):
    async def _broken(**kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(store, "list_employees", _broken)
    response = await async_client.get("/api/v1/employees")
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to retrieve employees"
