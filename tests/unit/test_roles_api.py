from __future__ import annotations


def test_list_roles_filters(client):
    response = client.get("/api/v1/roles", params={"level": 4})
    assert response.status_code == 200
    assert [r["title"] for r in response.json()] == ["CTO", "HR Manager", "Marketing Director"]

    response = client.get("/api/v1/roles", params={"departmentId": "2", "search": "senior"})
    assert [r["id"] for r in response.json()] == ["3"]


def test_get_role(client):
    response = client.get("/api/v1/roles/1")
    assert response.status_code == 200
    data = response.json()
    assert data["isManager"] is True
    assert data["responsibilities"][0] == "Company strategy"


def test_get_role_not_found(client):
    assert client.get("/api/v1/roles/nope").status_code == 404


def test_create_role_drops_blank_responsibilities(client):
    payload = {
        "title": "QA Engineer",
        "description": "Keeps releases honest",
        "responsibilities": ["Test plans", "", "   ", "Automation"],
        "departmentId": "2",
        "level": 2,
        "isManager": False,
    }
    response = client.post("/api/v1/roles", json=payload)
    assert response.status_code == 201
    assert response.json()["responsibilities"] == ["Test plans", "Automation"]


def test_update_role(client):
    response = client.patch("/api/v1/roles/3", json={"responsibilities": ["Mentoring", " "]})
    assert response.status_code == 200
    data = response.json()
    assert data["responsibilities"] == ["Mentoring"]
    assert data["title"] == "Senior Developer"


def test_delete_role(client):
    assert client.delete("/api/v1/roles/5").status_code == 204
    assert len(client.get("/api/v1/roles").json()) == 4
    assert client.delete("/api/v1/roles/5").status_code == 404
