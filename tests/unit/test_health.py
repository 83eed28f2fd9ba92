from __future__ import annotations


def test_health_reports_record_counts(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["records"] == {"employees": 5, "roles": 5, "departments": 4, "reviews": 4}


def test_readiness_probe(client):
    response = client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["ready"] is True


def test_health_counts_follow_mutations(client):
    assert client.delete("/api/v1/employees/1").status_code == 204
    assert client.get("/api/v1/health").json()["records"]["employees"] == 4
