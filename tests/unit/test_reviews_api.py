from __future__ import annotations

REVIEW = {
    "employeeId": "1",
    "reviewerId": "2",
    "date": "2023-03-18",
    "rating": 4.7,
    "comments": "Steady hand",
    "strengths": ["Vision"],
    "areasToImprove": ["Delegation"],
    "goals": ["Grow the board"],
}


def test_list_reviews_filtered_by_employee(client):
    response = client.get("/api/v1/reviews", params={"employeeId": "5"})
    assert response.status_code == 200
    assert [r["id"] for r in response.json()] == ["4"]
    assert len(client.get("/api/v1/reviews").json()) == 4


def test_create_review_attaches_to_employee(client):
    response = client.post("/api/v1/reviews", json=REVIEW)
    assert response.status_code == 201
    review_id = response.json()["id"]

    employee = client.get("/api/v1/employees/1").json()
    assert [r["id"] for r in employee["performanceReviews"]] == [review_id]


def test_create_review_requires_rating(client):
    payload = {k: v for k, v in REVIEW.items() if k != "rating"}
    assert client.post("/api/v1/reviews", json=payload).status_code == 422


def test_update_and_delete_review(client):
    response = client.patch("/api/v1/reviews/3", json={"rating": 4.1})
    assert response.status_code == 200
    assert response.json()["rating"] == 4.1
    assert response.json()["comments"] == "Good performer with room for growth"

    assert client.delete("/api/v1/reviews/3").status_code == 204
    assert client.get("/api/v1/reviews/3").status_code == 404
