"""Tests for solution endpoints."""

import pytest
from fastapi.testclient import TestClient


def _propose(client: TestClient, issue_id: str, title: str) -> dict:
    response = client.post(
        f"/api/issues/{issue_id}/solutions",
        json={"title": title, "description": f"Details for {title}"},
    )
    assert response.status_code == 201
    return response.json()["solution"]


class TestCreateSolution:
    """Tests for POST /api/issues/{id}/solutions."""

    def test_create(self, client: TestClient, issue: dict) -> None:
        response = client.post(
            f"/api/issues/{issue['id']}/solutions",
            json={"title": " Mesh network ", "description": " Replace the routers. "},
        )

        assert response.status_code == 201
        solution = response.json()["solution"]
        assert solution["title"] == "Mesh network"
        assert solution["description"] == "Replace the routers."
        assert solution["issueId"] == issue["id"]
        assert solution["upvotes"] == 0

    @pytest.mark.parametrize(
        "body, message",
        [
            ({"title": "", "description": "d"}, "Solution title is required"),
            ({"title": "   ", "description": "d"}, "Solution title is required"),
            ({"description": "d"}, "Solution title is required"),
            ({"title": "t", "description": "  "}, "Solution description is required"),
            ({"title": "t"}, "Solution description is required"),
        ],
    )
    def test_blank_fields_rejected(self, client: TestClient, issue: dict, body: dict, message: str) -> None:
        response = client.post(f"/api/issues/{issue['id']}/solutions", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": message}
        assert client.get(f"/api/issues/{issue['id']}/solutions").json() == {"solutions": []}

    def test_missing_issue(self, client: TestClient) -> None:
        response = client.post(
            "/api/issues/does-not-exist/solutions", json={"title": "t", "description": "d"}
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Issue not found"}


class TestListSolutions:
    """Tests for GET /api/issues/{id}/solutions."""

    def test_sorted_by_votes_then_earliest(self, client: TestClient, clock, issue: dict) -> None:
        a = _propose(client, issue["id"], "A")
        b = _propose(client, issue["id"], "B")
        c = _propose(client, issue["id"], "C")
        client.put(f"/api/solutions/{a['id']}", json={"upvotes": 3})
        client.put(f"/api/solutions/{b['id']}", json={"upvotes": 5})
        client.put(f"/api/solutions/{c['id']}", json={"upvotes": 5})

        solutions = client.get(f"/api/issues/{issue['id']}/solutions").json()["solutions"]

        assert [s["title"] for s in solutions] == ["B", "C", "A"]
        assert [s["upvotes"] for s in solutions] == [5, 5, 3]

    def test_missing_issue(self, client: TestClient) -> None:
        response = client.get("/api/issues/does-not-exist/solutions")

        assert response.status_code == 404


class TestUpdateSolution:
    """Tests for PUT /api/solutions/{id} and POST /api/solutions/{id}/upvote."""

    def test_explicit_total_stored_verbatim(self, client: TestClient, issue: dict) -> None:
        solution = _propose(client, issue["id"], "A")

        response = client.put(f"/api/solutions/{solution['id']}", json={"upvotes": 7})

        assert response.status_code == 200
        assert response.json()["solution"]["upvotes"] == 7

    def test_no_total_increments(self, client: TestClient, issue: dict) -> None:
        solution = _propose(client, issue["id"], "A")
        client.put(f"/api/solutions/{solution['id']}", json={"upvotes": 2})

        response = client.put(f"/api/solutions/{solution['id']}", json={})

        assert response.status_code == 200
        assert response.json()["solution"]["upvotes"] == 3

    def test_no_body_increments(self, client: TestClient, issue: dict) -> None:
        solution = _propose(client, issue["id"], "A")

        response = client.put(f"/api/solutions/{solution['id']}")

        assert response.status_code == 200
        assert response.json()["solution"]["upvotes"] == 1

    def test_negative_total_rejected(self, client: TestClient, issue: dict) -> None:
        solution = _propose(client, issue["id"], "A")

        response = client.put(f"/api/solutions/{solution['id']}", json={"upvotes": -2})

        assert response.status_code == 400
        listed = client.get(f"/api/issues/{issue['id']}/solutions").json()["solutions"]
        assert listed[0]["upvotes"] == 0

    def test_upvote_endpoint(self, client: TestClient, issue: dict) -> None:
        solution = _propose(client, issue["id"], "A")

        for _ in range(3):
            response = client.post(f"/api/solutions/{solution['id']}/upvote")

        assert response.status_code == 200
        assert response.json()["solution"]["upvotes"] == 3

    def test_missing_solution(self, client: TestClient) -> None:
        assert client.put("/api/solutions/does-not-exist", json={"upvotes": 1}).status_code == 404
        assert client.put("/api/solutions/does-not-exist", json={}).status_code == 404

        response = client.post("/api/solutions/does-not-exist/upvote")

        assert response.status_code == 404
        assert response.json() == {"error": "Solution not found"}


class TestDeleteSolution:
    """Tests for DELETE /api/solutions/{id}."""

    def test_delete(self, client: TestClient, issue: dict) -> None:
        solution = _propose(client, issue["id"], "A")

        response = client.delete(f"/api/solutions/{solution['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Solution deleted successfully"}
        assert client.get(f"/api/issues/{issue['id']}/solutions").json() == {"solutions": []}

    def test_missing_solution(self, client: TestClient, issue: dict) -> None:
        _propose(client, issue["id"], "A")

        response = client.delete("/api/solutions/does-not-exist")

        assert response.status_code == 404
        assert len(client.get(f"/api/issues/{issue['id']}/solutions").json()["solutions"]) == 1
