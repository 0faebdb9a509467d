"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from app.container import container
from settings import CORS_HEADERS
from web.server import app

REQUEST = {"percentile": 92.5, "category": "OPEN", "domicile": "Maharashtra", "branch_ids": ["CS"]}


@pytest.fixture
def client(db):
    container.reset()
    container.init(conn=db)
    with TestClient(app) as test_client:
        yield test_client
    container.reset()


def assert_cors(response):
    for header, value in CORS_HEADERS.items():
        assert response.headers[header] == value


class TestPredictColleges:
    def test_success(self, client):
        response = client.post("/predict-colleges", json=REQUEST)
        assert response.status_code == 200
        body = response.json()
        assert [c["closing_percentile"] for c in body["colleges"]] == [92.5, 90.0]
        assert body["total_found"] == 2
        assert body["criteria"] == {
            "percentile": 92.5,
            "category": "OPEN",
            "domicile": "Maharashtra",
            "branches_searched": 1,
        }
        assert set(body["colleges"][0]) == {
            "college_name",
            "branch_name",
            "fees_per_year",
            "closing_percentile",
            "location",
            "round_number",
        }
        assert_cors(response)

    @pytest.mark.parametrize("field", ["percentile", "category", "domicile", "branch_ids"])
    def test_missing_field(self, client, field):
        payload = {k: v for k, v in REQUEST.items() if k != field}
        response = client.post("/predict-colleges", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required parameters"}
        assert_cors(response)

    def test_empty_branch_ids(self, client):
        response = client.post("/predict-colleges", json={**REQUEST, "branch_ids": []})
        assert response.status_code == 400

    def test_malformed_json(self, client):
        response = client.post(
            "/predict-colleges",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required parameters"}

    def test_integrity_violation(self, client, db, insert):
        insert(db, "cutoffs", [("c9", "cb_missing", "OPEN", "Maharashtra", 1, 50.0)])
        response = client.post("/predict-colleges", json=REQUEST)
        assert response.status_code == 500
        assert response.json() == {"error": "Database query failed"}

    def test_database_failure(self, client, db):
        db.execute("DROP TABLE cutoffs")
        response = client.post("/predict-colleges", json=REQUEST)
        assert response.status_code == 500
        assert response.json() == {"error": "Database query failed"}
        assert_cors(response)

    def test_unclassified_failure(self, client, monkeypatch):
        def boom(payload):
            raise RuntimeError("boom")

        monkeypatch.setattr(container.prediction, "predict", boom)
        response = client.post("/predict-colleges", json=REQUEST)
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_preflight(self, client):
        response = client.options(
            "/predict-colleges",
            headers={"Origin": "https://example.org", "Access-Control-Request-Method": "POST"},
        )
        assert response.status_code == 200
        assert response.content == b""
        assert_cors(response)


class TestOtherRoutes:
    def test_branches(self, client):
        response = client.get("/branches")
        assert response.status_code == 200
        assert [b["id"] for b in response.json()["items"]] == ["CS", "IT", "ME"]
        assert_cors(response)

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
