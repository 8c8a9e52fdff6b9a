"""
Tests for the FastAPI endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from simpledata import config
from simpledata.api import dependencies
from simpledata.api.router_meta import reload_store
from simpledata.data.schemas import Claim
from simpledata.data.store import DataStore, Snapshot
from simpledata.main import create_app


@pytest.fixture
def client(store):
    """Test client bound to the sample store (lifespan not run)."""
    dependencies.set_store(store)
    yield TestClient(create_app())
    dependencies.set_store(None)


@pytest.fixture
def empty_client():
    dependencies.set_store(DataStore.from_records())
    yield TestClient(create_app())
    dependencies.set_store(None)


# ============================================================================
# Meta
# ============================================================================

class TestMeta:

    def test_health(self, client):
        body = client.get("/api/health").json()
        assert body["status"] == "ok"
        assert body["customers"] == 6
        assert body["last_error"] is None

    def test_states(self, client):
        assert client.get("/api/states").json() == {"states": ["AZ", "IL", "TX"]}

    def test_store_not_initialized(self):
        dependencies.set_store(None)
        response = TestClient(create_app()).get("/api/health")
        assert response.status_code == 503

    def test_store_not_loaded(self):
        dependencies.set_store(DataStore())
        try:
            client = TestClient(create_app())
            assert client.get("/api/claims/open/count").status_code == 503
            assert client.get("/api/health").json()["loaded"] is False
        finally:
            dependencies.set_store(None)

    def test_reload_endpoint(self, client):
        response = client.post("/api/reload")
        assert response.status_code == 200
        assert response.json()["status"] == "reloading"

    def test_reload_store_records_failure(self, store, data_dir):
        (data_dir / "agents.csv").write_text("")
        reload_store(store)
        assert store.last_error is not None
        assert store.row_counts()["agents"] == 4

    def test_queries_read_current_snapshot(self, client, store):
        store.snapshot = Snapshot.build(claims=[Claim(1, 100, True), Claim(2, 100, True)])
        assert client.get("/api/claims/open/count").json() == {"count": 2}


class TestLifespan:

    def test_startup_loads_data_dir(self, data_dir, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "DATA_DIR", data_dir)
        monkeypatch.setattr(config, "REPORTS_FOLDER", tmp_path / "reports")
        with TestClient(create_app()) as client:
            body = client.get("/api/health").json()
        dependencies.set_store(None)
        assert body["loaded"] is True
        assert body["claims"] == 6

    def test_startup_without_data(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "DATA_DIR", tmp_path / "missing")
        monkeypatch.setattr(config, "REPORTS_FOLDER", tmp_path / "reports")
        with TestClient(create_app()) as client:
            body = client.get("/api/health").json()
            status = client.get("/api/states").status_code
        dependencies.set_store(None)
        assert body["loaded"] is False
        assert "not found" in body["last_error"]
        assert status == 503


# ============================================================================
# Queries
# ============================================================================

class TestQueryEndpoints:

    def test_open_claims_count(self, client):
        assert client.get("/api/claims/open/count").json() == {"count": 4}

    def test_agent_customer_count(self, client):
        assert client.get("/api/agents/9/customers/count").json() == {"count": 2}
        assert client.get("/api/agents/8/customers/count").json() == {"count": 0}

    def test_state_agent_count(self, client):
        assert client.get("/api/states/TX/agents/count").json() == {"count": 2}
        assert client.get("/api/states/tx/agents/count").json() == {"count": 0}

    def test_customer_premium(self, client):
        assert client.get("/api/customers/2/premium").json() == {"customer_id": 2, "premium_per_month": 100.0}

    def test_customer_open_claims(self, client):
        response = client.get("/api/customers/open-claims", params={"first_name": "John", "last_name": "Smith"})
        assert response.json()["open_claims"] == 2

    def test_customer_open_claims_zero_is_not_404(self, client):
        response = client.get("/api/customers/open-claims", params={"first_name": "Sam", "last_name": "Lee"})
        assert response.status_code == 200
        assert response.json()["open_claims"] == 0

    def test_customer_open_claims_unknown(self, client):
        response = client.get("/api/customers/open-claims", params={"first_name": "No", "last_name": "Body"})
        assert response.status_code == 404

    def test_state_language(self, client):
        assert client.get("/api/states/TX/language").json() == {"state": "TX", "language": "Spanish"}

    def test_state_language_no_data(self, client):
        assert client.get("/api/states/CA/language").status_code == 404

    def test_top_premium_customer(self, client):
        body = client.get("/api/customers/top-premium").json()
        assert body["id"] == 3
        assert body["first_name"] == "Ana"

    def test_top_premium_customer_empty(self, empty_client):
        assert empty_client.get("/api/customers/top-premium").status_code == 404

    def test_state_open_claims(self, client):
        assert client.get("/api/states/TX/open-claims").json() == {"count": 2}

    def test_agent_premiums(self, client):
        body = client.get("/api/agents/premiums").json()
        assert body["agents"] == [
            {"agent_id": 9, "total_premium": 220.5},
            {"agent_id": 7, "total_premium": 250.0},
            {"agent_id": 5, "total_premium": 10.0},
        ]


# ============================================================================
# Reports
# ============================================================================

class TestReportEndpoints:

    def test_agent_report_json(self, client):
        data = client.get("/api/reports/agents").json()["data"]
        assert data["summary"]["open_claims"] == 4
        assert data["agents"][0]["agent_id"] == 7

    def test_agent_report_excel(self, client, tmp_path, monkeypatch):
        monkeypatch.setattr("simpledata.api.router_reports.REPORTS_FOLDER", tmp_path)
        response = client.get("/api/reports/agents/excel")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith(
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
        assert (tmp_path / "Agent_Premium_Report.xlsx").exists()
