"""
Tests: HTTP API.

Run with:
    pytest quote_engine/tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from quote_engine.api import create_app
from quote_engine.models.inputs import Inputs

client = TestClient(create_app())


class TestMeta:
    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    def test_list_scenarios(self):
        resp = client.get("/api/scenarios")
        assert resp.status_code == 200
        assert [s["scenario_id"] for s in resp.json()] == ["conservative", "standard", "aggressive"]

    def test_list_presets(self):
        resp = client.get("/api/scenarios/presets")
        assert resp.status_code == 200
        assert {p["preset_id"] for p in resp.json()} == {"excellent", "high", "medium", "low"}

    def test_unknown_scenario_is_404(self):
        assert client.get("/api/scenarios/premium").status_code == 404

    def test_defaults(self):
        resp = client.get("/api/quote/defaults")
        assert resp.status_code == 200
        assert resp.json()["volume"]["n_sites"] == 17000


class TestQuote:
    def test_default_quote(self):
        resp = client.post("/api/quote", json={})
        assert resp.status_code == 200
        body = resp.json()
        assert body["scenario_id"] == "conservative"
        assert body["capex"]["price"] > 0
        assert len(body["line_items"]) == 21

    def test_quote_with_scenario_and_preset(self):
        resp = client.post("/api/quote", json={"scenario_id": "aggressive", "preset_id": "low"})
        assert resp.status_code == 200
        assert resp.json()["scenario_id"] == "aggressive"

    def test_unknown_scenario(self):
        resp = client.post("/api/quote", json={"scenario_id": "premium"})
        assert resp.status_code == 404
        assert "premium" in resp.json()["detail"]

    def test_unknown_preset(self):
        assert client.post("/api/quote", json={"preset_id": "perfect"}).status_code == 404

    def test_zero_scanners_is_configuration_error(self):
        inputs = Inputs().model_dump(mode="json")
        inputs["scanning"]["scanner_count"] = 0
        resp = client.post("/api/quote", json={"inputs": inputs})
        assert resp.status_code == 422
        assert "scanner count" in resp.json()["detail"]

    def test_malformed_inputs(self):
        resp = client.post("/api/quote", json={"inputs": {"volume": {"n_sites": "many"}}})
        assert resp.status_code == 422


class TestOtherEndpoints:
    def test_compare(self):
        resp = client.post("/api/quote/compare", json={})
        assert resp.status_code == 200
        assert len(resp.json()) == 3

    def test_validate(self):
        inputs = Inputs().model_dump(mode="json")
        inputs["volume"]["min_docs_per_site"] = 20
        resp = client.post("/api/quote/validate", json=inputs)
        assert resp.status_code == 200
        body = resp.json()
        assert body["is_valid"] is False
        assert "Min Docs cannot exceed Max Docs" in body["errors"]

    def test_export(self):
        resp = client.post("/api/quote/export", json={"scenario_id": "standard"})
        assert resp.status_code == 200
        assert "quote_standard_" in resp.headers["content-disposition"]
        assert resp.json()["metadata"]["scenario_id"] == "standard"

    def test_baseline(self):
        resp = client.get("/api/baseline")
        assert resp.status_code == 200
        assert resp.json()["runtime_state"] is None
