from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from skilltree.cache import layout_cache
from skilltree.config import get_settings
from skilltree.main import app
from skilltree.medal_catalog import get_catalog

client = TestClient(app)


@pytest.fixture
def fresh_config(monkeypatch):
    monkeypatch.delenv("SKILLTREE_MEDAL_CATALOG", raising=False)
    monkeypatch.delenv("SKILLTREE_DEBUG_ENDPOINTS", raising=False)
    get_settings.cache_clear()
    get_catalog.cache_clear()
    layout_cache.clear()
    yield monkeypatch
    get_settings.cache_clear()
    get_catalog.cache_clear()
    layout_cache.clear()


def _scenario_medals() -> list[dict]:
    return [
        {"id": "A", "category": "x", "prerequisites": []},
        {"id": "B", "category": "x", "prerequisites": [{"kind": "medal", "medal_id": "A", "wait_years": 2}]},
    ]


def test_health_endpoint(fresh_config) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "catalog_configured": False, "default_layout": "timeline"}


def test_list_layouts_includes_default() -> None:
    response = client.get("/api/layouts")

    assert response.status_code == 200
    assert any(entry["id"] == "timeline" for entry in response.json())


def test_generate_layout_scenario() -> None:
    response = client.post("/api/layouts/generate", json={"medals": _scenario_medals()})

    assert response.status_code == 200
    payload = response.json()
    positions = {node["medal_id"]: node["position"]["x"] for node in payload["nodes"]}
    assert positions == {"A": 0, "B": 2 * payload["meta"]["year_width"]}
    assert payload["connections"] == [
        {"from": "A", "to": "B", "wait_years": 2.0, "kind": "prerequisite", "label": "2 years"}
    ]


def test_generate_layout_unknown_preset_uses_default() -> None:
    response = client.post(
        "/api/layouts/generate",
        json={"preset_id": "nonexistent", "medals": _scenario_medals(), "options": {"year_width": 10}},
    )

    assert response.status_code == 200
    assert response.json()["meta"]["kind"] == "timeline"
    assert response.json()["meta"]["year_width"] == 10


def test_generate_layout_rejects_duplicate_ids() -> None:
    medals = _scenario_medals() + [{"id": "A", "category": "y"}]

    response = client.post("/api/layouts/generate", json={"medals": medals})

    assert response.status_code == 422
    assert "Duplicate medal id" in response.json()["detail"]


def test_generate_layout_rejects_non_positive_options() -> None:
    response = client.post(
        "/api/layouts/generate",
        json={"medals": _scenario_medals(), "options": {"row_height": 0}},
    )

    assert response.status_code == 422


def test_catalog_layout_requires_configuration(fresh_config) -> None:
    response = client.get("/api/layouts/catalog")

    assert response.status_code == 404


def test_catalog_layout_uses_configured_catalog(fresh_config, tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"medals": _scenario_medals()}), encoding="utf-8")
    fresh_config.setenv("SKILLTREE_MEDAL_CATALOG", str(path))

    response = client.get("/api/layouts/catalog", params={"preset_id": "timeline"})

    assert response.status_code == 200
    assert [node["medal_id"] for node in response.json()["nodes"]] == ["A", "B"]
    assert len(layout_cache) == 1


def test_cache_endpoint_hidden_unless_debug_enabled(fresh_config) -> None:
    assert client.delete("/api/layouts/cache").status_code == 404

    fresh_config.setenv("SKILLTREE_DEBUG_ENDPOINTS", "true")
    get_settings.cache_clear()

    assert client.delete("/api/layouts/cache").status_code == 204


def test_catalog_layout_missing_file_is_not_found(fresh_config, tmp_path) -> None:
    fresh_config.setenv("SKILLTREE_MEDAL_CATALOG", str(tmp_path / "nope.json"))
    unchecked = TestClient(app, raise_server_exceptions=False)

    response = unchecked.get("/api/layouts/catalog")

    assert response.status_code == 404
    assert "could not be read" in response.json()["detail"]


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"medals": [{"id": "A"}, {"id": "A"}]}),
        json.dumps({"medals": [{"category": "no-id"}]}),
    ],
)
def test_catalog_layout_malformed_file_is_unavailable(fresh_config, tmp_path, content: str) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(content, encoding="utf-8")
    fresh_config.setenv("SKILLTREE_MEDAL_CATALOG", str(path))
    unchecked = TestClient(app, raise_server_exceptions=False)

    response = unchecked.get("/api/layouts/catalog")

    assert response.status_code == 503
    assert response.json()["detail"].startswith("Configured medal catalog is invalid")
