from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from backend.app import app, get_catalog_store
from backend.data_ingestion.ingest import IngestionError
from backend.recommendations.data_store import CatalogStore
from backend.recommendations.models import SongRecord


@pytest.fixture
def store():
    s = CatalogStore()
    s.load([SongRecord(id="old", artist="Old Artist", genre="rock")])
    app.dependency_overrides[get_catalog_store] = lambda: s
    yield s
    app.dependency_overrides.clear()


@patch("backend.app.load_catalog")
def test_reload_swaps_catalog(mock_load, store):
    mock_load.return_value = [
        SongRecord(id="a", artist="New Artist", genre="pop"),
        SongRecord(id="b", artist="Another", genre="pop"),
    ]
    client = TestClient(app)

    resp = client.post("/catalog/reload")
    assert resp.status_code == 200
    assert resp.json() == {"status": "reloaded", "songs": 2}
    mock_load.assert_called_once_with(refresh=True)

    resp = client.get("/recommendations", params={"q": "pop"})
    assert [t["id"] for t in resp.json()] == ["a", "b"]


@patch("backend.app.load_catalog", side_effect=IngestionError("download failed"))
def test_reload_failure_keeps_old_catalog(mock_load, store):
    client = TestClient(app)

    resp = client.post("/catalog/reload")
    assert resp.status_code == 502
    assert "download failed" in resp.json()["detail"]
    assert [s.id for s in store.snapshot()] == ["old"]


# ── Startup / shutdown ───────────────────────────────────────────────────


@patch("backend.app.load_catalog")
def test_startup_loads_catalog(mock_load):
    mock_load.return_value = [SongRecord(id="1", artist="Daft Punk", genre="edm")]

    with TestClient(app) as client:
        assert client.get("/health").json() == {"status": "ok", "songs": 1}
        assert len(app.state.catalog) == 1

    # Catalog is released on shutdown
    assert app.state.catalog.is_empty


@patch("backend.app.load_catalog", side_effect=IngestionError("no songs"))
def test_startup_fails_fast_on_ingestion_error(mock_load):
    with pytest.raises(IngestionError):
        with TestClient(app):
            pass
