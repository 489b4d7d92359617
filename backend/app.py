from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from .data_ingestion.ingest import IngestionError, load_catalog
from .recommendations.config import DEFAULT_RECOMMENDATION_CONFIG
from .recommendations.data_store import CatalogStore
from .recommendations.models import (
    CatalogStatus,
    RecommendationQuery,
    SongRecord,
    TrackOut,
)
from .recommendations.retrieval import get_recommendations

logger = logging.getLogger(__name__)

_REC_CONFIG = DEFAULT_RECOMMENDATION_CONFIG


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = CatalogStore()
    # IngestionError propagates and aborts startup: never serve an empty catalog
    records = await run_in_threadpool(load_catalog)
    store.load(records)
    app.state.catalog = store
    logger.info("API startup complete with %d songs", len(store))
    yield
    store.clear()
    logger.info("API shutdown, catalog released")


app = FastAPI(title="Song Recommendation API", version="1.0.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


def get_catalog_store(request: Request) -> CatalogStore:
    return request.app.state.catalog


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "Hello from the song recommendation backend!"}


@app.get("/health")
def health(store: CatalogStore = Depends(get_catalog_store)) -> dict:
    return {"status": "ok", "songs": len(store)}


@app.get("/songs", response_model=list[SongRecord])
def songs(store: CatalogStore = Depends(get_catalog_store)) -> list[SongRecord]:
    return list(store.snapshot()[: _REC_CONFIG.sample_size])


@app.get("/recommendations", response_model=list[TrackOut])
def recommendations(
    artist: str | None = None,
    genre: str | None = None,
    q: str | None = Query(
        default=None, description="Single search box; fills artist and genre hints"
    ),
    limit: int = Query(default=_REC_CONFIG.default_limit, ge=0),
    store: CatalogStore = Depends(get_catalog_store),
) -> list[TrackOut]:
    query = RecommendationQuery(
        artist=artist if artist is not None else (q or ""),
        genre=genre if genre is not None else (q or ""),
        limit=min(limit, _REC_CONFIG.max_limit),
    )
    return get_recommendations(store, query, _REC_CONFIG)


# ── Catalog maintenance ──────────────────────────────────────────────────


@app.post("/catalog/reload", response_model=CatalogStatus)
def reload_catalog(store: CatalogStore = Depends(get_catalog_store)) -> CatalogStatus:
    try:
        records = load_catalog(refresh=True)
    except IngestionError as exc:
        logger.error("Catalog reload failed, keeping %d songs: %s", len(store), exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    store.load(records)
    return CatalogStatus(status="reloaded", songs=len(store))
