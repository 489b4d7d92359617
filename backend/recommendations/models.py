from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_RECOMMENDATION_CONFIG


class SongRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str = ""
    artist: str = ""
    genre: str = ""
    subgenre: str = ""
    popularity: int | None = None
    danceability: float | None = None
    energy: float | None = None
    tempo: float | None = None


class RecommendationQuery(BaseModel):
    artist: str = Field(default="", description="Matched against the song artist")
    genre: str = Field(
        default="", description="Matched against the primary genre and subgenre"
    )
    limit: int = Field(default=DEFAULT_RECOMMENDATION_CONFIG.default_limit, ge=0)


class TrackOut(BaseModel):
    id: str
    title: str
    artist: str
    primary_genre: str
    year: int | None = None


class CatalogStatus(BaseModel):
    status: str
    songs: int
