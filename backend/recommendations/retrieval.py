from __future__ import annotations

import logging
import time

from .config import DEFAULT_RECOMMENDATION_CONFIG, RecommendationConfig
from .data_store import CatalogStore
from .models import RecommendationQuery, SongRecord, TrackOut

logger = logging.getLogger(__name__)


def _normalize_hint(hint: str | None) -> str:
    return (hint or "").lower()


def score_song(
    song: SongRecord,
    artist_hint: str,
    genre_hint: str,
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
) -> int:
    """
    Compute the match score of a single song.

    Hints are expected to be normalised already. An empty hint adds nothing;
    artist, genre and subgenre bonuses are additive.
    """
    score = 0

    if artist_hint and artist_hint in song.artist.lower():
        score += config.artist_weight

    if genre_hint:
        if genre_hint in song.genre.lower():
            score += config.genre_weight
        if genre_hint in song.subgenre.lower():
            score += config.subgenre_weight

    return score


def _to_track(song: SongRecord) -> TrackOut:
    # The source dataset carries no release year.
    return TrackOut(
        id=song.id,
        title=song.title,
        artist=song.artist,
        primary_genre=song.genre,
        year=None,
    )


def get_recommendations(
    store: CatalogStore,
    query: RecommendationQuery,
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
) -> list[TrackOut]:
    start_time = time.time()

    artist_hint = _normalize_hint(query.artist)
    genre_hint = _normalize_hint(query.genre)

    if query.limit == 0 or not (artist_hint or genre_hint):
        return []

    # One snapshot per query so a concurrent reload cannot mix catalogs.
    songs = store.snapshot()

    matched: list[tuple[int, SongRecord]] = []
    for song in songs:
        score = score_song(song, artist_hint, genre_hint, config)
        if score > 0:
            matched.append((score, song))

    # sort() is stable: equal scores keep catalog load order
    matched.sort(key=lambda pair: pair[0], reverse=True)

    results = [_to_track(song) for _, song in matched[: query.limit]]

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.debug(
        "artist=%r genre=%r matched %d of %d songs, returned %d in %sms",
        artist_hint,
        genre_hint,
        len(matched),
        len(songs),
        len(results),
        elapsed_ms,
    )
    return results
