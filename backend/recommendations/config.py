from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RecommendationConfig:
    artist_weight: int = 10
    genre_weight: int = 8
    subgenre_weight: int = 5
    default_limit: int = 20
    max_limit: int = 100
    sample_size: int = 5


DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()
