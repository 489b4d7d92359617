from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
from datasets import load_dataset

from ..recommendations.models import SongRecord
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)


CANONICAL_COLUMNS: List[str] = [
    "id",
    "title",
    "artist",
    "genre",
    "subgenre",
    "popularity",
    "danceability",
    "energy",
    "tempo",
]

# canonical column -> column name in spotify_songs.csv
TEXT_COLUMNS: Dict[str, str] = {
    "id": "track_id",
    "title": "track_name",
    "artist": "track_artist",
    "genre": "playlist_genre",
    "subgenre": "playlist_subgenre",
}
NUMERIC_COLUMNS: Dict[str, str] = {
    "popularity": "track_popularity",
    "danceability": "danceability",
    "energy": "energy",
    "tempo": "tempo",
}


class IngestionError(RuntimeError):
    """Raised when the song catalog cannot be downloaded, parsed or is empty."""


def normalize_songs(df: pd.DataFrame) -> pd.DataFrame:
    """Map raw dataset columns into the canonical song schema."""
    canonical = pd.DataFrame(index=df.index)

    for column, source in TEXT_COLUMNS.items():
        if source in df.columns:
            canonical[column] = df[source].fillna("").astype(str)
        else:
            canonical[column] = ""

    for column, source in NUMERIC_COLUMNS.items():
        if source in df.columns:
            canonical[column] = pd.to_numeric(df[source], errors="coerce")
        else:
            canonical[column] = pd.NA

    # Rows without a track id cannot be addressed by the API
    canonical = canonical[canonical["id"] != ""]

    return canonical[CANONICAL_COLUMNS].reset_index(drop=True)


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Execute the ingestion pipeline.

    Steps:
    - Download the songs CSV.
    - Map raw fields into the canonical song schema.
    - Persist cleaned data as CSV for the API to load.
    """
    config.raw_data_dir.mkdir(parents=True, exist_ok=True)
    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    logger.info("Downloading songs dataset from %s", config.dataset_url)
    dataset = load_dataset(
        "csv",
        data_files=config.dataset_url,
        split="train",
        cache_dir=str(config.raw_data_dir),
    )
    canonical = normalize_songs(dataset.to_pandas())

    output_path = config.processed_path
    canonical.to_csv(output_path, index=False)
    logger.info("Wrote %d songs to %s", len(canonical), output_path)
    return output_path


def _optional(value: Any, cast: type) -> Any:
    if pd.isna(value):
        return None
    return cast(value)


def load_song_records(path: Path) -> list[SongRecord]:
    """Read a processed songs CSV into song records."""
    df = pd.read_csv(
        path,
        dtype={column: str for column in TEXT_COLUMNS},
        keep_default_na=False,
        na_values=[""],
    )
    text_columns = list(TEXT_COLUMNS)
    df[text_columns] = df[text_columns].fillna("")

    records: list[SongRecord] = []
    for row in df.to_dict("records"):
        if not row["id"]:
            continue
        records.append(SongRecord(
            id=row["id"],
            title=row["title"],
            artist=row["artist"],
            genre=row["genre"],
            subgenre=row["subgenre"],
            popularity=_optional(row["popularity"], int),
            danceability=_optional(row["danceability"], float),
            energy=_optional(row["energy"], float),
            tempo=_optional(row["tempo"], float),
        ))
    return records


def load_catalog(
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
    refresh: bool = False,
) -> list[SongRecord]:
    """
    Return the song records the API should serve.

    Reuses the processed CSV when present unless ``refresh`` is set.
    Raises ``IngestionError`` rather than returning an empty catalog.
    """
    path = config.processed_path
    try:
        if refresh or not path.is_file():
            path = run_ingestion(config)
        records = load_song_records(path)
    except Exception as exc:
        raise IngestionError(f"Failed to load songs catalog: {exc}") from exc

    if not records:
        raise IngestionError(f"No songs could be loaded from {path}")
    return records


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    path = run_ingestion()
    print(f"Ingestion complete. Processed data saved to: {path}")
