"""
Configuration for the song ingestion pipeline.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IngestionConfig:
    dataset_url: str = (
        "https://raw.githubusercontent.com/rfordatascience/tidytuesday/"
        "master/data/2020/2020-01-21/spotify_songs.csv"
    )
    raw_data_dir: Path = Path("backend/data/raw")
    processed_data_dir: Path = Path("backend/data/processed")
    processed_filename: str = "songs.csv"

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
