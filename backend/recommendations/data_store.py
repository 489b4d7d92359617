from __future__ import annotations

import logging
import threading
from typing import Iterable

from .models import SongRecord

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    In-memory song catalog shared by all queries.

    The catalog is held as an immutable tuple that ``load`` replaces
    wholesale. Readers grab the current tuple without locking; the lock only
    serialises writers around the swap, so a reader sees either the old
    snapshot or the new one, never a mix.
    """

    def __init__(self) -> None:
        self._songs: tuple[SongRecord, ...] = ()
        self._write_lock = threading.Lock()

    def load(self, records: Iterable[SongRecord]) -> None:
        """Replace the current snapshot with ``records``."""
        snapshot = tuple(records)
        with self._write_lock:
            self._songs = snapshot
        logger.info("Catalog loaded with %d songs", len(snapshot))

    def snapshot(self) -> tuple[SongRecord, ...]:
        return self._songs

    def clear(self) -> None:
        with self._write_lock:
            self._songs = ()

    @property
    def is_empty(self) -> bool:
        return not self._songs

    def __len__(self) -> int:
        return len(self._songs)
