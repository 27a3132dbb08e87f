"""A queue that batches download counts before they are written out."""

from __future__ import annotations

import threading
from typing import Callable

from .ids import ProjectId, VersionId

__all__ = ["DownloadQueue"]

Download = tuple[ProjectId, VersionId]


class DownloadQueue:
    """Collects downloads so they can be recorded in one batch."""

    def __init__(self) -> None:
        self._queue: list[Download] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)

    def add(self, project_id: ProjectId, version_id: VersionId) -> None:
        """Record one download of ``version_id`` of ``project_id``."""
        with self._lock:
            self._queue.append((project_id, version_id))

    def take(self) -> list[Download]:
        """Remove and return every queued download, oldest first."""
        with self._lock:
            batch, self._queue = self._queue, []
        return batch

    def index(self, apply: Callable[[list[Download]], None]) -> int:
        """Hand the queued downloads to ``apply`` in one batch.

        ``apply`` is not called when the queue is empty. Returns the number
        of downloads handed over; if ``apply`` raises, they are dropped.
        """
        batch = self.take()
        if batch:
            apply(batch)
        return len(batch)