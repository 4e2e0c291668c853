"""Time-bounded in-memory cache of extracted documentation."""

from dataclasses import dataclass
from threading import Lock
import time
from typing import Callable, Dict, Optional

from marimo_docs_mcp.docs.models import ApiDoc


@dataclass
class CacheEntry:
    doc: ApiDoc
    stored_at: float


class DocCache:
    """Per-element memo of ApiDoc values with a fixed time-to-live.

    A ttl of zero or less disables the cache: ``put`` is a no-op and ``get``
    always misses.
    """

    def __init__(self, ttl_s: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_s = ttl_s
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = Lock()

    @property
    def enabled(self) -> bool:
        return self.ttl_s > 0

    def get(self, element: str) -> Optional[ApiDoc]:
        if not self.enabled:
            return None
        with self._lock:
            entry = self._entries.get(element)
            if entry is None:
                return None
            if self._clock() - entry.stored_at >= self.ttl_s:
                del self._entries[element]
                return None
            return entry.doc

    def put(self, element: str, doc: ApiDoc) -> None:
        if not self.enabled:
            return
        with self._lock:
            self._entries[element] = CacheEntry(doc=doc, stored_at=self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
