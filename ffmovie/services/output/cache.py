# ffmovie/services/output/cache.py
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, Optional

from ffmovie.domain.enums.provider_kind import ProviderKind


@dataclass(frozen=True)
class OutputCacheKey:
    kind: ProviderKind
    binary: str
    movie_file: Optional[str]


class OutputCache:
    """
    Raw tool output keyed by (provider kind, binary, movie file).

    Entries never expire: a persistent provider keeps returning the text it
    first captured even if the file changes on disk afterwards. Access is
    serialized with a lock so one cache can be shared across threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[OutputCacheKey, str] = {}

    def get(self, key: OutputCacheKey) -> Optional[str]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: OutputCacheKey, output: str) -> None:
        with self._lock:
            self._entries[key] = output

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_DEFAULT_CACHE = OutputCache()


def default_output_cache() -> OutputCache:
    """The process-wide cache used by providers that were not given one."""
    return _DEFAULT_CACHE
