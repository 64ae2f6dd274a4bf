# ffmovie/services/output/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from ffmovie.common.logging import get_logger
from ffmovie.domain.enums.error_code import ErrorCode
from ffmovie.domain.enums.provider_kind import ProviderKind
from ffmovie.domain.errors import InvalidArgumentError
from ffmovie.domain.ports.output import OutputProviderPort
from ffmovie.services.output.cache import OutputCache, OutputCacheKey, default_output_cache

logger = get_logger(__name__)


class BaseOutputProvider(OutputProviderPort, ABC):
    """
    Shared plumbing for output providers: the movie file, the binary, and the
    persistent-cache contract. Subclasses only implement `_fetch()`.
    """
    kind: ProviderKind

    def __init__(self, binary: str, persistent: bool = False, cache: Optional[OutputCache] = None):
        self.binary = binary
        self.persistent = bool(persistent)
        self.movie_file: Optional[str] = None
        self._cache = cache if cache is not None else default_output_cache()

    @property
    def cache(self) -> OutputCache:
        return self._cache

    def set_movie_file(self, movie_file: str | Path) -> None:
        self.movie_file = str(movie_file)

    def cache_key(self) -> OutputCacheKey:
        return OutputCacheKey(kind=self.kind, binary=self.binary, movie_file=self.movie_file)

    def cached_output(self) -> Optional[str]:
        if not self.persistent:
            return None
        hit = self._cache.get(self.cache_key())
        if hit is not None:
            logger.debug("output cache hit: %s %s", self.kind, self.movie_file)
        return hit

    def remember(self, output: str) -> None:
        if self.persistent:
            self._cache.put(self.cache_key(), output)

    def get_output(self) -> str:
        hit = self.cached_output()
        if hit is not None:
            return hit
        output = self._fetch()
        self.remember(output)
        return output

    @abstractmethod
    def _fetch(self) -> str:
        """Produce fresh output for the current movie file."""

    def clone(self) -> "BaseOutputProvider":
        # the cache is process-wide state and stays shared between clones
        twin = self.__class__.__new__(self.__class__)
        twin.__dict__.update(self.__dict__)
        return twin

    def _require_movie_file(self) -> str:
        if not self.movie_file or not Path(self.movie_file).exists():
            raise InvalidArgumentError(
                "Movie file not found", code=ErrorCode.MOVIE_FILE_NOT_FOUND
            )
        return self.movie_file

    # ---- pickling: the cache holds a lock, rebind to the shared one on load --
    def __getstate__(self) -> Dict[str, Any]:
        state = dict(self.__dict__)
        state.pop("_cache", None)
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._cache = default_output_cache()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(binary={self.binary!r}, "
            f"persistent={self.persistent!r}, movie_file={self.movie_file!r})"
        )
