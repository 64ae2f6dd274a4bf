# ffmovie/services/output/string_provider.py
from __future__ import annotations

from typing import Optional

from ffmovie.domain.enums.provider_kind import ProviderKind
from ffmovie.services.output.base import BaseOutputProvider
from ffmovie.services.output.cache import OutputCache


class StringOutputProvider(BaseOutputProvider):
    """
    Serves pre-supplied text instead of running a tool; used to parse captured
    output deterministically. Takes part in the persistent cache like the others.
    """
    kind = ProviderKind.string

    def __init__(self, binary: str = "ffmpeg", persistent: bool = False, cache: Optional[OutputCache] = None, output: str = ""):
        super().__init__(binary, persistent=persistent, cache=cache)
        self._output = ""
        if output:
            self.set_output(output)

    def set_output(self, output: str) -> None:
        self._output = output
        self.remember(output)

    def _fetch(self) -> str:
        return self._output
