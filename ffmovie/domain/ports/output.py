from __future__ import annotations
from typing import Optional, Protocol
from ffmovie.domain.enums.provider_kind import ProviderKind


class OutputProviderPort(Protocol):
    kind: ProviderKind
    binary: str
    persistent: bool
    movie_file: Optional[str]

    def set_movie_file(self, movie_file: str) -> None: ...
    def get_output(self) -> str: ...
    def clone(self) -> "OutputProviderPort": ...
