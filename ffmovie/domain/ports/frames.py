from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol
from ffmovie.domain.entities.frame import FrameImage


class FrameExtractorPort(Protocol):
    def extract(
        self,
        movie_file: str,
        seconds: float,
        width: Optional[int] = None,
        height: Optional[int] = None,
        quality: Optional[int] = None,
        out_path: Optional[Path] = None,
    ) -> FrameImage: ...
