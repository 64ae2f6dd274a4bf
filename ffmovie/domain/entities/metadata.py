# ffmovie/domain/entities/metadata.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class MovieMetadata:
    """
    Immutable snapshot of everything a Movie parsed from its tool output.
    Unmatched fields carry their defaults (0, 0.0 or ""), never None;
    only `file_size` is None when the file was not readable.
    """
    filename: str
    file_size: Optional[int] = None

    duration: float = 0.0
    frame_rate: float = 0.0
    frame_count: int = 0
    frame_width: int = 0
    frame_height: int = 0
    pixel_format: str = ""

    bit_rate: int = 0
    video_bit_rate: int = 0
    audio_bit_rate: int = 0
    audio_sample_rate: int = 0
    video_codec: str = ""
    audio_codec: str = ""
    audio_channels: int = 0
    has_audio: bool = False
    has_video: bool = False

    comment: str = ""
    title: str = ""
    artist: str = ""
    copyright: str = ""
    genre: str = ""
    track_number: int = 0
    year: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
