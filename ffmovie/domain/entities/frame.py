# ffmovie/domain/entities/frame.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class FrameResource:
    """
    Opaque handle for an imported frame file. The bytes are owned by the
    resource, so the file it came from can be deleted right after import.
    """
    filename: str
    data: bytes = field(repr=False)
    sha256: str = ""

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class FrameImage:
    resource: FrameResource
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None  # as reported by Pillow, e.g. "JPEG"

    def __post_init__(self):
        if self.width is not None and self.width < 0:
            raise ValueError("width must be >= 0")
        if self.height is not None and self.height < 0:
            raise ValueError("height must be >= 0")

    @property
    def media_type(self) -> str:
        fmt = (self.format or "").lower()
        if fmt in ("jpeg", "jpg", "mpo"):
            return "image/jpeg"
        if fmt:
            return f"image/{fmt}"
        return "application/octet-stream"
