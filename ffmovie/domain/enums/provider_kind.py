from __future__ import annotations
from enum import StrEnum


class ProviderKind(StrEnum):
    ffmpeg = "ffmpeg"
    ffprobe = "ffprobe"
    string = "string"
