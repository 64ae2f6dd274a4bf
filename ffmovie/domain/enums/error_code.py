# ffmovie/domain/enums/error_code.py
from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Stable codes carried by every MovieError, for caller-side branching."""
    FFMPEG_NOT_FOUND = 334560
    MOVIE_FILE_NOT_FOUND = 334561
    FFPROBE_NOT_FOUND = 334563
    INVALID_FRAME_NUMBER = 1359623542
    FRAME_TIME_OUT_OF_RANGE = 1359623543
    FRAME_TOOL_ERROR = 1359623669
    FRAME_NOT_WRITTEN = 1359623670
