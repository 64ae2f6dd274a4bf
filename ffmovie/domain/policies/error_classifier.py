# ffmovie/domain/policies/error_classifier.py
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Pattern

from ffmovie.domain.errors import FrameNotWrittenError, FrameToolError

FFMPEG_BANNER = re.compile(r"FFmpeg version", re.IGNORECASE)
FFPROBE_BANNER = re.compile(r"FFprobe version", re.IGNORECASE)

# Whole line around the first known failure phrase
TOOL_ERROR = re.compile(
    r".*(Error|Permission denied|could not seek to position|Invalid pixel format"
    r"|Unknown encoder|could not find codec|does not contain any stream).*",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ToolErrorMatch:
    line: str
    phrase: str


def has_version_banner(output: str, banner: Pattern[str]) -> bool:
    return bool(banner.search(output or ""))


def find_tool_error(output: str) -> Optional[ToolErrorMatch]:
    m = TOOL_ERROR.search(output or "")
    if m is None:
        return None
    return ToolErrorMatch(line=m.group(0).strip(), phrase=m.group(1))


def raise_for_frame_output(output: str, frame_path: Path) -> None:
    """
    Called when the tool did not produce `frame_path`. Always raises:
    FrameToolError when the output names a known failure, FrameNotWrittenError otherwise.
    """
    found = find_tool_error(output)
    if found is not None:
        raise FrameToolError(found.line, phrase=found.phrase, output=output)
    raise FrameNotWrittenError(f"TMP image not found/written {frame_path}", output=output)
