# ffmovie/common/probe/text_parsers.py
"""
Pure functions that scrape typed values out of ffmpeg/ffprobe diagnostic text.

None of them raise on a missing or malformed line: every parser falls back to
its type default (0, 0.0 or ""), so partial output degrades values instead of
aborting. Safe to call in unit tests with fixture text.
"""
from __future__ import annotations

import math
import re
from typing import Optional, Tuple

REGEX_DURATION = re.compile(r"Duration: ([0-9]{2}):([0-9]{2}):([0-9]{2})(\.([0-9]+))?")
REGEX_FRAME_RATE = re.compile(r"([0-9.]+\sfps,\s)?([0-9.]+)\stbr")
REGEX_COMMENT = re.compile(r"comment\s*(:|=)\s*(.+)", re.IGNORECASE)
REGEX_TITLE = re.compile(r"title\s*(:|=)\s*(.+)", re.IGNORECASE)
REGEX_ARTIST = re.compile(r"(?:artist|author)\s*(:|=)\s*(.+)", re.IGNORECASE)
REGEX_COPYRIGHT = re.compile(r"copyright\s*(:|=)\s*(.+)", re.IGNORECASE)
REGEX_GENRE = re.compile(r"genre\s*(:|=)\s*(.+)", re.IGNORECASE)
REGEX_TRACK_NUMBER = re.compile(r"track\s*(:|=)\s*(.+)", re.IGNORECASE)
REGEX_YEAR = re.compile(r"year\s*(:|=)\s*(.+)", re.IGNORECASE)
REGEX_FRAME_WH = re.compile(r"Video:.+?([1-9][0-9]*)x([1-9][0-9]*)")
REGEX_PIXEL_FORMAT = re.compile(r"Video: [^,]+, ([^,]+)")
REGEX_BITRATE = re.compile(r"bitrate: ([0-9]+) kb/s")
REGEX_VIDEO_BITRATE = re.compile(r"Video:.+?([0-9]+) kb/s")
REGEX_AUDIO_BITRATE = re.compile(r"Audio:.+?([0-9]+) kb/s")
REGEX_AUDIO_SAMPLE_RATE = re.compile(r"Audio:.+?([0-9]+) Hz")
REGEX_VIDEO_CODEC = re.compile(r"Video:\s([^,]+),")
REGEX_AUDIO_CODEC = re.compile(r"Audio:\s([^,]+),")
REGEX_AUDIO_CHANNELS = re.compile(r"Audio:\s[^,]+,[^,]+,([^,]+)")
REGEX_HAS_AUDIO = re.compile(r"Stream.+Audio")
REGEX_HAS_VIDEO = re.compile(r"Stream.+Video")

CHANNEL_LAYOUTS = {
    "mono": 1,
    "stereo": 2,
    "5.1": 6,
    "5:1": 6,
}

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+))")


# ---- tiny coercion helpers ----------------------------------------------------
def leading_int(value: Optional[str]) -> int:
    """"2009-05-01" -> 2009, "3 channels" -> 3, "abc" -> 0."""
    if not value:
        return 0
    m = _LEADING_INT.match(value)
    return int(m.group(1)) if m else 0


def leading_float(value: Optional[str]) -> float:
    if not value:
        return 0.0
    m = _LEADING_FLOAT.match(value)
    return float(m.group(1)) if m else 0.0


def _group(text: str, regex: re.Pattern, index: int) -> Optional[str]:
    m = regex.search(text or "")
    if m is None:
        return None
    return m.group(index)


def _text_field(text: str, regex: re.Pattern, index: int = 2) -> str:
    value = _group(text, regex, index)
    return value.strip() if value is not None else ""


def _kbps_field(text: str, regex: re.Pattern) -> int:
    value = _group(text, regex, 1)
    return int(value) * 1000 if value is not None else 0


# ---- timing -------------------------------------------------------------------
def parse_duration(text: str) -> float:
    """"Duration: 01:02:03.45" -> 3723.45 seconds; 0.0 when absent."""
    m = REGEX_DURATION.search(text or "")
    if m is None:
        return 0.0
    hours, minutes, seconds = int(m.group(1)), int(m.group(2)), int(m.group(3))
    fraction = float(f"0.{m.group(5)}") if m.group(5) else 0.0
    return hours * 3600 + minutes * 60 + seconds + fraction


def parse_frame_rate(text: str) -> float:
    # the number right before "tbr"; a preceding "NN fps, " group is allowed but not needed
    return leading_float(_group(text, REGEX_FRAME_RATE, 2))


def frame_count_for(duration: float, frame_rate: float) -> int:
    return int(math.floor(duration * frame_rate))


# ---- video --------------------------------------------------------------------
def parse_frame_size(text: str) -> Tuple[int, int]:
    """(width, height) from the first "Video:" line; (0, 0) when either is missing."""
    m = REGEX_FRAME_WH.search(text or "")
    if m is None:
        return 0, 0
    return int(m.group(1)), int(m.group(2))


def parse_pixel_format(text: str) -> str:
    return _text_field(text, REGEX_PIXEL_FORMAT, 1)


def parse_video_codec(text: str) -> str:
    return _text_field(text, REGEX_VIDEO_CODEC, 1)


def parse_bit_rate(text: str) -> int:
    return _kbps_field(text, REGEX_BITRATE)


def parse_video_bit_rate(text: str) -> int:
    """Only meaningful for constant bit rate streams."""
    return _kbps_field(text, REGEX_VIDEO_BITRATE)


# ---- audio --------------------------------------------------------------------
def parse_audio_codec(text: str) -> str:
    return _text_field(text, REGEX_AUDIO_CODEC, 1)


def parse_audio_bit_rate(text: str) -> int:
    return _kbps_field(text, REGEX_AUDIO_BITRATE)


def parse_audio_sample_rate(text: str) -> int:
    return leading_int(_group(text, REGEX_AUDIO_SAMPLE_RATE, 1))


def channels_from_layout(token: str) -> int:
    token = (token or "").strip()
    if token in CHANNEL_LAYOUTS:
        return CHANNEL_LAYOUTS[token]
    return leading_int(token)


def parse_audio_channels(text: str) -> int:
    token = _group(text, REGEX_AUDIO_CHANNELS, 1)
    if token is None:
        return 0
    return channels_from_layout(token)


# ---- stream presence ----------------------------------------------------------
def has_audio_stream(text: str) -> bool:
    return bool(REGEX_HAS_AUDIO.search(text or ""))


def has_video_stream(text: str) -> bool:
    return bool(REGEX_HAS_VIDEO.search(text or ""))


# ---- tags ---------------------------------------------------------------------
def parse_comment(text: str) -> str:
    return _text_field(text, REGEX_COMMENT)


def parse_title(text: str) -> str:
    return _text_field(text, REGEX_TITLE)


def parse_artist(text: str) -> str:
    return _text_field(text, REGEX_ARTIST)


def parse_copyright(text: str) -> str:
    return _text_field(text, REGEX_COPYRIGHT)


def parse_genre(text: str) -> str:
    return _text_field(text, REGEX_GENRE)


def parse_track_number(text: str) -> int:
    return leading_int(_group(text, REGEX_TRACK_NUMBER, 2))


def parse_year(text: str) -> int:
    return leading_int(_group(text, REGEX_YEAR, 2))
