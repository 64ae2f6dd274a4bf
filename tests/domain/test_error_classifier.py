from pathlib import Path

import pytest

from ffmovie.domain.enums.error_code import ErrorCode
from ffmovie.domain.errors import FrameNotWrittenError, FrameToolError, MovieRuntimeError
from ffmovie.domain.policies.error_classifier import (
    FFMPEG_BANNER,
    FFPROBE_BANNER,
    find_tool_error,
    has_version_banner,
    raise_for_frame_output,
)


def test_banners_case_insensitive(banners):
    assert has_version_banner(banners["ffmpeg"], FFMPEG_BANNER)
    assert has_version_banner(banners["ffprobe"], FFPROBE_BANNER)
    assert not has_version_banner(banners["ffmpeg"], FFPROBE_BANNER)
    assert not has_version_banner("", FFMPEG_BANNER)
    assert not has_version_banner("sh: 1: ffmpeg: not found", FFMPEG_BANNER)


@pytest.mark.parametrize(
    "line, phrase",
    [
        ("/tmp/frame.jpg: Permission denied", "Permission denied"),
        ("[mov] could not seek to position 99.000", "could not seek to position"),
        ("Invalid Pixel Format string 'foo'", "Invalid Pixel Format"),
        ("Unknown encoder 'mjpegx'", "Unknown encoder"),
        ("clip.mp4 does not contain any stream", "does not contain any stream"),
        ("Conversion failed with error -5", "error"),
    ],
)
def test_find_tool_error(line, phrase):
    text = f"ffmpeg version 6.1\n  built with gcc\n{line}\nExiting"
    found = find_tool_error(text)
    assert found is not None
    assert found.line == line
    assert found.phrase.lower() == phrase.lower()


def test_find_tool_error_none_for_clean_output():
    assert find_tool_error("ffmpeg version 6.1\nframe=    1 fps=0.0 q=2.0") is None
    assert find_tool_error("") is None


def test_raise_for_frame_output_known_phrase():
    with pytest.raises(FrameToolError) as ei:
        raise_for_frame_output("x\n/out/f.jpg: Permission denied", Path("/out/f.jpg"))
    err = ei.value
    assert err.phrase == "Permission denied"
    assert err.code == ErrorCode.FRAME_TOOL_ERROR
    assert isinstance(err, MovieRuntimeError)
    assert isinstance(err, RuntimeError)


def test_raise_for_frame_output_generic():
    with pytest.raises(FrameNotWrittenError) as ei:
        raise_for_frame_output("ffmpeg version 6.1\nnothing happened", Path("/out/f.jpg"))
    assert "/out/f.jpg" in ei.value.message
    assert ei.value.code == ErrorCode.FRAME_NOT_WRITTEN
