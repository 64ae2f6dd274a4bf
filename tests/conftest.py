# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Sequence

import pytest
from PIL import Image

from ffmovie.common import settings as settings_mod
from ffmovie.common.process import runner
from ffmovie.common.process.runner import ToolOutput
from ffmovie.services.output.cache import default_output_cache

SAMPLE_OUTPUT = (
    "Duration: 00:02:30.50, start: 0.0, bitrate: 500 kb/s\n"
    "Stream #0:0: Video: h264, yuv420p, 1280x720, 2000 kb/s, 25 fps, 25 tbr\n"
    "Stream #0:1: Audio: aac, 44100 Hz, stereo, 128 kb/s"
)

FFMPEG_BANNER = "ffmpeg version 6.1.1 Copyright (c) 2000-2023 the FFmpeg developers"
FFPROBE_BANNER = "ffprobe version 6.1.1 Copyright (c) 2007-2023 the FFmpeg developers"


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    """Settings rooted in tmp_path, a fresh settings cache and an empty output cache per test."""
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("MEDIA_ROOT", str(tmp_path / "media"))
    monkeypatch.setenv("TEMP_ROOT", str(tmp_path / "tmp"))
    monkeypatch.setenv("FFMPEG_BIN", "ffmpeg")
    monkeypatch.setenv("FFPROBE_BIN", "ffprobe")
    (tmp_path / "media").mkdir()
    settings_mod.get_settings.cache_clear()
    default_output_cache().clear()
    yield
    settings_mod.get_settings.cache_clear()
    default_output_cache().clear()


class FakeRunner:
    """
    Stand-in for runner.run_combined. Records every command and answers with
    `text`; `on_call` may write files (e.g. the frame) before answering.
    """

    def __init__(self, text: str = "", on_call: Callable[[List[str]], None] | None = None):
        self.text = text
        self.on_call = on_call
        self.calls: List[List[str]] = []

    def __call__(self, cmd: Sequence[str]) -> ToolOutput:
        cmd = [str(c) for c in cmd]
        self.calls.append(cmd)
        if self.on_call is not None:
            self.on_call(cmd)
        return ToolOutput(text=self.text, returncode=0)


@pytest.fixture()
def fake_runner(monkeypatch) -> FakeRunner:
    fake = FakeRunner()
    monkeypatch.setattr(runner, "run_combined", fake, raising=True)
    return fake


def write_jpeg(path: Path | str, size=(64, 36)) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", size, color=(200, 30, 30)).save(path, format="JPEG")


@pytest.fixture()
def movie_file(tmp_path) -> Path:
    p = tmp_path / "media" / "clip.mp4"
    p.write_bytes(b"\x00" * 2048)
    return p


@pytest.fixture()
def sample_output() -> str:
    return SAMPLE_OUTPUT


@pytest.fixture()
def jpeg_writer():
    return write_jpeg


@pytest.fixture()
def banners() -> dict:
    return {"ffmpeg": FFMPEG_BANNER, "ffprobe": FFPROBE_BANNER}
