# ffmovie/services/api/deps.py
from __future__ import annotations

from pathlib import Path
from typing import Callable, Literal

from fastapi import Depends

from ffmovie.common.settings import get_settings
from ffmovie.services.movie.movie import Movie
from ffmovie.services.output.cache import OutputCache, default_output_cache
from ffmovie.services.output.ffmpeg_provider import FFmpegOutputProvider
from ffmovie.services.output.ffprobe_provider import FFprobeOutputProvider

ProbeTool = Literal["ffmpeg", "ffprobe"]
MovieFactory = Callable[[Path, ProbeTool], Movie]


def get_output_cache() -> OutputCache:
    """
    Provide the output cache via DI. Requests share the process-wide cache
    so persistent providers skip repeat tool runs for the same file.
    """
    return default_output_cache()


def get_movie_factory(cache: OutputCache = Depends(get_output_cache)) -> MovieFactory:
    cfg = get_settings()

    def _build(path: Path, tool: ProbeTool = "ffmpeg") -> Movie:
        if tool == "ffprobe":
            provider = FFprobeOutputProvider(cfg.ffprobe_bin, persistent=cfg.persistent_output, cache=cache)
        else:
            provider = FFmpegOutputProvider(cfg.ffmpeg_bin, persistent=cfg.persistent_output, cache=cache)
        return Movie(path, provider, cfg.ffmpeg_bin)

    return _build
