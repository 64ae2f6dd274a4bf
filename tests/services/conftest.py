# tests/services/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pytest
from starlette.testclient import TestClient

from ffmovie.domain.entities.frame import FrameImage, FrameResource
from ffmovie.services.api.app import create_app
from ffmovie.services.api.deps import get_movie_factory
from ffmovie.services.movie.movie import Movie
from ffmovie.services.output.string_provider import StringOutputProvider


class StubExtractor:
    def __init__(self):
        self.calls: List[Dict] = []

    def extract(self, movie_file, seconds, width=None, height=None, quality=None, out_path=None):
        self.calls.append({"movie_file": movie_file, "seconds": seconds, "width": width, "height": height})
        return FrameImage(resource=FrameResource(filename="frame.jpg", data=b"\xff\xd8jpeg"), format="JPEG")


@pytest.fixture()
def stub_extractor() -> StubExtractor:
    return StubExtractor()


@pytest.fixture()
def api_client(sample_output, stub_extractor):
    """
    A TestClient whose movie factory is overridden to parse `sample_output`
    instead of running ffmpeg, and to hand frames to a stub extractor.
    """
    app = create_app()
    opened: List[tuple] = []

    def _factory(path: Path, tool: str = "ffmpeg") -> Movie:
        opened.append((path, tool))
        return Movie(path, StringOutputProvider(output=sample_output), "ffmpeg", extractor=stub_extractor)

    app.dependency_overrides[get_movie_factory] = lambda: _factory
    try:
        with TestClient(app) as client:
            client.opened = opened  # type: ignore[attr-defined]
            yield client
    finally:
        app.dependency_overrides.clear()
