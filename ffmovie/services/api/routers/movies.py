# ffmovie/services/api/routers/movies.py
from __future__ import annotations

from http import HTTPStatus
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from ffmovie.common.logging import get_logger
from ffmovie.common.path.safe import safe_join
from ffmovie.common.settings import get_settings
from ffmovie.domain.enums.error_code import ErrorCode
from ffmovie.domain.errors import (
    BinaryNotFoundError,
    InvalidArgumentError,
    MovieError,
)
from ffmovie.services.api.deps import MovieFactory, ProbeTool, get_movie_factory
from ffmovie.services.mappers import to_metadata_read
from ffmovie.services.movie.movie import Movie
from ffmovie.services.schemas.movies import MovieMetadataRead

logger = get_logger(__name__)
cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/movies", tags=["movies"])


def _http_error(e: MovieError) -> HTTPException:
    if isinstance(e, BinaryNotFoundError):
        status = HTTPStatus.SERVICE_UNAVAILABLE
    elif isinstance(e, InvalidArgumentError):
        status = HTTPStatus.NOT_FOUND if e.code == ErrorCode.MOVIE_FILE_NOT_FOUND else HTTPStatus.UNPROCESSABLE_ENTITY
    elif e.code == ErrorCode.FRAME_TIME_OUT_OF_RANGE:
        status = HTTPStatus.UNPROCESSABLE_ENTITY
    else:
        status = HTTPStatus.INTERNAL_SERVER_ERROR
    return HTTPException(status_code=status, detail={"code": int(e.code) if e.code is not None else None, "message": e.message})


def _resolve(rel_path: str) -> Path:
    try:
        return safe_join(get_settings().media_root, rel_path)
    except ValueError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e)) from e


def _open_movie(factory: MovieFactory, rel_path: str, tool: ProbeTool) -> Movie:
    path = _resolve(rel_path)
    try:
        return factory(path, tool)
    except MovieError as e:
        raise _http_error(e) from e


@router.get("/metadata", response_model=MovieMetadataRead)
def read_metadata(
    path: str = Query(..., min_length=1, description="Movie path relative to the media root"),
    probe: ProbeTool = Query("ffmpeg", description="Tool whose output is parsed"),
    factory: MovieFactory = Depends(get_movie_factory),
) -> MovieMetadataRead:
    movie = _open_movie(factory, path, probe)
    return to_metadata_read(movie.to_metadata())


@router.get("/frame", response_class=Response)
def read_frame(
    path: str = Query(..., min_length=1, description="Movie path relative to the media root"),
    seconds: Optional[float] = Query(None, ge=0, description="Time offset; wins over `frame`"),
    frame: Optional[int] = Query(None, ge=1, description="1-based frame number"),
    width: Optional[int] = Query(None, ge=1, le=8192),
    height: Optional[int] = Query(None, ge=1, le=8192),
    quality: Optional[int] = Query(None, ge=1, le=31, description="ffmpeg -qscale"),
    factory: MovieFactory = Depends(get_movie_factory),
) -> Response:
    movie = _open_movie(factory, path, "ffmpeg")
    try:
        if seconds is not None:
            image = movie.get_frame_at_time(seconds, width=width, height=height, quality=quality)
        else:
            image = movie.get_frame(frame or 1, width=width, height=height, quality=quality)
    except MovieError as e:
        logger.warning("frame request failed for %s: %s", path, e)
        raise _http_error(e) from e
    return Response(content=image.resource.data, media_type=image.media_type)
