# ffmovie/services/movie/movie.py
from __future__ import annotations

import numbers
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Optional

from ffmovie.common.logging import get_logger
from ffmovie.common.probe import text_parsers as tp
from ffmovie.common.settings import get_settings
from ffmovie.domain.entities.frame import FrameImage
from ffmovie.domain.entities.metadata import MovieMetadata
from ffmovie.domain.enums.error_code import ErrorCode
from ffmovie.domain.errors import InvalidArgumentError, MovieRuntimeError
from ffmovie.domain.ports.frames import FrameExtractorPort
from ffmovie.domain.ports.output import OutputProviderPort
from ffmovie.services.frames.frame_extractor import FrameExtractor
from ffmovie.services.output.ffmpeg_provider import FFmpegOutputProvider

logger = get_logger(__name__)

# Every cached_property below; cleared on clone, unpickle and provider swap.
_MEMOIZED = (
    "duration",
    "frame_rate",
    "frame_count",
    "frame_size",
    "pixel_format",
    "bit_rate",
    "video_bit_rate",
    "audio_bit_rate",
    "audio_sample_rate",
    "video_codec",
    "audio_codec",
    "audio_channels",
    "comment",
    "title",
    "artist",
    "copyright",
    "genre",
    "track_number",
    "year",
)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Movie:
    """
    A movie or audio file described by the diagnostic text of one tool run.

    The text is captured once, when a provider is attached. Every metadata
    field is parsed from it on first access and cached for the lifetime of the
    instance; a field the text does not mention resolves to 0, 0.0 or "".
    Frames are pulled on demand by running ffmpeg again at a time offset.

        movie = Movie("/media/clip.mp4")
        movie.duration, movie.frame_width, movie.audio_channels
        image = movie.get_frame(42)
    """

    def __init__(
        self,
        movie_file: str | Path,
        provider: Optional[OutputProviderPort] = None,
        ffmpeg_bin: Optional[str] = None,
        *,
        extractor: Optional[FrameExtractorPort] = None,
    ):
        cfg = get_settings()
        self.movie_file = str(movie_file)
        self.ffmpeg_bin = ffmpeg_bin or cfg.ffmpeg_bin
        self.frame_cursor = 0
        self.file_size: Optional[int] = None
        self._extractor = extractor
        if provider is None:
            provider = FFmpegOutputProvider(self.ffmpeg_bin, persistent=cfg.persistent_output)
        self.set_provider(provider)

    # ---- provider / raw output -----------------------------------------------
    @property
    def provider(self) -> OutputProviderPort:
        return self._provider

    def set_provider(self, provider: OutputProviderPort) -> None:
        """
        Attach `provider`, capture its output for this movie and forget parsed fields.
        Nothing changes when the provider fails to produce output.
        """
        provider.set_movie_file(self.movie_file)
        output = provider.get_output()

        self._provider = provider
        path = Path(self.movie_file)
        if path.is_file():
            self.file_size = path.stat().st_size
        self._output = output
        self._reset_memoized()

    @property
    def output(self) -> str:
        return self._output

    @property
    def filename(self) -> str:
        return self.movie_file

    @property
    def extractor(self) -> FrameExtractorPort:
        if self._extractor is None:
            self._extractor = FrameExtractor(self.ffmpeg_bin)
        return self._extractor

    def _reset_memoized(self) -> None:
        for name in _MEMOIZED:
            self.__dict__.pop(name, None)

    # ---- timing ---------------------------------------------------------------
    @cached_property
    def duration(self) -> float:
        """Duration in seconds."""
        return tp.parse_duration(self._output)

    @cached_property
    def frame_rate(self) -> float:
        """Frames per second."""
        return tp.parse_frame_rate(self._output)

    @cached_property
    def frame_count(self) -> int:
        return tp.frame_count_for(self.duration, self.frame_rate)

    @property
    def frame_number(self) -> int:
        """1-based number of the next frame; the internal cursor starts at 0."""
        return 1 if self.frame_cursor == 0 else self.frame_cursor

    # ---- video ----------------------------------------------------------------
    @cached_property
    def frame_size(self) -> tuple[int, int]:
        return tp.parse_frame_size(self._output)

    @property
    def frame_width(self) -> int:
        return self.frame_size[0]

    @property
    def frame_height(self) -> int:
        return self.frame_size[1]

    @cached_property
    def pixel_format(self) -> str:
        return tp.parse_pixel_format(self._output)

    @cached_property
    def video_codec(self) -> str:
        return tp.parse_video_codec(self._output)

    @cached_property
    def bit_rate(self) -> int:
        """Overall bit rate (audio and video) in bits per second."""
        return tp.parse_bit_rate(self._output)

    @cached_property
    def video_bit_rate(self) -> int:
        return tp.parse_video_bit_rate(self._output)

    def has_video(self) -> bool:
        return tp.has_video_stream(self._output)

    # ---- audio ----------------------------------------------------------------
    @cached_property
    def audio_codec(self) -> str:
        return tp.parse_audio_codec(self._output)

    @cached_property
    def audio_bit_rate(self) -> int:
        return tp.parse_audio_bit_rate(self._output)

    @cached_property
    def audio_sample_rate(self) -> int:
        return tp.parse_audio_sample_rate(self._output)

    @cached_property
    def audio_channels(self) -> int:
        return tp.parse_audio_channels(self._output)

    def has_audio(self) -> bool:
        return tp.has_audio_stream(self._output)

    # ---- tags -----------------------------------------------------------------
    @cached_property
    def comment(self) -> str:
        return tp.parse_comment(self._output)

    @cached_property
    def title(self) -> str:
        return tp.parse_title(self._output)

    @cached_property
    def artist(self) -> str:
        return tp.parse_artist(self._output)

    @property
    def author(self) -> str:
        return self.artist

    @cached_property
    def copyright(self) -> str:
        return tp.parse_copyright(self._output)

    @cached_property
    def genre(self) -> str:
        return tp.parse_genre(self._output)

    @cached_property
    def track_number(self) -> int:
        return tp.parse_track_number(self._output)

    @cached_property
    def year(self) -> int:
        return tp.parse_year(self._output)

    # ---- frames ---------------------------------------------------------------
    def get_frame(
        self,
        frame_number: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        quality: Optional[int] = None,
    ) -> FrameImage:
        """
        Frame `frame_number` (1-based), or the frame under the internal cursor
        when omitted; only the latter advances the cursor.

        Positions 0..frame_count are accepted, so frame_number == frame_count + 1
        maps to the very end of the movie.
        """
        if frame_number is None:
            frame_pos = self.frame_cursor
        elif _is_number(frame_number):
            frame_pos = int(frame_number) - 1
        else:
            raise InvalidArgumentError("Invalid frame number", code=ErrorCode.INVALID_FRAME_NUMBER)

        frame_count = self.frame_count
        if frame_pos < 0 or frame_pos > frame_count or frame_count == 0:
            raise InvalidArgumentError("Invalid frame number", code=ErrorCode.INVALID_FRAME_NUMBER)

        # rounding may overshoot a duration printed with more than 4 decimals
        frame_time = min(round((frame_pos / frame_count) * self.duration, 4), self.duration)
        frame = self.get_frame_at_time(frame_time, width=width, height=height, quality=quality)

        if frame_number is None:
            self.frame_cursor += 1
        return frame

    def get_next_key_frame(self) -> FrameImage:
        return self.get_frame()

    def get_frame_at_time(
        self,
        seconds: Optional[float] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        quality: Optional[int] = None,
        out_path: Optional[str | Path] = None,
    ) -> FrameImage:
        frame_time = 0 if seconds is None else seconds
        if not _is_number(frame_time):
            raise InvalidArgumentError(
                f"Frame time is not a number: {frame_time!r}",
                code=ErrorCode.FRAME_TIME_OUT_OF_RANGE,
            )
        if frame_time < 0 or frame_time > self.duration:
            raise MovieRuntimeError(
                f"Frame time is not in range {frame_time}/{self.duration} {self.filename}",
                code=ErrorCode.FRAME_TIME_OUT_OF_RANGE,
            )

        logger.debug("extracting frame at %ss from %s", frame_time, self.movie_file)
        return self.extractor.extract(
            self.movie_file,
            float(frame_time),
            width=width if _is_number(width) else None,
            height=height if _is_number(height) else None,
            quality=quality if _is_number(quality) else None,
            out_path=Path(out_path) if out_path is not None else None,
        )

    # ---- snapshots ------------------------------------------------------------
    def to_metadata(self) -> MovieMetadata:
        return MovieMetadata(
            filename=self.filename,
            file_size=self.file_size,
            duration=self.duration,
            frame_rate=self.frame_rate,
            frame_count=self.frame_count,
            frame_width=self.frame_width,
            frame_height=self.frame_height,
            pixel_format=self.pixel_format,
            bit_rate=self.bit_rate,
            video_bit_rate=self.video_bit_rate,
            audio_bit_rate=self.audio_bit_rate,
            audio_sample_rate=self.audio_sample_rate,
            video_codec=self.video_codec,
            audio_codec=self.audio_codec,
            audio_channels=self.audio_channels,
            has_audio=self.has_audio(),
            has_video=self.has_video(),
            comment=self.comment,
            title=self.title,
            artist=self.artist,
            copyright=self.copyright,
            genre=self.genre,
            track_number=self.track_number,
            year=self.year,
        )

    # ---- copy / pickle --------------------------------------------------------
    def clone(self) -> "Movie":
        """Same movie and raw output, its own provider, nothing parsed yet."""
        twin = self.__class__.__new__(self.__class__)
        twin.__dict__.update({k: v for k, v in self.__dict__.items() if k not in _MEMOIZED})
        twin._provider = self._provider.clone()
        return twin

    __copy__ = clone

    def __getstate__(self) -> Dict[str, Any]:
        return {
            "ffmpeg_bin": self.ffmpeg_bin,
            "movie_file": self.movie_file,
            "output": self._output,
            "frame_cursor": self.frame_cursor,
            "provider": self._provider,
        }

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.ffmpeg_bin = state["ffmpeg_bin"]
        self.movie_file = state["movie_file"]
        self._output = state["output"]
        self.frame_cursor = state["frame_cursor"]
        self._provider = state["provider"]
        self.file_size = None
        self._extractor = None

    def __repr__(self) -> str:
        return f"Movie(movie_file={self.movie_file!r}, provider={self._provider!r})"
