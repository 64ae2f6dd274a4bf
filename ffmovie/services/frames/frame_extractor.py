# ffmovie/services/frames/frame_extractor.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from ffmovie.common.logging import get_logger
from ffmovie.common.naming.slugger import unique_filename
from ffmovie.common.process import runner
from ffmovie.common.settings import get_settings
from ffmovie.domain.entities.frame import FrameImage
from ffmovie.domain.enums.error_code import ErrorCode
from ffmovie.domain.errors import BinaryNotFoundError
from ffmovie.domain.policies.error_classifier import find_tool_error, raise_for_frame_output
from ffmovie.domain.ports.frames import FrameExtractorPort
from ffmovie.domain.ports.resources import (
    ImageFactoryPort,
    ResourceImporterPort,
    TemporaryDirectoryPort,
)
from ffmovie.services.resources.adapters import (
    InMemoryResourceImporter,
    PillowImageFactory,
    SettingsTemporaryDirectory,
)

logger = get_logger(__name__)


def _format_seconds(seconds: float) -> str:
    # "12.5" rather than "12.500000"; ffmpeg accepts plain decimal seconds
    return f"{float(seconds):.4f}".rstrip("0").rstrip(".") or "0"


class FrameExtractor(FrameExtractorPort):
    """
    Writes a single still with ffmpeg, imports it as a resource, and wraps it
    in a FrameImage. A scratch file it generated itself is always removed;
    a caller-supplied `out_path` is left in place.
    """

    def __init__(
        self,
        ffmpeg_bin: Optional[str] = None,
        temp_dir: Optional[TemporaryDirectoryPort] = None,
        importer: Optional[ResourceImporterPort] = None,
        image_factory: Optional[ImageFactoryPort] = None,
    ):
        cfg = get_settings()
        self.ffmpeg_bin = ffmpeg_bin or cfg.ffmpeg_bin
        self.image_format = cfg.frames.image_format
        self.name_prefix = cfg.frames.name_prefix
        self.slug_length = cfg.frames.slug_length
        self.temp_dir = temp_dir or SettingsTemporaryDirectory()
        self.importer = importer or InMemoryResourceImporter()
        self.image_factory = image_factory or PillowImageFactory()

    def build_command(
        self,
        movie_file: str,
        seconds: float,
        out_path: Path,
        width: Optional[int] = None,
        height: Optional[int] = None,
        quality: Optional[int] = None,
    ) -> List[str]:
        cmd = [
            self.ffmpeg_bin,
            "-i", str(movie_file),
            "-f", "image2",
            "-ss", _format_seconds(seconds),
            "-vframes", "1",
        ]
        if width is not None and height is not None:
            cmd += ["-s", f"{int(width)}x{int(height)}"]
        if quality is not None:
            cmd += ["-qscale", str(int(quality))]
        cmd += ["-y", str(out_path)]
        return cmd

    def temporary_frame_path(self) -> Path:
        name = unique_filename(self.name_prefix, self.image_format, self.slug_length)
        return self.temp_dir.get_path_to_temporary_directory() / name

    def extract(
        self,
        movie_file: str,
        seconds: float,
        width: Optional[int] = None,
        height: Optional[int] = None,
        quality: Optional[int] = None,
        out_path: Optional[Path] = None,
    ) -> FrameImage:
        delete_after = out_path is None
        frame_path = self.temporary_frame_path() if out_path is None else Path(out_path)

        try:
            result = runner.run_combined(
                self.build_command(movie_file, seconds, frame_path, width=width, height=height, quality=quality)
            )
            if result.error is not None:
                raise BinaryNotFoundError(
                    f"Failed to execute {self.ffmpeg_bin}: {result.error}",
                    code=ErrorCode.FFMPEG_NOT_FOUND,
                )
            if not frame_path.exists():
                found = find_tool_error(result.text)
                logger.warning(
                    "no frame written at %ss of %s: %s",
                    seconds, movie_file, found.line if found else "no error reported",
                )
                raise_for_frame_output(result.text, frame_path)

            resource = self.importer.import_resource(frame_path)
            return self.image_factory(resource)
        finally:
            if delete_after:
                frame_path.unlink(missing_ok=True)
