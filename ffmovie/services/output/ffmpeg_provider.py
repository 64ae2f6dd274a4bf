# ffmovie/services/output/ffmpeg_provider.py
from __future__ import annotations

from typing import List, Optional

from ffmovie.common.logging import get_logger
from ffmovie.common.process import runner
from ffmovie.common.settings import get_settings
from ffmovie.domain.enums.error_code import ErrorCode
from ffmovie.domain.enums.provider_kind import ProviderKind
from ffmovie.domain.errors import BinaryNotFoundError
from ffmovie.domain.policies.error_classifier import FFMPEG_BANNER, has_version_banner
from ffmovie.services.output.base import BaseOutputProvider
from ffmovie.services.output.cache import OutputCache

logger = get_logger(__name__)


class FFmpegOutputProvider(BaseOutputProvider):
    """
    Captures what `ffmpeg -i <movie>` prints about the movie.
    ffmpeg exits non-zero here (no output file given); only its banner matters.
    """
    kind = ProviderKind.ffmpeg

    def __init__(self, ffmpeg_bin: Optional[str] = None, persistent: bool = False, cache: Optional[OutputCache] = None):
        super().__init__(ffmpeg_bin or get_settings().ffmpeg_bin, persistent=persistent, cache=cache)

    def build_command(self) -> List[str]:
        return [self.binary, "-i", str(self.movie_file)]

    def _fetch(self) -> str:
        self._require_movie_file()
        output = runner.run_combined(self.build_command()).text
        if not has_version_banner(output, FFMPEG_BANNER):
            logger.warning("ffmpeg banner missing in output of %s", self.binary)
            raise BinaryNotFoundError(
                "FFmpeg is not installed on host server",
                code=ErrorCode.FFMPEG_NOT_FOUND,
                output=output,
            )
        return output
