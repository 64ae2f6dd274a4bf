from ffmovie.services.output.cache import OutputCache, OutputCacheKey, default_output_cache
from ffmovie.services.output.ffmpeg_provider import FFmpegOutputProvider
from ffmovie.services.output.ffprobe_provider import FFprobeOutputProvider
from ffmovie.services.output.string_provider import StringOutputProvider
__all__ = [
    "OutputCache",
    "OutputCacheKey",
    "default_output_cache",
    "FFmpegOutputProvider",
    "FFprobeOutputProvider",
    "StringOutputProvider",
]
