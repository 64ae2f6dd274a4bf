# ffmovie/services/schemas/movies.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class MovieMetadataRead(BaseModel):
    filename: str = Field(..., examples=["/media/ffmovie/clips/intro.mp4"])
    file_size: Optional[int] = Field(None, ge=0)

    duration: float = Field(0.0, ge=0, description="Seconds")
    frame_rate: float = Field(0.0, ge=0, description="Frames per second (tbr)")
    frame_count: int = Field(0, ge=0)
    frame_width: int = Field(0, ge=0)
    frame_height: int = Field(0, ge=0)
    pixel_format: str = Field("", examples=["yuv420p"])

    bit_rate: int = Field(0, ge=0, description="Bits per second")
    video_bit_rate: int = Field(0, ge=0)
    audio_bit_rate: int = Field(0, ge=0)
    audio_sample_rate: int = Field(0, ge=0, description="Hz")
    video_codec: str = Field("", examples=["h264"])
    audio_codec: str = Field("", examples=["aac"])
    audio_channels: int = Field(0, ge=0)
    has_audio: bool = False
    has_video: bool = False

    comment: str = ""
    title: str = ""
    artist: str = ""
    copyright: str = ""
    genre: str = ""
    track_number: int = 0
    year: int = 0
