# ffmovie/services/mappers.py
from __future__ import annotations

from ffmovie.domain.entities.metadata import MovieMetadata
from ffmovie.services.schemas.movies import MovieMetadataRead


def to_metadata_read(m: MovieMetadata) -> MovieMetadataRead:
    return MovieMetadataRead(**m.as_dict())
