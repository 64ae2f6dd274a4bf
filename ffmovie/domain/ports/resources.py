from __future__ import annotations
from pathlib import Path
from typing import Protocol
from ffmovie.domain.entities.frame import FrameImage, FrameResource


class TemporaryDirectoryPort(Protocol):
    def get_path_to_temporary_directory(self) -> Path: ...


class ResourceImporterPort(Protocol):
    def import_resource(self, path: Path) -> FrameResource: ...


class ImageFactoryPort(Protocol):
    def __call__(self, resource: FrameResource) -> FrameImage: ...
