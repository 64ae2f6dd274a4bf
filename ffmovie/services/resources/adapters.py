# ffmovie/services/resources/adapters.py
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ffmovie.common.logging import get_logger
from ffmovie.common.settings import get_settings
from ffmovie.domain.entities.frame import FrameImage, FrameResource
from ffmovie.domain.ports.hashing import HashingPort
from ffmovie.domain.ports.resources import (
    ImageFactoryPort,
    ResourceImporterPort,
    TemporaryDirectoryPort,
)
from ffmovie.services.hashing.simple_hashing import SimpleHashing

logger = get_logger(__name__)


class SettingsTemporaryDirectory(TemporaryDirectoryPort):
    """Scratch directory for frame files, taken from settings.temp_root unless given."""

    def __init__(self, root: Optional[Path] = None):
        self._root = Path(root) if root is not None else None

    def get_path_to_temporary_directory(self) -> Path:
        root = self._root or get_settings().temp_root
        root.mkdir(parents=True, exist_ok=True)
        return root


class InMemoryResourceImporter(ResourceImporterPort):
    """
    Reads a written frame into memory. The returned resource no longer
    depends on the file, so the caller may delete it afterwards.
    """

    def __init__(self, hashing: Optional[HashingPort] = None):
        self.hashing = hashing or SimpleHashing()

    def import_resource(self, path: Path) -> FrameResource:
        path = Path(path)
        data = path.read_bytes()
        return FrameResource(filename=path.name, data=data, sha256=self.hashing.sha256_bytes(data))


class PillowImageFactory(ImageFactoryPort):
    def __call__(self, resource: FrameResource) -> FrameImage:
        try:
            with Image.open(BytesIO(resource.data)) as im:
                width, height = im.size
                fmt = im.format
        except UnidentifiedImageError:
            logger.warning("frame %s is not a readable image", resource.filename)
            return FrameImage(resource=resource)
        return FrameImage(resource=resource, width=width, height=height, format=fmt)
