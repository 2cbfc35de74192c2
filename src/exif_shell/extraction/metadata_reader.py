from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import Iterator, List

from PIL import Image, UnidentifiedImageError

from ..errors import MalformedContainerError, PathNotFoundError
from ..models.metadata_field import MetadataField
from .exif_metadata_parser import ExifMetadataParser
from .metadata_parser import MetadataParser

logger = logging.getLogger(__name__)

PARSE_ERRORS = (
    UnidentifiedImageError,
    Image.DecompressionBombError,
    SyntaxError,
    struct.error,
    ValueError,
    EOFError,
    OSError,
    KeyError,
    IndexError,
)


class MetadataReader:
    def __init__(self, parser: MetadataParser | None = None) -> None:
        self.parser = parser or ExifMetadataParser()

    def read_bytes(self, path: Path) -> bytes:
        if not path.is_file():
            raise PathNotFoundError(path, "no such file")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise PathNotFoundError(path, exc.strerror or str(exc)) from exc

    def read(self, path: Path) -> List[MetadataField]:
        data = self.read_bytes(path)
        try:
            fields = self.parser.parse(data)
        except PARSE_ERRORS as exc:
            raise MalformedContainerError(path, str(exc) or type(exc).__name__) from exc
        if not fields:
            logger.debug("%s: no metadata fields", path)
        return fields

    def iter_fields(self, path: Path) -> Iterator[MetadataField]:
        yield from self.read(path)
