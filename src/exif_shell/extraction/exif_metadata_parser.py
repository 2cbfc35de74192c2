from __future__ import annotations

import io
import logging
import threading
import warnings
from typing import Any, Dict, List, Mapping, Tuple

from PIL import ExifTags, Image

from ..models.metadata_field import PRIMARY_IFD, THUMBNAIL_IFD, MetadataField
from .value_formatter import format_value

logger = logging.getLogger(__name__)

INTEROP_TAGS = {
    0x0001: "InteroperabilityIndex",
    0x0002: "InteroperabilityVersion",
    0x1000: "RelatedImageFileFormat",
    0x1001: "RelatedImageWidth",
    0x1002: "RelatedImageLength",
}

POINTER_TAGS = frozenset({ExifTags.IFD.Exif, ExifTags.IFD.GPSInfo, ExifTags.IFD.Interop})

# Parent group -> pointer tag -> (child group, child tag names)
SUB_DIRECTORIES: Dict[str, Dict[int, Tuple[str, Mapping[int, str]]]] = {
    "Image": {
        ExifTags.IFD.Exif: ("Exif", ExifTags.TAGS),
        ExifTags.IFD.GPSInfo: ("GPS", ExifTags.GPSTAGS),
    },
    "Exif": {ExifTags.IFD.Interop: ("Interop", INTEROP_TAGS)},
}

# Warning capture and the pixel-count guard are process-wide state.
_PARSE_LOCK = threading.Lock()


class CorruptExifError(ValueError):
    pass


def tag_name(tag: int, names: Mapping[int, str]) -> str:
    return names.get(tag) or f"Tag(0x{tag:04X})"


class ExifMetadataParser:
    """Parses the EXIF container of an image with Pillow.

    Directories are walked depth first: each IFD lists its entries in
    ascending tag order, and when a pointer tag (Exif, GPS, Interop) is
    reached the child directory is listed in its place. Pointer tags are not
    reported. IFD0 and its children belong to the primary image (ifd 0);
    IFD1 is the thumbnail (ifd 1).

    Only the header is decoded, so the decompression bomb guard is lifted
    while opening: pixel data is never loaded here.
    """

    def __init__(self, max_binary_bytes: int = 32) -> None:
        self.max_binary_bytes = max_binary_bytes

    def parse(self, data: bytes) -> List[MetadataField]:
        with _PARSE_LOCK:
            max_pixels = Image.MAX_IMAGE_PIXELS
            Image.MAX_IMAGE_PIXELS = None
            try:
                with warnings.catch_warnings(record=True) as caught:
                    warnings.simplefilter("always")
                    with Image.open(io.BytesIO(data)) as im:
                        logger.debug("Opened %s image %sx%s", im.format, *im.size)
                        fields = self._fields(im.getexif())
            finally:
                Image.MAX_IMAGE_PIXELS = max_pixels

        problems = [str(w.message) for w in caught if issubclass(w.category, UserWarning)]
        if problems:
            raise CorruptExifError("; ".join(problems))
        return fields

    def _fields(self, exif: Image.Exif) -> List[MetadataField]:
        fields: List[MetadataField] = []
        primary: Dict[int, Any] = {tag: exif[tag] for tag in exif}
        self._walk(exif, "Image", PRIMARY_IFD, primary, ExifTags.TAGS, fields)
        thumbnail = exif.get_ifd(ExifTags.IFD.IFD1)
        if thumbnail:
            self._walk(exif, "Thumbnail", THUMBNAIL_IFD, dict(thumbnail), ExifTags.TAGS, fields)
        logger.debug("EXIF fields: %d", len(fields))
        return fields

    def _walk(
        self,
        exif: Image.Exif,
        group: str,
        ifd: int,
        entries: Mapping[int, Any],
        names: Mapping[int, str],
        fields: List[MetadataField],
    ) -> None:
        context = {tag_name(tag, names): value for tag, value in entries.items()}
        for tag in sorted(entries):
            if tag in POINTER_TAGS:
                children = SUB_DIRECTORIES.get(group, {})
                if tag in children:
                    child_group, child_names = children[tag]
                    child = exif.get_ifd(tag)
                    if child:
                        self._walk(exif, child_group, ifd, dict(child), child_names, fields)
                continue
            name = tag_name(tag, names)
            value = entries[tag]
            fields.append(
                MetadataField(
                    tag=tag,
                    tag_name=name,
                    ifd=ifd,
                    group=group,
                    value=value,
                    display=format_value(name, value, context, self.max_binary_bytes),
                )
            )
