from __future__ import annotations

from pathlib import Path
from typing import AbstractSet

from ..config import IMAGE_EXTENSIONS


def is_image_file(path: Path, extensions: AbstractSet[str] = IMAGE_EXTENSIONS) -> bool:
    return path.suffix.lower() in extensions
