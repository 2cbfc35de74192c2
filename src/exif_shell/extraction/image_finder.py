from __future__ import annotations

import os
from pathlib import Path
from typing import AbstractSet, Iterable, Iterator

from ..config import IMAGE_EXTENSIONS
from .image_utils import is_image_file


class ImageFinder:
    def __init__(self, extensions: AbstractSet[str] = IMAGE_EXTENSIONS) -> None:
        self.extensions = extensions

    def iter_images(self, folder: Path) -> Iterator[Path]:
        for root, dirs, files in os.walk(folder):
            dirs.sort()
            for file_name in sorted(files):
                path = Path(root) / file_name
                if is_image_file(path, self.extensions):
                    yield path

    def expand(self, paths: Iterable[Path]) -> Iterator[Path]:
        """Yield files as given and the images found under any folder, in order."""
        for path in paths:
            if path.is_dir():
                yield from self.iter_images(path)
            else:
                yield path
