from __future__ import annotations

import argparse
import ctypes
import os
from typing import List

from PySide6.QtWidgets import QApplication

from ..bridge.registry import default_registry
from ..config import LOG_LEVELS, ExtractorSettings
from ..extraction.exif_metadata_parser import ExifMetadataParser
from ..extraction.metadata_reader import MetadataReader
from ..logging_setup import configure_logging
from .main_window import MainWindow


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Exif-Shell desktop app")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None)
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    settings = ExtractorSettings.from_env()
    configure_logging(args.log_level or settings.log_level)
    if os.name == "nt":
        try:
            ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID("exif-shell")
        except (AttributeError, OSError):
            pass
    app = QApplication.instance() or QApplication([])
    app.setApplicationName("Exif-Shell")
    reader = MetadataReader(ExifMetadataParser(max_binary_bytes=settings.max_binary_bytes))
    window = MainWindow(default_registry(), reader)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
