from __future__ import annotations

from .ui.app_main import main
from .ui.main_window import MainWindow
from .ui.models.exif_table_model import ExifTableModel
from .ui.workers.extract_worker import ExtractWorker

__all__ = [
    "main",
    "MainWindow",
    "ExifTableModel",
    "ExtractWorker",
]


if __name__ == "__main__":
    raise SystemExit(main())
