from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QThread, Signal

from ...errors import ExtractorError
from ...extraction.metadata_reader import MetadataReader


class ExtractWorker(QThread):
    finished = Signal(str, object)
    failed = Signal(str, str)

    def __init__(self, path: Path, reader: MetadataReader | None = None) -> None:
        super().__init__()
        self.path = path
        self.reader = reader or MetadataReader()

    def run(self) -> None:
        try:
            fields = self.reader.read(self.path)
        except ExtractorError as exc:
            self.failed.emit(str(self.path), exc.message)
            return
        except Exception as exc:
            self.failed.emit(str(self.path), str(exc))
            return
        self.finished.emit(str(self.path), fields)
