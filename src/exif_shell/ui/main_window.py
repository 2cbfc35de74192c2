from __future__ import annotations

from pathlib import Path
from typing import List

from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from ..bridge.registry import CommandRegistry, default_registry
from ..config import IMAGE_EXTENSIONS
from ..errors import BridgeError
from ..extraction.metadata_reader import MetadataReader
from ..models.metadata_field import MetadataField
from .models.exif_table_model import ExifTableModel
from .workers.extract_worker import ExtractWorker

IMAGE_FILTER = "Images ({});;All files (*)".format(
    " ".join(f"*{ext}" for ext in sorted(IMAGE_EXTENSIONS))
)


class MainWindow(QMainWindow):
    def __init__(
        self,
        registry: CommandRegistry | None = None,
        reader: MetadataReader | None = None,
    ) -> None:
        super().__init__()
        self.registry = registry or default_registry()
        self.reader = reader or MetadataReader()
        self.worker: ExtractWorker | None = None

        self.setWindowTitle("Exif-Shell")
        self.resize(900, 600)

        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("Enter a name...")
        self.name_input.setMinimumHeight(42)
        self.greet_button = QPushButton("Greet")
        self.greet_button.setMinimumHeight(44)
        self.greet_label = QLabel("")
        self.greet_label.setObjectName("greetLabel")

        self.open_button = QPushButton("Inspect image")
        self.open_button.setMinimumHeight(44)
        self.path_label = QLabel("No image selected")

        self.exif_table = QTableView()
        self.exif_model = ExifTableModel()
        self.exif_table.setModel(self.exif_model)
        self.exif_table.setColumnWidth(0, 220)
        self.exif_table.setColumnWidth(1, 50)
        self.exif_table.horizontalHeader().setStretchLastSection(True)
        self.exif_table.verticalHeader().setDefaultSectionSize(32)
        self.exif_table.horizontalHeader().setMinimumHeight(32)

        self.status_label = QLabel("Ready")

        greet_layout = QHBoxLayout()
        greet_layout.setSpacing(10)
        greet_layout.addWidget(self.name_input, 1)
        greet_layout.addWidget(self.greet_button)

        inspect_layout = QHBoxLayout()
        inspect_layout.setSpacing(10)
        inspect_layout.addWidget(self.open_button)
        inspect_layout.addWidget(self.path_label, 1)

        main_layout = QVBoxLayout()
        main_layout.setSpacing(12)
        main_layout.addLayout(greet_layout)
        main_layout.addWidget(self.greet_label)
        main_layout.addLayout(inspect_layout)
        main_layout.addWidget(self.exif_table, 1)
        main_layout.addWidget(self.status_label)

        container = QWidget()
        container.setLayout(main_layout)
        self.setCentralWidget(container)

        self.apply_styles()

        self.greet_button.clicked.connect(self.greet)
        self.name_input.returnPressed.connect(self.greet)
        self.open_button.clicked.connect(self.open_image)

    def apply_styles(self) -> None:
        self.setFont(QFont("Segoe UI", 11))
        self.setStyleSheet(
            """
            QMainWindow {
                background: #f5f7fb;
            }
            QWidget {
                color: #1f2a44;
            }
            QLineEdit {
                background: #ffffff;
                border: 1px solid #d6dde8;
                border-radius: 8px;
                padding: 8px 12px;
                font-size: 12pt;
            }
            QTableView {
                background: #ffffff;
                border: 1px solid #d6dde8;
                border-radius: 8px;
                gridline-color: #e6ecf5;
                font-size: 11pt;
            }
            QHeaderView::section {
                background: #f0f4fa;
                color: #5a6b86;
                border: none;
                padding: 6px 10px;
            }
            QPushButton {
                background: #1976d2;
                color: #ffffff;
                border: none;
                border-radius: 8px;
                padding: 10px 18px;
                font-weight: 600;
            }
            QPushButton:hover {
                background: #1565c0;
            }
            QPushButton:disabled {
                background: #c5d1e6;
            }
            QLabel#greetLabel {
                font-size: 13pt;
            }
            """
        )

    def greet(self) -> None:
        try:
            message = self.registry.invoke("greet", name=self.name_input.text())
        except BridgeError as exc:
            self.status_label.setText(str(exc))
            return
        self.greet_label.setText(message)

    def open_image(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(self, "Select image", "", IMAGE_FILTER)
        if not file_path:
            return
        self.inspect_image(Path(file_path))

    def inspect_image(self, path: Path) -> None:
        self.open_button.setEnabled(False)
        self.path_label.setText(str(path))
        self.status_label.setText("Reading metadata...")
        self.exif_model.clear()
        self.worker = ExtractWorker(path, self.reader)
        self.worker.finished.connect(self.on_extract_done)
        self.worker.failed.connect(self.on_extract_failed)
        self.worker.start()

    def on_extract_done(self, path: str, fields: List[MetadataField]) -> None:
        self.open_button.setEnabled(True)
        self.exif_model.set_rows(fields)
        if fields:
            self.status_label.setText(f"{len(fields)} fields in {Path(path).name}")
        else:
            self.status_label.setText(f"No metadata in {Path(path).name}")

    def on_extract_failed(self, path: str, error: str) -> None:
        self.open_button.setEnabled(True)
        self.status_label.setText(f"Failed to read {Path(path).name}: {error}")
