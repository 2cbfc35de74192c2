from __future__ import annotations

from typing import List

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt

from ...models.metadata_field import MetadataField

HEADERS = ["Tag", "IFD", "Value"]


class ExifTableModel(QAbstractTableModel):
    def __init__(self) -> None:
        super().__init__()
        self._rows: List[MetadataField] = []

    def set_rows(self, rows: List[MetadataField]) -> None:
        self.beginResetModel()
        self._rows = rows
        self.endResetModel()

    def clear(self) -> None:
        self.set_rows([])

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return len(self._rows)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return len(HEADERS)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):
        if not index.isValid():
            return None
        item = self._rows[index.row()]
        col = index.column()
        if role == Qt.DisplayRole:
            if col == 0:
                return item.tag_name
            if col == 1:
                return str(item.ifd)
            return item.display
        if role == Qt.ToolTipRole and col == 0:
            return f"{item.group} 0x{item.tag:04X}"
        return None

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.DisplayRole):
        if role != Qt.DisplayRole or orientation != Qt.Horizontal:
            return None
        return HEADERS[section]
