from __future__ import annotations

from typing import List

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (
    QAbstractItemView,
    QFrame,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
)

from view_severity.domain.models import Column
from view_severity.ui.adapters.page_rows import TextRow
from view_severity.ui.theme import COLOR_TEXT_MUTED, SEVERITY_COLORS


class SeverityTable(QFrame):
    """
    Table of views with their highest alarm severity and alarm count.
    """

    def __init__(self, columns: List[Column], title: str, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("Card")

        header = QLabel(title)
        header.setStyleSheet("font-size: 14px; font-weight: 700;")

        self.table = QTableWidget(0, len(columns))
        self.table.setHorizontalHeaderLabels([c.name for c in columns])
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSortingEnabled(False)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)
        layout.addWidget(header)
        layout.addWidget(self.table)

    def set_rows(self, rows: List[TextRow]) -> None:
        self.table.setRowCount(len(rows))
        for i, (view_id, severity, count) in enumerate(rows):
            self._item(i, 0, view_id)
            self._item(i, 1, severity, severity=True)
            self._item(i, 2, count)
        self.table.resizeColumnsToContents()

    def _item(self, r: int, c: int, text: str, severity: bool = False) -> None:
        it = QTableWidgetItem(text)
        it.setFlags(it.flags() & ~Qt.ItemIsEditable)
        it.setTextAlignment(Qt.AlignCenter)
        if severity:
            it.setBackground(QBrush(QColor(SEVERITY_COLORS.get(text, COLOR_TEXT_MUTED))))
            it.setForeground(Qt.black)
        self.table.setItem(r, c, it)
