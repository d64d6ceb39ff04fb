from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel

from view_severity.ui.theme import COLOR_CRIT, COLOR_TEXT_MUTED, SEVERITY_COLORS


class StatusIndicator(QFrame):
    """
    Small status widget: colored dot + label.
    """

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("Card")

        self._dot = QLabel("●")
        self._dot.setStyleSheet(f"color: {COLOR_TEXT_MUTED}; font-size: 16px;")
        self._text = QLabel("Waiting for first refresh")
        self._text.setStyleSheet(f"color: {COLOR_TEXT_MUTED}; font-weight: 600;")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.addWidget(self._dot, 0, Qt.AlignVCenter)
        layout.addWidget(self._text, 0, Qt.AlignVCenter)
        layout.addStretch(1)

    def set_level(self, level: str, text: str) -> None:
        """
        level: a severity label, or 'ERROR' when the last cycle failed.
        """
        color = COLOR_CRIT if level == "ERROR" else SEVERITY_COLORS.get(level, COLOR_TEXT_MUTED)
        self._dot.setStyleSheet(f"color: {color}; font-size: 16px;")
        self._text.setText(text)
