from __future__ import annotations

from datetime import datetime

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QHBoxLayout, QMainWindow, QPushButton, QVBoxLayout, QWidget

from view_severity.core.config.yaml_config import UiConfig
from view_severity.domain.errors import DataSourceError
from view_severity.services.data_source import ViewSeverityDataSource
from view_severity.ui.adapters.page_rows import text_rows, worst_severity
from view_severity.ui.widgets.severity_table import SeverityTable
from view_severity.ui.widgets.status_indicator import StatusIndicator


class MainWindow(QMainWindow):
    """
    Viewer window that hosts the data source the way a data grid would.

    - Top: cycle status + manual refresh
    - Body: one table, View ID / Severity / Count

    A refresh timer starts one prepare/fetch cycle per interval. The UI thread
    never blocks on the background fetch: a short poll timer waits until the
    data source reports ready before requesting the page.
    """

    def __init__(self, data_source: ViewSeverityDataSource, ui_cfg: UiConfig) -> None:
        super().__init__()
        self.setWindowTitle(ViewSeverityDataSource.NAME)
        self.resize(640, 720)

        self.data_source = data_source
        self._in_flight = False

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        top = QHBoxLayout()
        self.status = StatusIndicator()
        self.refresh_button = QPushButton("Refresh")
        self.refresh_button.clicked.connect(self.start_cycle)
        top.addWidget(self.status, stretch=1)
        top.addWidget(self.refresh_button)
        layout.addLayout(top)

        self.table = SeverityTable(columns=data_source.declare_columns(), title=ViewSeverityDataSource.NAME)
        layout.addWidget(self.table, stretch=1)

        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(int(ui_cfg.refresh_interval_s * 1000))
        self.refresh_timer.timeout.connect(self.start_cycle)
        self.refresh_timer.start()

        self.poll_timer = QTimer(self)
        self.poll_timer.setInterval(ui_cfg.poll_interval_ms)
        self.poll_timer.timeout.connect(self._poll_cycle)

        self.start_cycle()

    def start_cycle(self) -> None:
        # One cycle at a time; prepare twice before fetching is not supported.
        if self._in_flight:
            return
        self._in_flight = True
        self.refresh_button.setEnabled(False)
        self.data_source.prepare()
        self.poll_timer.start()

    def _poll_cycle(self) -> None:
        if not self.data_source.is_ready():
            return
        self.poll_timer.stop()
        self._in_flight = False
        self.refresh_button.setEnabled(True)

        stamp = datetime.now().strftime("%H:%M:%S")
        try:
            page = self.data_source.fetch_page()
        except DataSourceError as e:
            self.table.set_rows([])
            self.status.set_level("ERROR", f"{stamp}  {e}")
            return

        self.table.set_rows(text_rows(page))
        level = worst_severity(page)
        self.status.set_level(level, f"{stamp}  {len(page.rows)} views, worst: {level}")
