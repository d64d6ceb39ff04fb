from __future__ import annotations

import sys
from PySide6.QtWidgets import QApplication

from view_severity.bootstrap import build_app_system
from view_severity.dev.run_report import parse_config_arg
from view_severity.ui.main_window import MainWindow
from view_severity.ui.theme import APP_QSS


def main() -> None:
    """
    Start the desktop viewer.

    Notes
    -----
    - Loads configuration from `config.yaml` by default.
    - Optional CLI usage:
        python -m view_severity.dev.run_app --config path/to/config.yaml
    """
    app = QApplication(sys.argv)
    app.setStyleSheet(APP_QSS)

    wiring = build_app_system(config_path=parse_config_arg(sys.argv))

    win = MainWindow(data_source=wiring.data_source, ui_cfg=wiring.config.ui)
    win.show()

    def _stop_all() -> None:
        wiring.data_source.close()

    app.aboutToQuit.connect(_stop_all)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
