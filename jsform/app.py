from __future__ import annotations

import logging
import sys
from importlib.metadata import version, PackageNotFoundError

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

from .core.config import load_config, save_config, ORG, APP
from .ui.main_window import MainWindow

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _app_version() -> str:
    try:
        return version("jsform")
    except PackageNotFoundError:
        return "0.0.0"


def main() -> None:
    app = QApplication(sys.argv)
    # Set QSettings identity BEFORE any settings access
    QCoreApplication.setOrganizationName(ORG)
    QCoreApplication.setApplicationName(APP)
    QCoreApplication.setApplicationVersion(_app_version())

    # Load user prefs (QSettings-backed)
    cfg = load_config()
    logging.basicConfig(level=cfg.log_level, format=LOG_FORMAT)
    logger.info("Starting %s %s", APP, QCoreApplication.applicationVersion())

    win = MainWindow(cfg=cfg)
    win.show()

    # Persist settings on quit
    def persist():
        win.store_to_config()
        save_config(cfg)
        logger.debug("Settings saved")

    app.aboutToQuit.connect(persist)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
