"""Allow running PomoClock as a module: python -m pomoclock."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .settings import load_settings
from .app import PomodoroWindow, APP_NAME


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_NAME)

    window = PomodoroWindow(settings)
    window.show()
    logging.getLogger(__name__).info("%s ready", APP_NAME)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
