"""Allow running Microwave as a module: python -m microwave."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import MicrowaveApp


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Microwave")
    app.setOrganizationName("Microwave")

    window = MicrowaveApp()
    window.show()
    logging.getLogger(__name__).info("Microwave ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
