"""
Run with: python -m imodelexplainer
"""
from __future__ import annotations

import logging
import os
import sys

from imodelexplainer.app.application import create_app, load_layout_config
from imodelexplainer.app.ui.main_window import MainWindow
from imodelexplainer.logging_config import setup_logging


def main() -> int:
    """Main entry point for the application."""
    # IMODEL_DEBUG=1 turns on per-event logging
    level = logging.DEBUG if os.environ.get("IMODEL_DEBUG") else logging.INFO
    setup_logging(level=level, log_file=os.environ.get("IMODEL_LOG_FILE"))

    app = create_app()
    win = MainWindow(config=load_layout_config())
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
