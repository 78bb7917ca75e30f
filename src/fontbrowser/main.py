#!/usr/bin/env python3
# src/fontbrowser/main.py

"""
Main entry point for the FontBrowser application.

This script parses the command line, configures logging, initializes the
QApplication, shows the editor window and starts the event loop. With
--browse the font browser is opened straight away.
"""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from fontbrowser.ui.editor_window import EditorWindow
from fontbrowser.utils.config import get_config

LOG_LEVEL = logging.INFO


def setup_logging(level: int = LOG_LEVEL):
    """Configures basic logging for the application."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout,
    )
    logging.info("FontBrowser application starting...")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fontbrowser",
        description="Browse installed fonts and pick the editor's display font.",
    )
    parser.add_argument(
        "--browse",
        action="store_true",
        help="Open the font browser as soon as the editor starts.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO).",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main execution function for FontBrowser."""
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    # Qt receives only the program name; our own options are already consumed.
    app = QApplication(sys.argv[:1])

    try:
        config = get_config()
        window = EditorWindow(config)
        window.show()
        if args.browse:
            window.browse_fonts()
    except Exception as e:
        logging.error(f"Failed to create the editor window: {e}", exc_info=True)
        sys.exit(1)

    # Blocks until the last window is closed.
    exit_code = app.exec()
    logging.info("FontBrowser application has shut down.")
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
