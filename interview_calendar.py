#!/usr/bin/env python3
"""
Interview Calendar - A PySide6 desktop calendar of scheduled interviews.

This is the main entry point for the application.
"""

import sys
import argparse
from pathlib import Path

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from backend.config import Config, ConfigError
from gui.main_window import MainWindow


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Interview Calendar - Day, week and month views of scheduled interviews"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "--source",
        help="URL or file path of the interview list (overrides the config file)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    return parser.parse_args(argv)


def load_config(args) -> Config:
    """Load configuration and apply command line overrides."""
    config = Config.load(args.config)
    if args.source:
        config.events.source = args.source
    return config


def main():
    """Main entry point."""
    args = parse_args()

    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName("Interview Calendar")
    app.setApplicationVersion("0.1")

    # Set application style
    app.setStyle("Fusion")

    # Load configuration
    try:
        config = load_config(args)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print("\nExample configuration:")
        print("""
[General]
initial_view = "Week"
initial_date = 2024-08-29

[Events]
source = "calendarfromtoenddate.json"
timeout = 30

[Layout]
popover_spacing = 95
month_cell_limit = 3
""")
        sys.exit(1)
    except (ConfigError, OSError) as e:
        print(f"Error loading configuration: {e}")
        sys.exit(1)

    if args.debug:
        print(f"Loaded configuration from: {config.path or 'built-in defaults'}")
        print(f"  Events source: {config.events.source}")
        print(f"  Initial view: {config.initial_view}")
        print(f"  Initial date: {config.initial_date or 'today'}")

    # Create and show main window
    window = MainWindow(config)
    window.show()

    # Run event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
