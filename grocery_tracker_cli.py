#!/usr/bin/env python3
"""
Grocery Frequency Tracker - interactive CLI

Tallies item names from the input file and serves the lookup / listing /
histogram menu. Confirming exit writes the backup file.
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.adapters.console import Console, StdConsole
from src.core.config import get_settings
from src.groceries.menu import MenuLoop, load_and_report
from src.groceries.tracker import FrequencyTracker


def build_parser() -> argparse.ArgumentParser:
    s = get_settings()
    parser = argparse.ArgumentParser(description="Grocery item frequency tracker")
    parser.add_argument("input_file", nargs="?", default=s.input_file,
                        help=f"File with one item per line (default: {s.input_file})")
    parser.add_argument("--backup-file", default=s.backup_file,
                        help=f"Backup destination written on exit (default: {s.backup_file})")
    parser.add_argument("--log-level", default=s.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper,
                        help="Log level for stderr diagnostics")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level)

    console = console or StdConsole()
    tracker = FrequencyTracker(backup_file=args.backup_file, encoding=get_settings().file_encoding)
    load_and_report(tracker, args.input_file, console)
    return MenuLoop(tracker, console).run()


if __name__ == "__main__":
    sys.exit(main())
