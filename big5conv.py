#!/usr/bin/env python3
"""
big5conv - Big5 (CP950) Converter

Converts Traditional Chinese text to Big5 hex codes and back, using
an embedded CP950 table. Runs as a PySide6 (Qt6) GUI, or from the
command line when given text or a code.

Copyright (C) 2026 Garland Glessner <gglessner@gmail.com>
License: GPL-3.0

Usage:
    python big5conv.py [text] [-a] [-r CODE] [--stdin] [--verify] [-d]

Examples:
    python big5conv.py                      # Launch GUI
    python big5conv.py 中文                 # Print A4A4★A4E5
    python big5conv.py -a 中文              # Print A4A4(中)★A4E5(文)
    python big5conv.py -r a4a4              # Print 中
    cat notes.txt | python big5conv.py --stdin
"""

import sys
import signal
import argparse
import logging

try:
    from .big5_table import TableError, get_default_table
    from .transcoder import transcode
    from .resolver import ResolveStatus, resolve
    from .reference_table import (
        REFERENCE_URL, ReferenceTableError, compare_tables,
        fetch_reference_table, missing_preview, parse_reference_table
    )
except ImportError:
    from big5_table import TableError, get_default_table
    from transcoder import transcode
    from resolver import ResolveStatus, resolve
    from reference_table import (
        REFERENCE_URL, ReferenceTableError, compare_tables,
        fetch_reference_table, missing_preview, parse_reference_table
    )

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='big5conv - Big5 (CP950) Converter'
    )
    parser.add_argument('text', nargs='?',
                        help='Text to convert (omit to launch the GUI)')
    parser.add_argument('-a', '--annotate', action='store_true',
                        help='Show each source character as CODE(char)')
    parser.add_argument('-r', '--reverse', metavar='CODE',
                        help='Look up the character for a 4-digit hex code')
    parser.add_argument('--stdin', action='store_true',
                        help='Read the text to convert from standard input')
    parser.add_argument('--verify', action='store_true',
                        help='Compare the embedded table with the reference table')
    parser.add_argument('--url', default=REFERENCE_URL,
                        help='Reference table URL for --verify')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='Enable debug logging')
    return parser


def run_reverse(code: str, table) -> int:
    result = resolve(code, table)
    if result.status is ResolveStatus.FOUND:
        print(result.char)
        return 0
    if result.status is ResolveStatus.NOT_FOUND:
        print(f"{result.code}: not found", file=sys.stderr)
    else:
        print(f"{code}: incomplete code (need 4 hex digits)", file=sys.stderr)
    return 1


def run_verify(url: str, table) -> int:
    try:
        text = fetch_reference_table(url)
    except ReferenceTableError as e:
        logger.error(f"Error fetching Big5 table: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    reference = parse_reference_table(text)
    diff = compare_tables(reference, table)
    print(f"Reference: {len(reference)} characters, embedded: {len(table)} characters")
    print(diff.summary())
    preview = missing_preview(diff)
    if preview:
        print("Missing: " + ' '.join(preview))
    return 0


def run_gui(table) -> int:
    from PySide6.QtWidgets import QApplication
    from PySide6.QtCore import Qt, QTimer
    from PySide6.QtGui import QPalette, QColor

    try:
        from .main_window import MainWindow
    except ImportError:
        from main_window import MainWindow

    # Create Qt application
    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    # Set dark palette
    palette = QPalette()
    palette.setColor(QPalette.Window, QColor(26, 26, 26))
    palette.setColor(QPalette.WindowText, Qt.white)
    palette.setColor(QPalette.Base, QColor(37, 37, 37))
    palette.setColor(QPalette.AlternateBase, QColor(45, 45, 45))
    palette.setColor(QPalette.ToolTipBase, Qt.white)
    palette.setColor(QPalette.ToolTipText, Qt.white)
    palette.setColor(QPalette.Text, Qt.white)
    palette.setColor(QPalette.Button, QColor(45, 45, 45))
    palette.setColor(QPalette.ButtonText, Qt.white)
    palette.setColor(QPalette.BrightText, Qt.red)
    palette.setColor(QPalette.Highlight, QColor(51, 255, 51))
    palette.setColor(QPalette.HighlightedText, Qt.black)
    app.setPalette(palette)

    # Create main window
    window = MainWindow(table)
    window.show()

    # Handle Ctrl+C gracefully
    def sigint_handler(*args):
        window.close()
        app.quit()

    signal.signal(signal.SIGINT, sigint_handler)

    # Allow Python to process signals (Qt blocks them by default)
    timer = QTimer()
    timer.timeout.connect(lambda: None)
    timer.start(100)

    return app.exec()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        table = get_default_table()
    except TableError as e:
        print(f"ERROR: embedded table is corrupt: {e}", file=sys.stderr)
        return 2

    if args.reverse is not None:
        return run_reverse(args.reverse, table)

    if args.verify:
        return run_verify(args.url, table)

    if args.stdin:
        text = sys.stdin.read()
        # Drop the trailing newline most pipes add
        if text.endswith('\n'):
            text = text[:-1]
        print(transcode(text, args.annotate, table))
        return 0

    if args.text is not None:
        print(transcode(args.text, args.annotate, table))
        return 0

    return run_gui(table)


if __name__ == '__main__':
    sys.exit(main())
