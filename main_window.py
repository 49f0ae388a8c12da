"""
Main Window
PySide6 main application window for big5conv

Copyright (C) 2026 Garland Glessner <gglessner@gmail.com>
License: GPL-3.0 (see LICENSE)
"""

import logging
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QLineEdit, QFrame, QPlainTextEdit,
    QScrollArea, QStackedWidget
)
from PySide6.QtCore import Qt, Slot, Signal, QObject, QTimer
from PySide6.QtGui import QFont

try:
    from .big5_table import Big5Table, get_default_table
    from .transcoder import encode_lines, format_lines
    from .resolver import ResolveStatus, clean_code_input, resolve
    from .reference_table import (
        REFERENCE_SOURCE, ReferenceTableLoader, compare_tables
    )
    from .code_block_widget import CodeBlockWidget
except ImportError:
    from big5_table import Big5Table, get_default_table
    from transcoder import encode_lines, format_lines
    from resolver import ResolveStatus, clean_code_input, resolve
    from reference_table import (
        REFERENCE_SOURCE, ReferenceTableLoader, compare_tables
    )
    from code_block_widget import CodeBlockWidget

logger = logging.getLogger(__name__)


COPIED_FEEDBACK_MS = 2000

TOGGLE_STYLE = """
    QPushButton {
        background-color: #2d2d2d;
        color: #aaa;
        border: 1px solid #444;
        border-radius: 4px;
        padding: 4px 10px;
        font-size: 11px;
    }
    QPushButton:hover { border-color: #888; }
    QPushButton:checked {
        background-color: #33ff33;
        color: #000;
        border-color: #33ff33;
    }
"""

ACTION_STYLE = """
    QPushButton {
        background-color: #2d2d2d;
        color: #fff;
        border: 1px solid #444;
        border-radius: 4px;
        padding: 4px 10px;
    }
    QPushButton:hover { background-color: #3d3d3d; }
    QPushButton:disabled { background-color: #555; color: #888; }
"""

LOOKUP_STYLES = {
    ResolveStatus.FOUND: "color: #33ff33; font-size: 28px;",
    ResolveStatus.NOT_FOUND: "color: #ff6666;",
    ResolveStatus.INCOMPLETE: "color: #888;",
}


class LoaderBridge(QObject):
    """Moves reference loader callbacks onto the GUI thread"""
    loaded = Signal(object)
    failed = Signal(str)


class StatusBar(QFrame):
    """Table source and size status bar"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFrameStyle(QFrame.Panel | QFrame.Sunken)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 5, 10, 5)

        self.source_label = QLabel(f"Data Source: {REFERENCE_SOURCE}")
        self.source_label.setStyleSheet("color: #888;")
        layout.addWidget(self.source_label)

        layout.addSpacing(20)

        self.count_label = QLabel("")
        self.count_label.setStyleSheet("color: #888;")
        layout.addWidget(self.count_label)

        layout.addStretch()

        self.message_label = QLabel("")
        self.message_label.setStyleSheet("color: #888;")
        layout.addWidget(self.message_label)

    def set_count(self, count: int):
        self.count_label.setText(f"{count:,} characters loaded")

    def set_message(self, message: str, error: bool = False):
        self.message_label.setText(message)
        self.message_label.setStyleSheet("color: #ff6666;" if error else "color: #33ff33;")


class MainWindow(QMainWindow):
    """Main application window"""

    def __init__(self, table: Optional[Big5Table] = None):
        super().__init__()

        self.table = table if table is not None else get_default_table()
        self.code_lines = []

        self.setWindowTitle("big5conv v1.0.0 - Big5 Converter")
        self.setStyleSheet("""
            QMainWindow {
                background-color: #1a1a1a;
            }
            QLabel {
                color: #fff;
            }
            QLineEdit, QPlainTextEdit {
                background-color: #252525;
                border: 1px solid #444;
                border-radius: 4px;
                padding: 5px;
                color: #fff;
            }
            QLineEdit:focus, QPlainTextEdit:focus {
                border-color: #33ff33;
            }
        """)

        # Reference table download
        self.bridge = LoaderBridge()
        self.bridge.loaded.connect(self._on_reference_loaded)
        self.bridge.failed.connect(self._on_reference_error)
        self.loader = ReferenceTableLoader()
        self.loader.on_loaded = self.bridge.loaded.emit
        self.loader.on_error = self.bridge.failed.emit

        # Build UI
        self._build_ui()
        self.status_bar.set_count(len(self.table))

    def _build_ui(self):
        """Build the user interface"""
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)

        # Header
        header = QHBoxLayout()

        title = QLabel("Big5 Converter")
        title.setStyleSheet("color: #33ff33; font-size: 18px; font-weight: bold;")
        header.addWidget(title)

        header.addSpacing(20)
        subtitle = QLabel("Convert Traditional Chinese characters to Big5 hex codes.")
        subtitle.setStyleSheet("color: #888;")
        header.addWidget(subtitle)
        header.addStretch()

        layout.addLayout(header)

        # Input and output side by side
        panes = QHBoxLayout()
        panes.setSpacing(10)
        panes.addLayout(self._build_input_pane(), 1)
        panes.addLayout(self._build_output_pane(), 1)
        layout.addLayout(panes, 1)

        # Reverse lookup
        layout.addLayout(self._build_lookup_row())

        # Status bar
        self.status_bar = StatusBar()
        layout.addWidget(self.status_bar)

        self.resize(960, 560)

    def _build_input_pane(self) -> QVBoxLayout:
        pane = QVBoxLayout()

        row = QHBoxLayout()
        row.addWidget(QLabel("INPUT (TRADITIONAL CHINESE)"))
        row.addStretch()
        self.clear_btn = QPushButton("Clear")
        self.clear_btn.setFocusPolicy(Qt.NoFocus)
        self.clear_btn.setStyleSheet(ACTION_STYLE)
        self.clear_btn.clicked.connect(self._clear)
        row.addWidget(self.clear_btn)
        pane.addLayout(row)

        self.input_edit = QPlainTextEdit()
        self.input_edit.setPlaceholderText("Paste your text here...")
        font = self.input_edit.font()
        font.setPointSize(14)
        self.input_edit.setFont(font)
        self.input_edit.textChanged.connect(self._refresh_output)
        pane.addWidget(self.input_edit)
        return pane

    def _build_output_pane(self) -> QVBoxLayout:
        pane = QVBoxLayout()

        row = QHBoxLayout()
        row.addWidget(QLabel("OUTPUT (BIG5 HEX)"))
        row.addStretch()

        self.block_btn = QPushButton("Block")
        self.block_btn.setCheckable(True)
        self.block_btn.setToolTip("Block glyph display")
        self.block_btn.setFocusPolicy(Qt.NoFocus)
        self.block_btn.setStyleSheet(TOGGLE_STYLE)
        self.block_btn.toggled.connect(self._set_block_mode)
        row.addWidget(self.block_btn)

        self.annotate_btn = QPushButton("Annotate")
        self.annotate_btn.setCheckable(True)
        self.annotate_btn.setToolTip("Show/hide source characters")
        self.annotate_btn.setFocusPolicy(Qt.NoFocus)
        self.annotate_btn.setStyleSheet(TOGGLE_STYLE)
        self.annotate_btn.toggled.connect(self._set_annotate)
        row.addWidget(self.annotate_btn)

        self.copy_btn = QPushButton("Copy")
        self.copy_btn.setEnabled(False)
        self.copy_btn.setFocusPolicy(Qt.NoFocus)
        self.copy_btn.setStyleSheet(ACTION_STYLE)
        self.copy_btn.clicked.connect(self._copy)
        row.addWidget(self.copy_btn)

        # Restores the Copy label; a child of the window
        self.copy_timer = QTimer(self)
        self.copy_timer.setSingleShot(True)
        self.copy_timer.timeout.connect(self._reset_copy_label)
        pane.addLayout(row)

        # Plain text and block views share one slot
        self.output_stack = QStackedWidget()

        self.output_edit = QPlainTextEdit()
        self.output_edit.setReadOnly(True)
        self.output_edit.setPlaceholderText("Result will appear here...")
        mono = QFont("Consolas", 11)
        mono.setStyleHint(QFont.Monospace)
        self.output_edit.setFont(mono)
        self.output_stack.addWidget(self.output_edit)

        self.block_view = CodeBlockWidget()
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.block_view)
        self.output_stack.addWidget(scroll)

        pane.addWidget(self.output_stack)
        return pane

    def _build_lookup_row(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.addWidget(QLabel("Reverse lookup:"))

        self.code_input = QLineEdit()
        self.code_input.setPlaceholderText("A4A4")
        self.code_input.setFixedWidth(80)
        self.code_input.setMaxLength(4)
        self.code_input.textEdited.connect(self._lookup_code)
        row.addWidget(self.code_input)

        self.lookup_label = QLabel("")
        row.addWidget(self.lookup_label)

        row.addStretch()

        self.verify_btn = QPushButton("Verify table")
        self.verify_btn.setToolTip(f"Compare with {REFERENCE_SOURCE}")
        self.verify_btn.setFocusPolicy(Qt.NoFocus)
        self.verify_btn.setStyleSheet(ACTION_STYLE)
        self.verify_btn.clicked.connect(self._verify)
        row.addWidget(self.verify_btn)
        return row

    def output_text(self) -> str:
        """Plain-text output, as copied to the clipboard"""
        return format_lines(self.code_lines, self.annotate_btn.isChecked())

    @Slot()
    def _refresh_output(self):
        """Re-transcode the input"""
        self.code_lines = encode_lines(self.input_edit.toPlainText(), self.table)
        text = self.output_text()
        self.output_edit.setPlainText(text)
        self.block_view.set_lines(self.code_lines)
        self.copy_btn.setEnabled(bool(text))

    @Slot(bool)
    def _set_annotate(self, checked: bool):
        self.block_view.set_show_annotation(checked)
        self._refresh_output()

    @Slot(bool)
    def _set_block_mode(self, checked: bool):
        self.output_stack.setCurrentIndex(1 if checked else 0)

    @Slot()
    def _clear(self):
        self.input_edit.clear()
        self.input_edit.setFocus()

    @Slot()
    def _copy(self):
        """Copy plain-text output regardless of display mode"""
        text = self.output_text()
        if not text:
            return
        QApplication.clipboard().setText(text)
        self.copy_btn.setText("Copied!")
        self.copy_timer.start(COPIED_FEEDBACK_MS)

    @Slot()
    def _reset_copy_label(self):
        self.copy_btn.setText("Copy")

    @Slot(str)
    def _lookup_code(self, text: str):
        """Resolve the typed code and show the result"""
        cleaned = clean_code_input(text)
        if cleaned != text:
            self.code_input.setText(cleaned)

        result = resolve(cleaned, self.table)
        if result.status is ResolveStatus.FOUND:
            self.lookup_label.setText(result.char)
        elif result.status is ResolveStatus.NOT_FOUND:
            self.lookup_label.setText("not found")
        else:
            self.lookup_label.setText("" if not cleaned else "incomplete")
        self.lookup_label.setStyleSheet(LOOKUP_STYLES[result.status])

    @Slot()
    def _verify(self):
        if self.loader.start():
            self.verify_btn.setEnabled(False)
            self.status_bar.set_message("Fetching reference table...")

    @Slot(object)
    def _on_reference_loaded(self, mapping: Dict[str, str]):
        self.verify_btn.setEnabled(True)
        diff = compare_tables(mapping, self.table)
        logger.info(f"Reference comparison: {diff.summary()}")
        self.status_bar.set_message(diff.summary(), error=not diff.identical)

    @Slot(str)
    def _on_reference_error(self, error: str):
        self.verify_btn.setEnabled(True)
        self.status_bar.set_message(f"ERROR: {error[:60]}", error=True)
