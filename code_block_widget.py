"""
Code Block Widget
PySide6 widget drawing Big5 codes as block glyphs

Each code is drawn in a 3-column grid:

    +----+---+----+
    |    | 1 |    |
    | 0  |---|  3 |
    |    | 2 |    |
    +----+---+----+

code[0] and code[3] fill the outer columns at full height, code[1] sits
above code[2] in the narrow middle column.

Copyright (C) 2026 Garland Glessner <gglessner@gmail.com>
License: GPL-3.0 (see LICENSE)
"""

from typing import List, Tuple

from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QRectF, QSize
from PySide6.QtGui import QPainter, QFont, QColor, QPen

try:
    from .transcoder import CodeEntry
except ImportError:
    from transcoder import CodeEntry


# Color mapping
COLORS = {
    'background': QColor(20, 20, 20),
    'block': QColor(37, 37, 37),
    'outer': QColor(45, 45, 45),
    'border': QColor(90, 90, 90),
    'divider': QColor(68, 68, 68),
    'outer_text': QColor(51, 255, 51),
    'middle_text': QColor(150, 220, 150),
    'unmapped': QColor(255, 102, 102),
    'annotation': QColor(136, 136, 136),
    'placeholder': QColor(102, 102, 102),
}

# Outer : middle : outer column widths
COLUMN_WEIGHTS = (1.0, 0.65, 1.0)


class CodeBlockWidget(QWidget):
    """Wrapping grid of Big5 code blocks, one row group per input line"""

    BLOCK_WIDTH = 52
    BLOCK_HEIGHT = 44
    ANNOTATION_HEIGHT = 18
    H_GAP = 8
    LINE_GAP = 12
    MARGIN = 12
    EMPTY_TEXT = "Result will appear here..."

    def __init__(self, parent=None):
        super().__init__(parent)

        self.lines: List[List[CodeEntry]] = []
        self.show_annotation = False

        self.outer_font = QFont("Consolas", 12)
        self.outer_font.setStyleHint(QFont.Monospace)
        self.outer_font.setBold(True)
        self.middle_font = QFont("Consolas", 8)
        self.middle_font.setStyleHint(QFont.Monospace)
        self.annotation_font = QFont()
        self.annotation_font.setPointSize(9)

        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Minimum)
        self.setAutoFillBackground(True)
        palette = self.palette()
        palette.setColor(self.backgroundRole(), COLORS['background'])
        self.setPalette(palette)

    def set_lines(self, lines: List[List[CodeEntry]]):
        self.lines = lines
        self._update_height()
        self.update()

    def set_show_annotation(self, show: bool):
        self.show_annotation = show
        self._update_height()
        self.update()

    def _row_height(self) -> int:
        height = self.BLOCK_HEIGHT
        if self.show_annotation:
            height += self.ANNOTATION_HEIGHT
        return height

    def _per_row(self, width: int) -> int:
        usable = max(width - 2 * self.MARGIN + self.H_GAP, self.BLOCK_WIDTH + self.H_GAP)
        return max(1, usable // (self.BLOCK_WIDTH + self.H_GAP))

    def block_positions(self, width: int) -> List[Tuple[int, int, CodeEntry]]:
        """Top-left corner of every block when laid out at the given width"""
        positions = []
        per_row = self._per_row(width)
        y = self.MARGIN
        for line in self.lines:
            for i, entry in enumerate(line):
                row, col = divmod(i, per_row)
                x = self.MARGIN + col * (self.BLOCK_WIDTH + self.H_GAP)
                positions.append((x, y + row * (self._row_height() + self.H_GAP), entry))
            rows = max(1, -(-len(line) // per_row))
            y += rows * self._row_height() + (rows - 1) * self.H_GAP + self.LINE_GAP
        return positions

    def content_height(self, width: int) -> int:
        if not self.lines:
            return self.BLOCK_HEIGHT + 2 * self.MARGIN
        per_row = self._per_row(width)
        height = 2 * self.MARGIN - self.LINE_GAP
        for line in self.lines:
            rows = max(1, -(-len(line) // per_row))
            height += rows * self._row_height() + (rows - 1) * self.H_GAP + self.LINE_GAP
        return height

    def _update_height(self):
        self.setMinimumHeight(self.content_height(self.width()))

    def resizeEvent(self, event):
        self._update_height()
        super().resizeEvent(event)

    def sizeHint(self) -> QSize:
        width = max(self.width(), 400)
        return QSize(width, self.content_height(width))

    def paintEvent(self, event):
        """Paint all code blocks"""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        if not self.lines:
            painter.setPen(COLORS['placeholder'])
            painter.drawText(self.rect().adjusted(self.MARGIN, self.MARGIN, 0, 0),
                             Qt.AlignLeft | Qt.AlignTop, self.EMPTY_TEXT)
            return

        for x, y, entry in self.block_positions(self.width()):
            self._draw_block(painter, x, y, entry)

    def _draw_block(self, painter: QPainter, x: int, y: int, entry: CodeEntry):
        """Draw one block and its optional annotation"""
        code = entry.display_code
        total = sum(COLUMN_WEIGHTS)
        left_w = self.BLOCK_WIDTH * COLUMN_WEIGHTS[0] / total
        mid_w = self.BLOCK_WIDTH * COLUMN_WEIGHTS[1] / total
        right_w = self.BLOCK_WIDTH - left_w - mid_w
        half_h = self.BLOCK_HEIGHT / 2

        left = QRectF(x, y, left_w, self.BLOCK_HEIGHT)
        mid_top = QRectF(x + left_w, y, mid_w, half_h)
        mid_bottom = QRectF(x + left_w, y + half_h, mid_w, half_h)
        right = QRectF(x + left_w + mid_w, y, right_w, self.BLOCK_HEIGHT)

        # Cells
        painter.fillRect(QRectF(x, y, self.BLOCK_WIDTH, self.BLOCK_HEIGHT), COLORS['block'])
        painter.fillRect(left, COLORS['outer'])
        painter.fillRect(right, COLORS['outer'])

        # Dividers and outline
        painter.setPen(QPen(COLORS['divider'], 1))
        painter.drawLine(mid_top.bottomLeft(), mid_top.bottomRight())
        painter.setPen(QPen(COLORS['border'], 1))
        painter.drawLine(left.topRight(), left.bottomRight())
        painter.drawLine(right.topLeft(), right.bottomLeft())
        painter.drawRoundedRect(QRectF(x, y, self.BLOCK_WIDTH, self.BLOCK_HEIGHT), 3, 3)

        outer_color = COLORS['outer_text'] if entry.mapped else COLORS['unmapped']
        middle_color = COLORS['middle_text'] if entry.mapped else COLORS['unmapped']

        # code[0] and code[3] full height, code[1] over code[2]
        painter.setFont(self.outer_font)
        painter.setPen(outer_color)
        painter.drawText(left, Qt.AlignCenter, code[0])
        painter.drawText(right, Qt.AlignCenter, code[3])

        painter.setFont(self.middle_font)
        painter.setPen(middle_color)
        painter.drawText(mid_top, Qt.AlignCenter, code[1])
        painter.drawText(mid_bottom, Qt.AlignCenter, code[2])

        if self.show_annotation:
            painter.setFont(self.annotation_font)
            painter.setPen(COLORS['annotation'])
            label = QRectF(x, y + self.BLOCK_HEIGHT, self.BLOCK_WIDTH, self.ANNOTATION_HEIGHT)
            painter.drawText(label, Qt.AlignCenter, entry.char)
