"""
Forward transcoder
Converts text to Big5 hex codes, character by character and line by line

Copyright (C) 2026 Garland Glessner <gglessner@gmail.com>
License: GPL-3.0 (see LICENSE)
"""

from dataclasses import dataclass
from typing import List, Optional

try:
    from .big5_table import Big5Table, get_default_table
except ImportError:
    from big5_table import Big5Table, get_default_table


PLACEHOLDER = '????'    # Shown for characters with no Big5 code
SEPARATOR = '★'    # BLACK STAR, between codes on a line
NEWLINE = '\n'


@dataclass(frozen=True)
class CodeEntry:
    """One input character and its Big5 code (None when unmapped)"""
    char: str
    code: Optional[str] = None

    @property
    def mapped(self) -> bool:
        return self.code is not None

    @property
    def display_code(self) -> str:
        return self.code if self.code is not None else PLACEHOLDER


def split_lines(text: str) -> List[str]:
    """Split on newlines; empty text has no lines at all"""
    if not text:
        return []
    return text.split(NEWLINE)


def encode_line(line: str, table: Big5Table) -> List[CodeEntry]:
    # str iterates by code point, so astral characters stay whole
    return [CodeEntry(char, table.lookup(char)) for char in line]


def encode_lines(text: str, table: Optional[Big5Table] = None) -> List[List[CodeEntry]]:
    """Look up every character of every line"""
    if table is None:
        table = get_default_table()
    return [encode_line(line, table) for line in split_lines(text)]


def format_entry(entry: CodeEntry, annotate: bool = False) -> str:
    if annotate:
        return f"{entry.display_code}({entry.char})"
    return entry.display_code


def format_lines(lines: List[List[CodeEntry]], annotate: bool = False) -> str:
    """Join entries with the star separator and lines with newlines"""
    return NEWLINE.join(
        SEPARATOR.join(format_entry(entry, annotate) for entry in line)
        for line in lines
    )


def transcode(text: str, annotate: bool = False, table: Optional[Big5Table] = None) -> str:
    """
    Convert text to its Big5 code string.

    Args:
        text: Input text, lines separated by '\\n'
        annotate: Append each source character as CODE(char)
        table: Lookup table (defaults to the embedded table)

    Returns:
        Newline-joined lines of star-separated codes. Unmapped
        characters become '????'.
    """
    return format_lines(encode_lines(text, table), annotate)
