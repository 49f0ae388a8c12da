"""
Big5 (CP950) character table
Decodes the embedded record blob into forward and reverse lookup maps

Copyright (C) 2026 Garland Glessner <gglessner@gmail.com>
License: GPL-3.0 (see LICENSE)
"""

import base64
import binascii
import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

try:
    from .big5_data import BIG5_DATA, BIG5_COUNT
except ImportError:
    from big5_data import BIG5_DATA, BIG5_COUNT

logger = logging.getLogger(__name__)


# Record layout: 3-byte big-endian code point, 2-byte big-endian Big5 code
RECORD_SIZE = 5
CODEPOINT_SIZE = 3

MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


class TableError(ValueError):
    """Embedded table asset is malformed"""


@dataclass(frozen=True)
class TableRecord:
    """Single packed table record"""
    codepoint: int
    big5_code: int

    @property
    def char(self) -> str:
        return chr(self.codepoint)

    @property
    def code(self) -> str:
        return format_code(self.big5_code)


def format_code(value: int) -> str:
    """Format a 16-bit Big5 code as 4 uppercase hex digits"""
    return f"{value:04X}"


def iter_records(data: str, count: int) -> Iterator[TableRecord]:
    """
    Decode a base64 table blob into records.

    Args:
        data: Base64 text of packed 5-byte records
        count: Number of records to read

    Raises:
        TableError: Bad base64, short payload or invalid code point
    """
    if count < 0:
        raise TableError(f"Negative record count: {count}")

    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise TableError(f"Table blob is not valid base64: {e}") from e

    needed = count * RECORD_SIZE
    if len(raw) < needed:
        raise TableError(
            f"Table blob too short: {len(raw)} bytes, need {needed} for {count} records"
        )

    for i in range(count):
        offset = i * RECORD_SIZE
        codepoint = int.from_bytes(raw[offset:offset + CODEPOINT_SIZE], 'big')
        big5_code = int.from_bytes(raw[offset + CODEPOINT_SIZE:offset + RECORD_SIZE], 'big')
        if codepoint > MAX_CODEPOINT or codepoint in SURROGATES:
            raise TableError(f"Record {i}: U+{codepoint:06X} is not a Unicode scalar value")
        yield TableRecord(codepoint, big5_code)


def decode_table(data: str, count: int) -> Dict[str, str]:
    """Build the character -> code map from a table blob"""
    forward = {}
    for record in iter_records(data, count):
        forward[record.char] = record.code
    return forward


def build_reverse(forward: Mapping[str, str]) -> Dict[str, str]:
    """Invert a forward map. A code shared by several characters keeps the last one."""
    reverse = {}
    for char, code in forward.items():
        reverse[code] = char
    return reverse


@dataclass(frozen=True)
class Big5Table:
    """Read-only pair of forward (char -> code) and reverse (code -> char) maps"""
    forward: Mapping[str, str]
    reverse: Optional[Mapping[str, str]] = None

    def __post_init__(self):
        forward = dict(self.forward)
        reverse = dict(self.reverse) if self.reverse is not None else build_reverse(forward)
        object.__setattr__(self, 'forward', MappingProxyType(forward))
        object.__setattr__(self, 'reverse', MappingProxyType(reverse))

    @classmethod
    def from_blob(cls, data: str, count: int) -> 'Big5Table':
        forward = decode_table(data, count)
        table = cls(forward)
        logger.debug(f"Loaded Big5 table: {len(table.forward)} characters, "
                     f"{len(table.reverse)} codes")
        return table

    def lookup(self, char: str) -> Optional[str]:
        """Big5 code for a character, or None if unmapped"""
        return self.forward.get(char)

    def char_for(self, code: str) -> Optional[str]:
        """Character for a 4-hex-digit code (any case), or None"""
        return self.reverse.get(code.upper())

    def __len__(self) -> int:
        return len(self.forward)

    def __contains__(self, char) -> bool:
        return char in self.forward


@lru_cache(maxsize=None)
def get_default_table() -> Big5Table:
    """Process-wide table built from the embedded blob"""
    try:
        return Big5Table.from_blob(BIG5_DATA, BIG5_COUNT)
    except TableError as e:
        logger.error(f"Embedded Big5 table is corrupt: {e}")
        raise
