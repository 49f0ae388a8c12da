"""
Reverse resolver
Looks up the character for a 4-digit Big5 hex code

Copyright (C) 2026 Garland Glessner <gglessner@gmail.com>
License: GPL-3.0 (see LICENSE)
"""

import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional

try:
    from .big5_table import Big5Table, get_default_table
except ImportError:
    from big5_table import Big5Table, get_default_table


CODE_LENGTH = 4
HEX_DIGITS = frozenset(string.hexdigits)


class ResolveStatus(Enum):
    INCOMPLETE = 'incomplete'
    NOT_FOUND = 'not_found'
    FOUND = 'found'


@dataclass(frozen=True)
class Resolution:
    """Result of a reverse lookup"""
    status: ResolveStatus
    code: str
    char: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is ResolveStatus.FOUND


def clean_code_input(text: str) -> str:
    """Keep hex digits only, uppercased, at most 4 of them"""
    digits = ''.join(c for c in text if c in HEX_DIGITS)
    return digits.upper()[:CODE_LENGTH]


def is_code(candidate: str) -> bool:
    return len(candidate) == CODE_LENGTH and all(c in HEX_DIGITS for c in candidate)


def resolve(candidate: str, table: Optional[Big5Table] = None) -> Resolution:
    """
    Resolve a hex code to its character.

    Anything other than exactly 4 hex digits is INCOMPLETE; a well-formed
    code missing from the table is NOT_FOUND.
    """
    if not is_code(candidate):
        return Resolution(ResolveStatus.INCOMPLETE, candidate)

    code = candidate.upper()
    if table is None:
        table = get_default_table()
    char = table.char_for(code)
    if char is None:
        return Resolution(ResolveStatus.NOT_FOUND, code)
    return Resolution(ResolveStatus.FOUND, code, char)
