"""
Reference Table Client
Downloads the public CP950 Unicode-to-Big5 table and compares it with
the embedded one

Copyright (C) 2026 Garland Glessner <gglessner@gmail.com>
License: GPL-3.0 (see LICENSE)
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

import requests

try:
    from .big5_table import Big5Table, format_code
except ImportError:
    from big5_table import Big5Table, format_code

# Set up logging
logger = logging.getLogger(__name__)


REFERENCE_URL = 'https://moztw.org/docs/big5/table/cp950-u2b.txt'
REFERENCE_SOURCE = 'moztw.org (CP950)'
FETCH_TIMEOUT = 30
USER_AGENT = 'big5conv/1.0'


class ReferenceTableError(Exception):
    """Reference table could not be downloaded"""


@dataclass
class TableDiff:
    """Differences between the reference table and the embedded table"""
    missing: Dict[str, str] = field(default_factory=dict)      # in reference only
    extra: Dict[str, str] = field(default_factory=dict)        # in embedded only
    mismatched: Dict[str, tuple] = field(default_factory=dict)  # char -> (reference, embedded)

    @property
    def identical(self) -> bool:
        return not (self.missing or self.extra or self.mismatched)

    def summary(self) -> str:
        if self.identical:
            return "Embedded table matches the reference table"
        return (f"{len(self.missing)} missing, {len(self.extra)} extra, "
                f"{len(self.mismatched)} mismatched")


def parse_reference_table(text: str) -> Dict[str, str]:
    """
    Parse a Unicode-to-Big5 text table.

    Each data line holds two hex fields, Unicode first then Big5
    (e.g. '0x4E2D 0xA4A4'), optionally followed by a comment.
    Lines starting with '#' are comments. Single-byte codes are skipped.

    Returns:
        Character -> 4-digit uppercase Big5 code
    """
    mapping = {}
    skipped = 0
    for line_num, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        parts = line.split(None, 2)
        if len(parts) < 2 or not (parts[0].lower().startswith('0x') and
                                  parts[1].lower().startswith('0x')):
            skipped += 1
            logger.debug(f"Skipping line {line_num}: {line!r}")
            continue

        try:
            ucs = int(parts[0], 16)
            code = int(parts[1], 16)
            char = chr(ucs)
        except ValueError:
            skipped += 1
            logger.debug(f"Bad hex value at line {line_num}: {line!r}")
            continue

        # Ignore pure ASCII / single-byte mappings
        if code <= 0xFF:
            continue

        mapping[char] = format_code(code)

    if skipped:
        logger.debug(f"Skipped {skipped} malformed reference lines")
    return mapping


def fetch_reference_table(url: str = REFERENCE_URL, timeout: float = FETCH_TIMEOUT) -> str:
    """
    Download the reference table text.

    Raises:
        ReferenceTableError: On HTTP, network or decoding failure
    """
    logger.info(f"Fetching reference table from {url}")
    try:
        response = requests.get(url, timeout=timeout, headers={'User-Agent': USER_AGENT})
        response.raise_for_status()
    except requests.Timeout as e:
        raise ReferenceTableError(f"Timed out fetching table: {url}") from e
    except requests.HTTPError as e:
        raise ReferenceTableError(
            f"Failed to fetch table: HTTP {e.response.status_code} {e.response.reason}"
        ) from e
    except requests.ConnectionError as e:
        raise ReferenceTableError(f"Connection failed: {url}") from e
    except requests.RequestException as e:
        raise ReferenceTableError(f"Failed to fetch table: {e}") from e

    try:
        return response.content.decode('utf-8')
    except UnicodeDecodeError as e:
        raise ReferenceTableError(f"Reference table is not UTF-8: {e}") from e


def compare_tables(reference: Mapping[str, str], table: Big5Table) -> TableDiff:
    """Compare a parsed reference mapping with an embedded table"""
    diff = TableDiff()
    for char, code in reference.items():
        ours = table.lookup(char)
        if ours is None:
            diff.missing[char] = code
        elif ours != code:
            diff.mismatched[char] = (code, ours)
    for char, code in table.forward.items():
        if char not in reference:
            diff.extra[char] = code
    return diff


class ReferenceTableLoader:
    """Fetches and parses the reference table on a background thread"""

    def __init__(self, url: str = REFERENCE_URL, timeout: float = FETCH_TIMEOUT):
        self.url = url
        self.timeout = timeout

        # Callbacks
        self.on_loaded: Optional[Callable[[Dict[str, str]], None]] = None
        self.on_error: Optional[Callable[[str], None]] = None

        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> bool:
        """Start a download. Returns False if one is already running."""
        if self.running:
            return False
        self._thread = threading.Thread(
            target=self._run,
            daemon=True,
            name="Big5-Reference"
        )
        self._thread.start()
        return True

    def join(self, timeout: Optional[float] = None):
        if self._thread:
            self._thread.join(timeout)

    def _run(self):
        try:
            text = fetch_reference_table(self.url, self.timeout)
        except ReferenceTableError as e:
            logger.error(f"Error fetching Big5 table: {e}")
            if self.on_error:
                self.on_error(str(e))
            return

        mapping = parse_reference_table(text)
        logger.info(f"Reference table loaded: {len(mapping)} characters")
        if self.on_loaded:
            self.on_loaded(mapping)


def missing_preview(diff: TableDiff, limit: int = 10) -> List[str]:
    """First few missing characters formatted as CODE(char)"""
    return [f"{code}({char})" for char, code in list(diff.missing.items())[:limit]]
