import os
import sys
import base64

import pytest

# Flat module layout: make the project root and tools/ importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.join(ROOT, 'tools'))
sys.path.insert(0, ROOT)


def pack(*records):
    """Base64 blob from (codepoint, big5_code) pairs"""
    raw = b''.join(cp.to_bytes(3, 'big') + code.to_bytes(2, 'big') for cp, code in records)
    return base64.b64encode(raw).decode('ascii')


@pytest.fixture
def small_table():
    from big5_table import Big5Table
    return Big5Table.from_blob(pack((0x4E2D, 0xA4A4), (0x6587, 0xA4E5), (0x3000, 0xA140)), 3)
