#!/usr/bin/env python3
"""
Generate big5_data.py from a CP950 vendor mapping file.

The input is CP950.TXT as published by Unicode, Inc.
(https://www.unicode.org/Public/MAPPINGS/VENDORS/MICSFT/WINDOWS/):
one mapping per line, Big5 code first, then the Unicode code point,
then a comment:

    0xA4A4	0x4E2D	#CJK UNIFIED IDEOGRAPH

Copyright (C) 2026 Garland Glessner <gglessner@gmail.com>
License: GPL-3.0 (see LICENSE)
"""

import sys
import base64
import argparse
import logging
import textwrap
from typing import List, Tuple

logger = logging.getLogger(__name__)

RECORD_SIZE = 5
LINE_WIDTH = 76

PUA = range(0xE000, 0xF900)
REPLACEMENT_CHAR = 0xFFFD

# Frequent and less frequent hanzi
IDEOGRAPH_BLOCKS = (range(0xA440, 0xC67F), range(0xC940, 0xF9D6))

HEADER = '''"""
Embedded Big5 (CP950) character table

Generated by tools/generate_big5_data.py from the CP950 vendor mapping.
Do not edit by hand.

Each record is 5 bytes: a 24-bit big-endian Unicode code point followed
by a 16-bit big-endian Big5 code.

Copyright (C) 2026 Garland Glessner <gglessner@gmail.com>
License: GPL-3.0 (see LICENSE)
"""
'''


def read_source(lines) -> List[Tuple[int, int]]:
    """
    Read (code, ucs) pairs from a vendor mapping file.

    Blank lines, comments and lines without a Unicode value (undefined
    codes) are skipped.

    Raises:
        ValueError: A mapping line holds an invalid hex value
    """
    result = []
    for line_num, line in enumerate(lines, 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        parts = line.split(None, 2)
        if len(parts) < 2 or not (parts[0].startswith('0x') and parts[1].startswith('0x')):
            continue

        try:
            code = int(parts[0], 16)
            ucs = int(parts[1], 16)
        except ValueError:
            raise ValueError(f"Invalid hex value at line {line_num}: {line}")

        result.append((code, ucs))
    return result


def is_ideograph_code(code: int) -> bool:
    return any(code in block for block in IDEOGRAPH_BLOCKS)


def select_mappings(mappings: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
    """
    Keep the double-byte mappings that belong in the forward table.

    Single-byte codes, Private Use Area targets and U+FFFD are dropped.
    A character reachable from several codes keeps the one CP950 encodes
    it as: its code in an ideograph block if it has one (so U+5341 is
    0xA451, not the Suzhou numeral 0xA2CC), otherwise the lowest code.
    """
    chosen = {}
    for code, ucs in sorted(mappings):
        if code <= 0xFF:
            continue
        if ucs in PUA or ucs == REPLACEMENT_CHAR:
            continue
        current = chosen.get(ucs)
        if current is None:
            chosen[ucs] = code
        elif is_ideograph_code(code) and not is_ideograph_code(current):
            logger.debug(f"U+{ucs:04X}: using 0x{code:04X} over 0x{current:04X}")
            chosen[ucs] = code
        else:
            logger.debug(f"U+{ucs:04X} already mapped, dropping 0x{code:04X}")
    return sorted((code, ucs) for ucs, code in chosen.items())


def pack_records(mappings: List[Tuple[int, int]]) -> bytes:
    out = bytearray()
    for code, ucs in mappings:
        out += ucs.to_bytes(3, 'big')
        out += code.to_bytes(2, 'big')
    return bytes(out)


def render_module(mappings: List[Tuple[int, int]]) -> str:
    """Source text of big5_data.py"""
    blob = base64.b64encode(pack_records(mappings)).decode('ascii')
    body = '\n'.join(f'    "{chunk}"' for chunk in textwrap.wrap(blob, LINE_WIDTH))
    return (
        f"{HEADER}\n"
        f"BIG5_COUNT = {len(mappings)}\n\n"
        f"BIG5_DATA = (\n{body}\n)\n"
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Generate big5_data.py from CP950.TXT'
    )
    parser.add_argument('input', help='CP950.TXT mapping file')
    parser.add_argument('-o', '--output', default='big5_data.py',
                        help='Output module (default: big5_data.py)')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        with open(args.input, 'r', encoding='utf-8') as f:
            mappings = read_source(f)
    except (OSError, ValueError) as e:
        logger.error(f"READ ERROR: {args.input}: {e}")
        return 1

    selected = select_mappings(mappings)
    with open(args.output, 'w', encoding='utf-8') as f:
        f.write(render_module(selected))

    logger.info(f"Wrote {len(selected)} records to {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
