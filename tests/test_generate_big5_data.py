import pytest

import generate_big5_data
from big5_table import Big5Table
from generate_big5_data import read_source, render_module, select_mappings


CP950_SAMPLE = """\
#
#    Name:     cp950 to Unicode table
#
0x41\t0x0041\t#LATIN CAPITAL LETTER A
0x8140\t0xE000\t#PRIVATE USE
0xA140\t0x3000\t#IDEOGRAPHIC SPACE
0xA4E5\t0x6587\t#CJK UNIFIED IDEOGRAPH
0xA4A4\t0x4E2D\t#CJK UNIFIED IDEOGRAPH
0xF9F9\t0x2550\t#BOX DRAWINGS
0xA2A4\t0x2550\t#BOX DRAWINGS
0xA2CC\t0x5341\t#HANGZHOU NUMERAL TEN
0xA451\t0x5341\t#CJK UNIFIED IDEOGRAPH
0xA3E1\t\t#UNDEFINED
"""


def test_read_source_skips_comments_and_undefined():
    mappings = read_source(CP950_SAMPLE.splitlines())
    assert (0xA4A4, 0x4E2D) in mappings
    assert len(mappings) == 9


def test_read_source_rejects_bad_hex():
    with pytest.raises(ValueError, match='line 1'):
        read_source(['0xA4G4\t0x4E2D\t#bad'])


def test_select_mappings():
    """
    Single-byte and Private Use Area entries are dropped, and a character
    reachable from two codes keeps its ideograph-block code if it has
    one (U+5341 is 0xA451, not 0xA2CC), otherwise the lower code.
    """
    selected = select_mappings(read_source(CP950_SAMPLE.splitlines()))
    assert selected == [
        (0xA140, 0x3000),
        (0xA2A4, 0x2550),
        (0xA451, 0x5341),
        (0xA4A4, 0x4E2D),
        (0xA4E5, 0x6587),
    ]


def test_rendered_module_decodes():
    selected = select_mappings(read_source(CP950_SAMPLE.splitlines()))
    namespace = {}
    exec(render_module(selected), namespace)
    assert namespace['BIG5_COUNT'] == 5

    table = Big5Table.from_blob(namespace['BIG5_DATA'], namespace['BIG5_COUNT'])
    assert dict(table.forward) == {'　': 'A140', '═': 'A2A4', '十': 'A451', '中': 'A4A4', '文': 'A4E5'}


def test_main_writes_module(tmp_path):
    source = tmp_path / 'CP950.TXT'
    source.write_text(CP950_SAMPLE, encoding='utf-8')
    output = tmp_path / 'big5_data.py'

    assert generate_big5_data.main([str(source), '-o', str(output)]) == 0
    text = output.read_text(encoding='utf-8')
    assert 'BIG5_COUNT = 5' in text


def test_main_missing_input(tmp_path):
    assert generate_big5_data.main([str(tmp_path / 'missing.txt')]) == 1
