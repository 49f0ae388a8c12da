import base64

import pytest

from conftest import pack
from big5_data import BIG5_COUNT
from big5_table import (
    RECORD_SIZE, Big5Table, TableError, TableRecord, build_reverse,
    decode_table, format_code, get_default_table, iter_records,
)


# -----------------------------------------------------------
# Tests: Record decoding
# -----------------------------------------------------------

def test_iter_records_reads_big_endian_fields():
    records = list(iter_records(pack((0x4E2D, 0xA4A4), (0x20000, 0x0041)), 2))
    assert records == [TableRecord(0x4E2D, 0xA4A4), TableRecord(0x20000, 0x0041)]
    assert records[0].char == '中'
    assert records[0].code == 'A4A4'


def test_code_is_zero_padded_uppercase():
    assert format_code(0x41) == '0041'
    assert format_code(0xa4e5) == 'A4E5'


def test_supplementary_codepoint_is_one_character():
    forward = decode_table(pack((0x20000, 0x8840)), 1)
    assert forward == {'\U00020000': '8840'}
    assert len(next(iter(forward))) == 1


def test_zero_records_gives_empty_map():
    assert decode_table('', 0) == {}


def test_trailing_bytes_beyond_count_are_ignored():
    forward = decode_table(pack((0x4E2D, 0xA4A4), (0x6587, 0xA4E5)), 1)
    assert forward == {'中': 'A4A4'}


# -----------------------------------------------------------
# Tests: Malformed assets
# -----------------------------------------------------------

def test_invalid_base64_raises():
    with pytest.raises(TableError):
        decode_table('not base64!!', 1)


def test_short_blob_raises():
    data = pack((0x4E2D, 0xA4A4))
    with pytest.raises(TableError, match='too short'):
        decode_table(data, 2)


def test_negative_count_raises():
    with pytest.raises(TableError):
        decode_table('', -1)


@pytest.mark.parametrize('codepoint', [0xD800, 0xDFFF, 0x110000, 0xFFFFFF])
def test_non_scalar_codepoint_raises(codepoint):
    with pytest.raises(TableError, match='scalar'):
        decode_table(pack((codepoint, 0xA140)), 1)


def test_table_error_is_value_error():
    assert issubclass(TableError, ValueError)


# -----------------------------------------------------------
# Tests: Reverse map
# -----------------------------------------------------------

def test_build_reverse_inverts():
    assert build_reverse({'中': 'A4A4', '文': 'A4E5'}) == {'A4A4': '中', 'A4E5': '文'}


def test_build_reverse_last_write_wins():
    """
    A code shared by two characters resolves to the one inserted last.
    """
    assert build_reverse({'a': '1234', 'b': '1234'}) == {'1234': 'b'}


def test_table_derives_reverse(small_table):
    assert small_table.char_for('A4A4') == '中'
    assert small_table.char_for('a4e5') == '文'
    assert small_table.char_for('FFFF') is None
    assert small_table.lookup('中') == 'A4A4'
    assert small_table.lookup('x') is None
    assert '文' in small_table
    assert len(small_table) == 3


def test_table_reverse_defaults_to_none():
    assert Big5Table.__dataclass_fields__['reverse'].default is None
    assert dict(Big5Table({'中': 'A4A4'}).reverse) == {'A4A4': '中'}


def test_table_keeps_explicit_reverse():
    table = Big5Table({'中': 'A4A4'}, {'A4A4': '中', 'A4E5': '文'})
    assert table.char_for('A4E5') == '文'


def test_table_maps_are_read_only(small_table):
    with pytest.raises(TypeError):
        small_table.forward['x'] = '0000'
    with pytest.raises(TypeError):
        small_table.reverse['0000'] = 'x'


def test_table_copies_its_input():
    source = {'中': 'A4A4'}
    table = Big5Table(source)
    source['文'] = 'A4E5'
    assert '文' not in table


def test_rebuilding_gives_same_maps():
    data = pack((0x4E2D, 0xA4A4), (0x6587, 0xA4E5))
    first = Big5Table.from_blob(data, 2)
    second = Big5Table.from_blob(data, 2)
    assert dict(first.forward) == dict(second.forward)
    assert dict(first.reverse) == dict(second.reverse)


# -----------------------------------------------------------
# Tests: Embedded table
# -----------------------------------------------------------

def test_default_table_is_shared():
    assert get_default_table() is get_default_table()


def test_embedded_blob_length_matches_count():
    from big5_data import BIG5_DATA
    assert len(base64.b64decode(BIG5_DATA, validate=True)) == BIG5_COUNT * RECORD_SIZE


def test_default_table_size():
    table = get_default_table()
    assert len(table.forward) == BIG5_COUNT


def test_known_characters():
    table = get_default_table()
    assert table.lookup('中') == 'A4A4'
    assert table.lookup('文') == 'A4E5'
    assert table.lookup('　') == 'A140'
    assert table.lookup('A') is None


def test_embedded_codes_are_unique():
    """
    No two characters in the embedded table share a Big5 code, so the
    reverse map loses nothing.
    """
    table = get_default_table()
    assert len(table.reverse) == len(table.forward)


def test_embedded_codes_are_four_hex_digits():
    for code in get_default_table().forward.values():
        assert len(code) == 4
        assert code == code.upper()
        int(code, 16)


def test_round_trip_every_character():
    table = get_default_table()
    for char, code in table.forward.items():
        assert table.char_for(code) == char


@pytest.mark.parametrize('char, code', [('十', 'A451'), ('卅', 'A4CA'), ('兀', 'A461')])
def test_characters_with_two_codes_use_ideograph_code(char, code):
    """
    十 and 卅 also appear among the Hangzhou numerals (A2CC, A2CE); the
    table must give the code CP950 encodes them as.
    """
    table = get_default_table()
    assert table.lookup(char) == code
    assert table.char_for(code) == char


def test_embedded_table_matches_cp950_codec():
    for char, code in get_default_table().forward.items():
        assert char.encode('cp950').hex().upper() == code, char
