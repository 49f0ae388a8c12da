import pytest

from big5_table import get_default_table
from resolver import (
    Resolution, ResolveStatus, clean_code_input, is_code, resolve,
)


# -----------------------------------------------------------
# Tests: Input cleaning
# -----------------------------------------------------------

def test_clean_keeps_hex_digits_uppercased():
    assert clean_code_input('a4a4') == 'A4A4'


def test_clean_drops_non_hex_and_truncates():
    assert clean_code_input('a4-x a4z9') == 'A4A4'
    assert clean_code_input('中文') == ''


def test_is_code():
    assert is_code('A4a4')
    assert not is_code('A4A')
    assert not is_code('A4A4A')
    assert not is_code('GGGG')


# -----------------------------------------------------------
# Tests: Resolution
# -----------------------------------------------------------

def test_short_code_is_incomplete():
    result = resolve('AC')
    assert result.status is ResolveStatus.INCOMPLETE
    assert result.char is None
    assert not result.found


@pytest.mark.parametrize('candidate', ['', 'A', 'A4A', 'A4A4A', 'ZZZZ', 'A4 4'])
def test_malformed_codes_are_incomplete(candidate):
    assert resolve(candidate).status is ResolveStatus.INCOMPLETE


def test_found_code():
    assert resolve('A4A4') == Resolution(ResolveStatus.FOUND, 'A4A4', '中')


def test_lowercase_code_is_normalized():
    result = resolve('a4e5')
    assert result.found
    assert result.code == 'A4E5'
    assert result.char == '文'


@pytest.mark.parametrize('code', ['8140', 'FEFE', 'FFFF', '0041'])
def test_absent_code_is_not_found(code):
    """
    Well-formed codes outside the table are NOT_FOUND, never INCOMPLETE.
    """
    result = resolve(code)
    assert result.status is ResolveStatus.NOT_FOUND
    assert result.char is None


def test_custom_table(small_table):
    assert resolve('a140', small_table).char == '　'
    assert resolve('A4A5', small_table).status is ResolveStatus.NOT_FOUND


def test_round_trip_every_character():
    table = get_default_table()
    for char, code in table.forward.items():
        result = resolve(code, table)
        assert result.found
        assert result.char == char


@pytest.mark.parametrize('code, char', [('A451', '十'), ('A4CA', '卅')])
def test_standard_codes_for_hangzhou_numeral_characters(code, char):
    result = resolve(code)
    assert result.found
    assert result.char == char
