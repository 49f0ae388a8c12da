import pytest

from big5_table import Big5Table, get_default_table
from transcoder import (
    PLACEHOLDER, SEPARATOR, CodeEntry, encode_lines, format_entry,
    format_lines, split_lines, transcode,
)


# -----------------------------------------------------------
# Tests: Line splitting
# -----------------------------------------------------------

def test_empty_text_has_no_lines():
    assert split_lines('') == []


def test_single_newline_is_two_blank_lines():
    assert split_lines('\n') == ['', '']


def test_lines_split_on_newline():
    assert split_lines('中\n文') == ['中', '文']


# -----------------------------------------------------------
# Tests: Forward transcoding
# -----------------------------------------------------------

def test_empty_input_gives_empty_output():
    assert transcode('') == ''
    assert transcode('', annotate=True) == ''


def test_single_character():
    assert transcode('中') == 'A4A4'


def test_codes_joined_with_star():
    assert SEPARATOR == '★'
    assert transcode('中文') == 'A4A4★A4E5'


def test_two_lines_have_no_stray_separators():
    """
    Each one-character line becomes exactly one code; the star never
    appears at a line boundary.
    """
    output = transcode('中\n文')
    assert output == 'A4A4\nA4E5'
    segments = output.split('\n')
    assert len(segments) == 2
    assert all(SEPARATOR not in segment for segment in segments)


def test_blank_lines_are_kept():
    assert transcode('中\n\n文') == 'A4A4\n\nA4E5'


def test_annotation_wraps_character():
    plain = transcode('中')
    assert transcode('中', annotate=True) == f'{plain}(中)'


def test_annotation_on_unmapped_character():
    assert transcode('A', annotate=True) == '????(A)'


def test_unmapped_character_uses_placeholder():
    assert transcode('中A文') == f'A4A4{SEPARATOR}{PLACEHOLDER}{SEPARATOR}A4E5'


@pytest.mark.parametrize('text', ['中😀文', 'abc\n中', '\U00020000', 'x\n\ny'])
def test_entry_count_matches_character_count(text):
    output = transcode(text)
    for line, out_line in zip(text.split('\n'), output.split('\n')):
        entries = out_line.split(SEPARATOR) if out_line else []
        assert len(entries) == len(line)


def test_supplementary_character_is_one_entry():
    lines = encode_lines('😀')
    assert len(lines) == 1
    assert lines[0] == [CodeEntry('😀', None)]
    assert transcode('😀') == PLACEHOLDER


def test_every_table_character_has_its_code():
    table = get_default_table()
    for char, code in table.forward.items():
        assert transcode(char, table=table) == code


def test_custom_table():
    table = Big5Table({'x': '1234'})
    assert transcode('xy', table=table) == '1234★????'


# -----------------------------------------------------------
# Tests: Entries and formatting
# -----------------------------------------------------------

def test_code_entry_tags_miss():
    assert CodeEntry('中', 'A4A4').mapped
    assert not CodeEntry('A').mapped
    assert CodeEntry('A').display_code == PLACEHOLDER


def test_format_entry():
    entry = CodeEntry('中', 'A4A4')
    assert format_entry(entry) == 'A4A4'
    assert format_entry(entry, annotate=True) == 'A4A4(中)'


def test_format_lines_from_encoded_lines(small_table):
    lines = encode_lines('中文\n　', small_table)
    assert format_lines(lines) == 'A4A4★A4E5\nA140'
    assert format_lines([]) == ''
