from unittest.mock import MagicMock, patch

import pytest
import requests

from big5_table import Big5Table
from reference_table import (
    FETCH_TIMEOUT, REFERENCE_URL, ReferenceTableError, ReferenceTableLoader, TableDiff,
    compare_tables, fetch_reference_table, missing_preview,
    parse_reference_table,
)


SAMPLE = """\
# CP950 Unicode to Big5 table
# Unicode\tBig5

0x0041\t0x41
0x3000\t0xA140
0x4E2D\t0xA4A4\t# CJK
0x6587 0xA4E5
garbage line
0xZZZZ\t0xA4A5
"""


def make_response(body: bytes, status_code: int = 200, reason: str = 'OK'):
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = REFERENCE_URL
    response._content = body
    return response


# -----------------------------------------------------------
# Tests: Parsing
# -----------------------------------------------------------

def test_parse_reference_table():
    mapping = parse_reference_table(SAMPLE)
    assert mapping == {'　': 'A140', '中': 'A4A4', '文': 'A4E5'}


def test_parse_skips_single_byte_codes():
    assert 'A' not in parse_reference_table(SAMPLE)


def test_parse_empty_text():
    assert parse_reference_table('') == {}


# -----------------------------------------------------------
# Tests: Comparison
# -----------------------------------------------------------

def test_compare_identical():
    table = Big5Table({'中': 'A4A4'})
    diff = compare_tables({'中': 'A4A4'}, table)
    assert diff.identical
    assert 'matches' in diff.summary()


def test_compare_reports_differences():
    table = Big5Table({'中': 'A4A4', '文': 'FFFF', 'x': '1234'})
    reference = {'中': 'A4A4', '文': 'A4E5', '　': 'A140'}
    diff = compare_tables(reference, table)
    assert diff.missing == {'　': 'A140'}
    assert diff.extra == {'x': '1234'}
    assert diff.mismatched == {'文': ('A4E5', 'FFFF')}
    assert diff.summary() == '1 missing, 1 extra, 1 mismatched'
    assert missing_preview(diff) == ['A140(　)']


def test_empty_diff_preview():
    assert missing_preview(TableDiff()) == []


# -----------------------------------------------------------
# Tests: Fetching
# -----------------------------------------------------------

def test_fetch_returns_text():
    with patch('reference_table.requests.get',
               return_value=make_response(SAMPLE.encode('utf-8'))) as get:
        assert fetch_reference_table() == SAMPLE
    assert get.call_args[0][0] == REFERENCE_URL
    assert get.call_args[1]['timeout'] == FETCH_TIMEOUT


def test_fetch_http_error():
    with patch('reference_table.requests.get', return_value=make_response(b'', 404, 'Not Found')):
        with pytest.raises(ReferenceTableError, match='404 Not Found'):
            fetch_reference_table()


def test_fetch_connection_error():
    error = requests.ConnectionError('Name or service not known')
    with patch('reference_table.requests.get', side_effect=error):
        with pytest.raises(ReferenceTableError, match='Connection failed'):
            fetch_reference_table()


def test_fetch_timeout():
    with patch('reference_table.requests.get', side_effect=requests.Timeout()):
        with pytest.raises(ReferenceTableError, match='Timed out'):
            fetch_reference_table()


def test_fetch_other_request_error():
    with patch('reference_table.requests.get',
               side_effect=requests.TooManyRedirects('Exceeded 30 redirects')):
        with pytest.raises(ReferenceTableError, match='redirects'):
            fetch_reference_table()


def test_fetch_non_utf8_body():
    with patch('reference_table.requests.get', return_value=make_response(b'\xff\xfe\xfa')):
        with pytest.raises(ReferenceTableError, match='UTF-8'):
            fetch_reference_table()


# -----------------------------------------------------------
# Tests: Background loader
# -----------------------------------------------------------

def test_loader_reports_mapping():
    loader = ReferenceTableLoader()
    loader.on_loaded = MagicMock()
    loader.on_error = MagicMock()
    with patch('reference_table.fetch_reference_table', return_value=SAMPLE):
        assert loader.start()
        loader.join(5)
    loader.on_loaded.assert_called_once_with({'　': 'A140', '中': 'A4A4', '文': 'A4E5'})
    loader.on_error.assert_not_called()
    assert not loader.running


def test_loader_reports_error():
    loader = ReferenceTableLoader()
    loader.on_loaded = MagicMock()
    loader.on_error = MagicMock()
    with patch('reference_table.fetch_reference_table',
               side_effect=ReferenceTableError('Failed to fetch table: boom')):
        loader.start()
        loader.join(5)
    loader.on_error.assert_called_once_with('Failed to fetch table: boom')
    loader.on_loaded.assert_not_called()
