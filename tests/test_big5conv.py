import io
from unittest.mock import patch

import pytest

import big5conv
from reference_table import ReferenceTableError


SAMPLE = "0x4E2D\t0xA4A4\n0x6587\t0xA4E5\n"


# -----------------------------------------------------------
# Tests: Forward conversion
# -----------------------------------------------------------

def test_convert_argument(capsys):
    assert big5conv.main(['中文']) == 0
    assert capsys.readouterr().out == 'A4A4★A4E5\n'


def test_convert_annotated(capsys):
    assert big5conv.main(['-a', '中']) == 0
    assert capsys.readouterr().out == 'A4A4(中)\n'


def test_convert_stdin(capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO('中\n文\n'))
    assert big5conv.main(['--stdin']) == 0
    assert capsys.readouterr().out == 'A4A4\nA4E5\n'


def test_convert_empty_stdin(capsys, monkeypatch):
    monkeypatch.setattr('sys.stdin', io.StringIO(''))
    assert big5conv.main(['--stdin']) == 0
    assert capsys.readouterr().out == '\n'


# -----------------------------------------------------------
# Tests: Reverse lookup
# -----------------------------------------------------------

def test_reverse_found(capsys):
    assert big5conv.main(['-r', 'a4a4']) == 0
    assert capsys.readouterr().out == '中\n'


def test_reverse_incomplete(capsys):
    assert big5conv.main(['-r', 'AC']) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'incomplete' in captured.err


def test_reverse_not_found(capsys):
    assert big5conv.main(['-r', '8140']) == 1
    assert '8140: not found' in capsys.readouterr().err


# -----------------------------------------------------------
# Tests: Verification
# -----------------------------------------------------------

def test_verify_prints_summary(capsys):
    with patch('big5conv.fetch_reference_table', return_value=SAMPLE):
        assert big5conv.main(['--verify']) == 0
    out = capsys.readouterr().out
    assert 'Reference: 2 characters' in out
    assert 'extra' in out


def test_verify_fetch_failure(capsys):
    with patch('big5conv.fetch_reference_table',
               side_effect=ReferenceTableError('Failed to fetch table: boom')):
        assert big5conv.main(['--verify']) == 1
    assert 'boom' in capsys.readouterr().err


# -----------------------------------------------------------
# Tests: Startup
# -----------------------------------------------------------

def test_corrupt_table_exits_with_status_2(capsys):
    with patch('big5conv.get_default_table',
               side_effect=big5conv.TableError('Table blob too short')):
        assert big5conv.main(['中']) == 2
    assert 'corrupt' in capsys.readouterr().err


def test_no_arguments_launches_gui():
    with patch('big5conv.run_gui', return_value=0) as run_gui:
        assert big5conv.main([]) == 0
    run_gui.assert_called_once()


def test_parser_defaults():
    args = big5conv.build_parser().parse_args([])
    assert args.text is None
    assert not args.annotate
    assert args.reverse is None
