import os

import pytest

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
QtWidgets = pytest.importorskip('PySide6.QtWidgets')


@pytest.fixture(scope='module')
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    from main_window import MainWindow
    win = MainWindow()
    yield win
    win.close()


# -----------------------------------------------------------
# Tests: Conversion panes
# -----------------------------------------------------------

def test_output_follows_input(window):
    window.input_edit.setPlainText('中\n文')
    assert window.output_edit.toPlainText() == 'A4A4\nA4E5'
    assert window.copy_btn.isEnabled()


def test_annotate_toggle(window):
    window.input_edit.setPlainText('中文')
    window.annotate_btn.setChecked(True)
    assert window.output_edit.toPlainText() == 'A4A4(中)★A4E5(文)'
    assert window.block_view.show_annotation


def test_block_mode_keeps_plain_text_output(window):
    window.input_edit.setPlainText('中A')
    window.block_btn.setChecked(True)
    assert window.output_stack.currentIndex() == 1
    assert window.output_text() == 'A4A4★????'
    assert len(window.block_view.block_positions(400)) == 2


def test_clear_empties_output(window):
    window.input_edit.setPlainText('中')
    window.clear_btn.click()
    assert window.output_edit.toPlainText() == ''
    assert not window.copy_btn.isEnabled()


def test_copy_shows_feedback(window):
    window.input_edit.setPlainText('中')
    window.copy_btn.click()
    assert window.copy_btn.text() == 'Copied!'
    assert window.copy_timer.isActive()
    window.copy_timer.timeout.emit()
    assert window.copy_btn.text() == 'Copy'


def test_copy_timer_is_owned_by_window(window):
    """
    The label reset timer is a child of the window, so deleting the
    window destroys it before it can touch the deleted button.
    """
    assert window.copy_timer.parent() is window
    assert window.copy_timer.isSingleShot()


# -----------------------------------------------------------
# Tests: Reverse lookup and status
# -----------------------------------------------------------

@pytest.mark.parametrize('typed, shown', [
    ('a4a4', '中'),
    ('ac', 'incomplete'),
    ('8140', 'not found'),
    ('', ''),
])
def test_reverse_lookup(window, typed, shown):
    window._lookup_code(typed)
    assert window.lookup_label.text() == shown


def test_lookup_input_is_cleaned(window):
    window._lookup_code('a4-a')
    assert window.code_input.text() == 'A4A'


def test_status_shows_count(window):
    assert window.status_bar.count_label.text() == '13,493 characters loaded'


def test_reference_result_in_status(window):
    window._on_reference_loaded(dict(window.table.forward))
    assert 'matches' in window.status_bar.message_label.text()
    window._on_reference_error('Failed to fetch table: boom')
    assert window.status_bar.message_label.text().startswith('ERROR')
