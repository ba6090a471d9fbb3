import pytest

from pvlscan.core.errors import EofError
from pvlscan.scanning.cursor import PvlCursor


def test_char_probes_past_end_signal_eof():
    """
    EOF TEST: Any probe beyond the buffer raises EofError instead of
    returning garbage.
    """
    cursor = PvlCursor("ab")
    assert cursor.char_at(1) == "b"
    with pytest.raises(EofError):
        cursor.char_at(2)
    with pytest.raises(EofError):
        cursor.char_at(-1)
    cursor.jump(1)
    with pytest.raises(EofError):
        cursor.peek_char()
    with pytest.raises(EofError):
        cursor.char_at_offset(5)


def test_advance_never_leaves_the_buffer():
    cursor = PvlCursor("ab")
    assert cursor.advance() == "b"
    with pytest.raises(EofError):
        cursor.advance()
    assert cursor.pos == cursor.length == 2
    assert cursor.is_eof()

    with pytest.raises(EofError):
        cursor.advance()
    assert cursor.pos == 2


def test_jump_clamps_to_end_of_input():
    cursor = PvlCursor("abc")
    cursor.jump(10)
    assert cursor.pos == 3
    with pytest.raises(EofError):
        cursor.jump(1)


@pytest.mark.parametrize("text, pos, expected", [
    ("a\nb", 0, True),
    ("a\nb", 1, False),
    ("a\nb", 2, True),
    ("a\rb", 2, True),
    ("a\r\nb", 2, True),
    ("a\r\nb", 3, True),
    ("ab", 2, False),
])
def test_line_start_detection(text, pos, expected):
    cursor = PvlCursor(text)
    cursor.jump(pos)
    assert cursor.is_at_line_start() is expected


def test_crlf_middle_is_reported():
    cursor = PvlCursor("a\r\nb")
    cursor.jump(2)
    assert cursor.is_at_crlf_middle()
    cursor.jump(1)
    assert not cursor.is_at_crlf_middle()


def test_bytes_are_decoded_one_char_per_byte():
    cursor = PvlCursor(b"TEMP = 25\xb0")
    assert cursor.length == 10
    assert cursor.char_at(9) == "\xb0"


def test_remaining_and_line_numbers():
    cursor = PvlCursor("A = 1\nB = 2\n")
    assert cursor.remaining(3) == "A ="
    assert cursor.line_no() == 1
    cursor.jump(6)
    assert cursor.line_no() == 2
    assert cursor.remaining(100) == "B = 2\n"


@pytest.mark.parametrize("text, pos, expected", [
    ("A\rB\rC", 2, 2),
    ("A\rB\rC", 4, 3),
    ("A\r\nB", 2, 1),
    ("A\r\nB", 3, 2),
    ("A\n\nB", 3, 3),
])
def test_line_numbers_count_cr_lf_and_crlf(text, pos, expected):
    cursor = PvlCursor(text)
    cursor.jump(pos)
    assert cursor.line_no() == expected
