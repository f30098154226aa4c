import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("z", buf)
    assert buf.getvalue() == "z"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text_unchanged():
    buf = io.StringIO()
    put_str("hello world", buf)
    put_str("", buf)
    assert buf.getvalue() == "hello world"


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line" + "\n"


def test_put_endl_empty_is_just_newline():
    buf = io.StringIO()
    put_endl("", buf)
    assert buf.getvalue() == "\n"


@pytest.mark.parametrize("number", [0, 7, -7, 42, 2147483647, -2147483648])
def test_put_nbr_in_range_matches_decimal(number):
    buf = io.StringIO()
    put_nbr(number, buf)
    assert buf.getvalue() == str(number)


def test_put_nbr_wraps_to_32_bits():
    buf = io.StringIO()
    put_nbr(2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    put_str("out", None)
    put_nbr(-5)
    assert capsys.readouterr().out == "out" + str(-5)