import io

import pytest

from ftprintf.convert import format_hex, format_signed
from ftprintf.printer import Conversion, convert, ft_printf, render


def test_conversion_lookup_by_specifier():
    assert Conversion("X") is Conversion.HEX_UPPER
    assert Conversion("%").takes_argument is False
    assert Conversion("d").takes_argument is True


def test_convert_decimal_consumes_argument():
    args = iter([42, 7])
    assert convert("d", args) == "42"
    assert next(args) == 7


def test_convert_percent_consumes_nothing():
    args = iter([1])
    assert convert("%", args) == "%"
    assert next(args) == 1


def test_convert_unknown_spec_is_empty_and_consumes_nothing():
    args = iter([1])
    assert convert("z", args) == ""
    assert next(args) == 1


def test_convert_missing_argument():
    with pytest.raises(TypeError):
        convert("s", iter([]))


def test_render_plain_text():
    assert render("hello") == "hello"


def test_render_string():
    assert render("%s", "world") == "world"
    assert render("%s", None) == "(null)"


def test_render_decimal_between_text():
    assert render("a%db", 5) == "a5b"


def test_render_signed_values():
    assert render("%d|%i", -7, 7).split("|") == [str(-7), str(7)]
    assert render("%d", -2147483648) == "-2147483648"


def test_render_unsigned_wraps():
    assert render("%u", -1) == str(2**32 - 1)


def test_render_hex_pair():
    lower, upper = render("%x|%X", 255, 255).split("|")
    assert upper == lower.upper()
    assert int(lower, 16) == 255


def test_render_pointer():
    assert render("%p", 0) == "(nil)"
    assert render("%p", None) == "(nil)"
    assert render("%p", 255) == "0x" + format_hex(255, "x")


def test_render_char():
    assert render("%c", 65) == chr(65)
    assert render("%c", "z") == "z"
    assert render("%c", 256 + 65) == chr(65)


def test_render_percent_escape():
    assert render("100%%") == "100%"


def test_render_unknown_specifier_dropped():
    assert render("%q") == ""


def test_render_trailing_percent_dropped():
    assert render("abc%") == "abc"


def test_render_too_few_arguments():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_render_extra_arguments_ignored():
    assert render("%d", 3, 4) == format_signed(3)


def test_ft_printf_writes_to_stream_and_counts():
    stream = io.StringIO()
    count = ft_printf("%s=%d (%x)", "value", -12, 3000, stream=stream)
    written = stream.getvalue()
    assert written == render("%s=%d (%x)", "value", -12, 3000)
    assert count == len(written)


def test_ft_printf_defaults_to_stdout(capsys):
    count = ft_printf("%s", "hi")
    captured = capsys.readouterr().out
    assert captured == "hi"
    assert count == len(captured)