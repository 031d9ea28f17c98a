# ftprintf

A compact printf-style formatter with a fixed, minimal set of conversions.
It has no width, precision, padding or flag handling. A `%` is always
followed directly by one of the letters below.

## Conversions

| Spec       | Argument                         | Output                                                  |
|------------|----------------------------------|---------------------------------------------------------|
| `%c`       | one-character `str`, or an int   | the character; an int gives `chr` of its low 8 bits     |
| `%s`       | `str` or `None`                  | the string up to its first NUL, or `(null)` for `None`  |
| `%d`, `%i` | int                              | decimal, wrapped to a signed 32-bit value               |
| `%u`       | int                              | decimal, wrapped to an unsigned 32-bit value            |
| `%x`, `%X` | int                              | lower- or upper-case hex of the low 32 bits             |
| `%p`       | int or `None`                    | `0x` and lower-case hex of the low 32 bits, or `(nil)` for 0 or `None` |
| `%%`       | none                             | a literal `%`                                           |

Any other character after `%` produces no output and uses no argument.
A `%` at the very end of the format string ends the output.
When an argument is missing, `TypeError` is raised. A `%c` string that is
not exactly one character long raises `ValueError`.

## Usage

```python
from ftprintf.printer import render, ft_printf

text = render("%s has %d items (%x)", "box", 42, 255)
# "box has 42 items (ff)"

render("%d %u", -1, -1)
# "-1 4294967295"

count = ft_printf("value: %u\n", 7)   # writes to stdout, returns 9
```

`render(fmt, *args)` returns the formatted text.
`ft_printf(fmt, *args, stream=None)` writes that text to `stream` (standard
output when `stream` is `None`) and returns the number of characters written.

`convert(spec, args)` renders a single specifier character, taking its
argument from the iterator `args`. `Conversion` is the enum of the
understood specifiers; its `takes_argument` property is false only for
`Conversion.PERCENT`.

## Single-value helpers

`ftprintf.convert` holds the functions behind each conversion:

- `format_signed(n)`, `format_unsigned(n)`: 32-bit signed and unsigned decimal.
- `format_hex(num, spec)`: hex of the low 32 bits, upper-case when `spec` is `"X"`.
- `format_pointer(address)`: `"0x"` plus hex, or `"(nil)"` for 0.
- `format_text(s)`: the string up to its first NUL, or `"(null)"` for `None`.
- `hex_digit(value)`: the lower-case digit for 0–15, `"0"` otherwise.
- `to_upper(c)`: upper-cases a single ASCII letter and leaves other characters alone.
- `num_len(n)`: the number of decimal digits of `n`. Zero and any negative number count as 1.

Numeric arguments must be integers (anything usable as an index). Other
types raise `TypeError`.

## Running the tests

```
pip install -e .[test]
pytest
```