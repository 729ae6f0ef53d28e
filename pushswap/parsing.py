"""Reading and validating the integers handed to the program."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_WHITESPACE = " \t\n\v\f\r"
_LONG_MAX = 2**63 - 1
_INT_SPAN = 2**32
_INT_MIN = -(2**31)


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _to_int32(value: int) -> int:
    return (value - _INT_MIN) % _INT_SPAN + _INT_MIN


def atoi(text: str) -> int:
    """Convert leading decimal text to a 32-bit signed integer.

    Leading whitespace and one sign are skipped, and conversion stops at the
    first non-digit. A magnitude beyond the 64-bit range yields -1 for a
    positive number and 0 for a negative one; the result wraps to 32 bits.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1

    result = 0
    for char in text[position:]:
        if not _is_digit(char):
            break
        candidate = result * 10 + (ord(char) - ord("0"))
        if candidate > _LONG_MAX:
            result = -1 if sign == 1 else 0
            break
        result = candidate
    return _to_int32(result * sign)


def has_valid_characters(text: str) -> bool:
    """Return True when the text holds only decimal digits and minus signs."""
    return all(_is_digit(char) or char == "-" for char in text)


def is_canonical(text: str) -> bool:
    """Return True when the text is a prefix of its own converted value.

    This rejects leading zeros, plus signs and values that do not fit in a
    32-bit integer.
    """
    return str(atoi(text)).startswith(text)


def split_words(text: str) -> list[str]:
    """Split text on spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def parse_values(tokens: Iterable[str]) -> list[int]:
    """Convert each token to an integer, rejecting bad or repeated values."""
    values = []
    for token in tokens:
        if not has_valid_characters(token) or not is_canonical(token):
            raise InputError()
        values.append(atoi(token))
    if len(set(values)) != len(values):
        raise InputError()
    return values


def read_arguments(args: Sequence[str]) -> list[int]:
    """Read the values from command-line arguments (program name excluded).

    When the first argument contains a space, only that argument is read and
    it is split into words; otherwise every argument is one value.
    """
    if not args:
        return []
    first = args[0]
    if " " in first:
        return parse_values(split_words(first))
    return parse_values(args)