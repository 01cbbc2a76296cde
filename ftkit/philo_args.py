"""Validation and parsing of the philosophers simulation arguments."""

from __future__ import annotations

from typing import Sequence, Tuple

INT_MAX = 2147483647

_WHITESPACE = frozenset(" \t\n\v\f\r")


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _check_characters(arg: str) -> None:
    for index, char in enumerate(arg):
        following = arg[index + 1] if index + 1 < len(arg) else ""
        if char == "+" and not _is_digit(following):
            raise ArgumentError("a + walking alone in arg")
        if char == "-":
            raise ArgumentError("negative arg are not allowed")
        if not _is_digit(char) and char not in " +":
            raise ArgumentError("sorry but this arg is not allowed")


def _is_only_space(arg: str) -> bool:
    # Leading spaces followed by fewer than two characters are rejected.
    leading = len(arg) - len(arg.lstrip(" "))
    return leading > 0 and len(arg) - leading < 2


def parse_int(text: str) -> int:
    """Parse a leading non-negative decimal integer.

    Leading whitespace and one '+' are skipped; digits are read until the first
    non-digit. A value above the 32-bit signed maximum raises ArgumentError.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    if pos < length and text[pos] == "+":
        pos += 1
    value = 0
    while pos < length and _is_digit(text[pos]):
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    if value > INT_MAX:
        raise ArgumentError("> Int-max DETECTE")
    return value


def check_arguments(args: Sequence[str]) -> Tuple[int, ...]:
    """Validate the arguments (program name excluded) and return them as integers.

    Expects four or five arguments: number of philosophers, time to die, time
    to eat, time to sleep and, optionally, the number of meals.
    """
    if len(args) not in (4, 5):
        raise ArgumentError("bad numbers of arguments")
    for arg in args:
        _check_characters(arg)
    if any(_is_only_space(arg) for arg in args):
        raise ArgumentError("i want a number, not a space")
    if any(arg == "" for arg in args):
        raise ArgumentError("empty arg")
    values = tuple(parse_int(arg) for arg in args)
    if 0 in values:
        raise ArgumentError("0 is not allowed in this program")
    return values