"""String helpers: searching, comparing, bounded copies, slicing and splitting."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]


def _as_char(c: CharLike) -> str:
    """Return a one-character string for a character or an integer code.

    Integer codes keep only their low 8 bits.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def _require_str(name: str, value) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    char = _as_char(c)
    if char == "\0":
        return len(s)
    index = s.find(char)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    char = _as_char(c)
    if char == "\0":
        return len(s)
    index = s.rfind(char)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first mismatch, or 0 when the compared
    parts are equal. A string that ends early compares as if followed by NUL.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` within the first ``length`` characters.

    An empty needle is found at 0. A match must lie wholly inside the limit.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters (empty when
    ``size`` is 0), and the full length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``size`` is 0 or smaller than ``len(dst)``, ``dst`` is left as it is
    and the returned length is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0 or size < len(dst):
        return dst, len(src) + size
    room = max(0, size - 1 - len(dst))
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end yields the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of two strings."""
    return _require_str("s1", s1) + _require_str("s2", s2)


def strtrim(s: str, charset: Optional[str]) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``.

    With no charset the string is returned unchanged.
    """
    _require_str("s", s)
    if charset is None:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the separator character, dropping empty pieces."""
    _require_str("s", s)
    char = _as_char(sep)
    return [word for word in s.split(char) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character."""
    _require_str("s", s)
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(buffer: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, item)`` on every item of a mutable buffer, in place.

    When ``f`` returns something other than None, that value replaces the item.
    """
    for index, item in enumerate(buffer):
        result = f(index, item)
        if result is not None:
            buffer[index] = result