"""Natural sort key rewriting.

Responsibilities:
- Rewrite strings so that lexicographic order matches natural numeric order.
- Zero-pad every ASCII digit run to a fixed width, leaving other text intact.

Key public functions:
- `to_natural`: return the naturalized form of one string.
- `iter_spans`: split a string into alternating literal and digit spans.
- `natural_sorted`: order strings by their naturalized form.

Only the ten ASCII digits `0`-`9` start a digit run. Unicode numerals and
signs are copied as ordinary text, and `.` separates two independent runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from loguru import logger

from .errors import NaturalizeError


PAD_WIDTH = 10
_PAD_CHARACTER = "0"
_ASCII_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class TextSpan:
    """One maximal literal or digit segment of an input string.

    Attributes:
        text: Exact characters of the segment, never empty.
        is_digit_run: Whether the segment consists of ASCII digits only.
    """

    text: str
    is_digit_run: bool


def is_ascii_digit(character: str) -> bool:
    """Return whether `character` is one of the ASCII decimal digits `0`-`9`."""

    return character in _ASCII_DIGITS


def _require_text(value: object) -> str:
    """Return `value` unchanged when it is a string, otherwise raise."""

    if isinstance(value, str):
        return value
    hint = None
    if isinstance(value, (bytes, bytearray)):
        hint = "Decode bytes to `str` before naturalizing."
    raise NaturalizeError(
        detail=f"Expected a string, got `{type(value).__name__}`.",
        hint=hint,
    )


def iter_spans(value: str) -> Iterator[TextSpan]:
    """Yield the alternating literal and digit spans of `value` in order.

    Args:
        value: Text to scan.

    Yields:
        Non-empty spans whose concatenated text equals `value`. Adjacent spans
        always differ in `is_digit_run`.

    Raises:
        NaturalizeError: If `value` is not a string.
    """

    text = _require_text(value)
    length = len(text)
    start = 0
    while start < length:
        digit_run = is_ascii_digit(text[start])
        end = start + 1
        while end < length and is_ascii_digit(text[end]) is digit_run:
            end += 1
        yield TextSpan(text=text[start:end], is_digit_run=digit_run)
        start = end


def pad_digit_run(run: str) -> str:
    """Left-pad one digit run with zeros to `PAD_WIDTH` characters.

    Runs that are already `PAD_WIDTH` characters or longer are returned
    unchanged; they are never truncated.

    Raises:
        NaturalizeError: If `run` is empty or contains a non-ASCII-digit.
    """

    if not run or not all(is_ascii_digit(character) for character in run):
        raise NaturalizeError(
            detail=f"Digit run must be a non-empty string of ASCII digits, got {run!r}.",
        )
    return run.rjust(PAD_WIDTH, _PAD_CHARACTER)


def to_natural(value: str) -> str:
    """Convert a string to a convenient view for natural sorting.

    The output may be stored, e.g. in a database column, and ordered by
    plain lexicographic comparison.

    Example:
        >>> to_natural("abc123def")
        'abc0000000123def'
        >>> to_natural("IP = 172.29.21.151")
        'IP = 0000000172.0000000029.0000000021.0000000151'

    Raises:
        NaturalizeError: If `value` is not a string. Every string succeeds.
    """

    parts: list[str] = []
    for span in iter_spans(value):
        if span.is_digit_run:
            parts.append(pad_digit_run(span.text))
        else:
            parts.append(span.text)
    return "".join(parts)


def natural_key(value: str) -> str:
    """Return the natural sort key of `value`, for use as a `key=` callable."""

    return to_natural(value)


def natural_sorted(values: Iterable[str], *, reverse: bool = False) -> list[str]:
    """Return a new list of `values` ordered by their naturalized form.

    The sort is stable: strings with equal keys keep their input order.

    >>> natural_sorted(["item10", "item9", "item1"])
    ['item1', 'item9', 'item10']
    """

    items = list(values)
    logger.debug("natural_sorted count={} reverse={}", len(items), reverse)
    return sorted(items, key=natural_key, reverse=reverse)
