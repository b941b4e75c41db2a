from __future__ import annotations

import re

from ledger_grammar.parsers.base import Date
from ledger_grammar.parsers.combinators import (
    Cursor,
    Failure,
    Result,
    Success,
    char,
    choice,
    mapped,
    pattern,
    sequence,
)


WHITESPACE_RE = re.compile(r"[ \t]+")
DIGIT_RE = re.compile(r"[0-9]")
YEAR_RE = re.compile(r"[0-9]+")


def line_number(cursor: Cursor) -> Result[int]:
    """Current 1-based line number; consumes nothing."""
    return Success(cursor.line, cursor)


whitespace = pattern(WHITESPACE_RE, "whitespace")

digit = pattern(DIGIT_RE, "digit")

line_ending = mapped(
    choice(
        pattern(r"\r\n", "line ending"),
        char("\n", "line ending"),
    ),
    lambda _: "\n",
)


def two_digits_to_int(digits: tuple[str, str]) -> int:
    tens, ones = digits
    return int(tens) * 10 + int(ones)


def two_digits(cursor: Cursor) -> Result[int]:
    """Exactly two digits, e.g. ``09`` -> 9."""
    return mapped(sequence(digit, digit), two_digits_to_int)(cursor)


_year_digits = pattern(YEAR_RE, "year")


def year(cursor: Cursor) -> Result[int]:
    """Any number of digits; leading zeros are allowed."""
    result = _year_digits(cursor)
    if isinstance(result, Failure):
        return result
    try:
        value = int(result.value.lstrip("0") or "0")
    except ValueError:
        # Longer than the interpreter's int string conversion limit.
        return Failure(position=cursor.position, expected=("year",))
    return Success(value, result.cursor)


_date = mapped(
    sequence(year, char("-"), two_digits, char("-"), two_digits),
    lambda values: Date(year=values[0], month=values[2], day=values[4]),
)


def date(cursor: Cursor) -> Result[Date]:
    """Parse ``YYYY-MM-DD``.

    The year may have any number of digits. Month and day are two digits each
    and are not range-checked here; see ``parsers.validation`` for that.
    """
    return _date(cursor)

