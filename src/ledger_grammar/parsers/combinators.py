"""Cursor, results and the combinators every production is built from.

A parser is any callable taking a :class:`Cursor` and returning either a
:class:`Success` (value plus advanced cursor) or a :class:`Failure`
(position reached plus the labels that were expected there). Cursors are
immutable, so backtracking is simply reusing an earlier cursor.

A failure whose position lies past the cursor it started from has consumed
input. Such a failure is committed: ``choice``, ``optional``, ``many`` and
``sep_by`` propagate it instead of trying something else, which keeps the
reported position at the furthest point the input matched.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import re
from typing import Any, Generic, TypeVar, Union

from ledger_grammar.parsers.base import LedgerSyntaxError, Position


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Cursor:
    text: str
    offset: int = 0
    line: int = 1
    column: int = 1

    @property
    def position(self) -> Position:
        return Position(offset=self.offset, line=self.line, column=self.column)

    @property
    def remaining(self) -> str:
        return self.text[self.offset :]

    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def advance(self, count: int) -> Cursor:
        if count <= 0:
            return self
        consumed = self.text[self.offset : self.offset + count]
        newlines = consumed.count("\n")
        if newlines:
            line = self.line + newlines
            column = len(consumed) - consumed.rfind("\n")
        else:
            line = self.line
            column = self.column + len(consumed)
        return Cursor(text=self.text, offset=self.offset + len(consumed), line=line, column=column)


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T
    cursor: Cursor

    @property
    def remaining(self) -> str:
        return self.cursor.remaining


@dataclass(frozen=True, slots=True)
class Failure:
    position: Position
    expected: tuple[str, ...]

    def consumed_from(self, cursor: Cursor) -> bool:
        return self.position.offset > cursor.offset

    def merge(self, other: Failure) -> Failure:
        """Keep the furthest failure; at equal positions combine the labels."""
        if other.position.offset > self.position.offset:
            return other
        if other.position.offset < self.position.offset:
            return self
        labels = self.expected + tuple(label for label in other.expected if label not in self.expected)
        return Failure(position=self.position, expected=labels)


Result = Union[Success[T], Failure]
Parser = Callable[[Cursor], Result[T]]


def _fail(cursor: Cursor, label: str) -> Failure:
    return Failure(position=cursor.position, expected=(label,))


def char(expected: str, label: str | None = None) -> Parser[str]:
    """Match one literal character."""

    def parse_char(cursor: Cursor) -> Result[str]:
        if cursor.text.startswith(expected, cursor.offset):
            return Success(expected, cursor.advance(1))
        return _fail(cursor, label or f"'{expected}'")

    return parse_char


def pattern(regex: str | re.Pattern[str], label: str) -> Parser[str]:
    """Match a regular expression anchored at the cursor and yield the matched text.

    A pattern is all-or-nothing: when it does not match, nothing is consumed.
    """
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def parse_pattern(cursor: Cursor) -> Result[str]:
        match = compiled.match(cursor.text, cursor.offset)
        if match is None:
            return _fail(cursor, label)
        return Success(match.group(0), cursor.advance(match.end() - cursor.offset))

    return parse_pattern


def mapped(parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    def parse_mapped(cursor: Cursor) -> Result[U]:
        result = parser(cursor)
        if isinstance(result, Failure):
            return result
        return Success(fn(result.value), result.cursor)

    return parse_mapped


def sequence(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Run parsers one after another; the first failure aborts the sequence."""

    def parse_sequence(cursor: Cursor) -> Result[tuple[Any, ...]]:
        values: list[Any] = []
        current = cursor
        for parser in parsers:
            result = parser(current)
            if isinstance(result, Failure):
                return result
            values.append(result.value)
            current = result.cursor
        return Success(tuple(values), current)

    return parse_sequence


def skip(parser: Parser[T], skipped: Parser[Any]) -> Parser[T]:
    """Run ``parser`` then ``skipped``, keeping only the first value."""
    return mapped(sequence(parser, skipped), lambda values: values[0])


def choice(*alternatives: Parser[Any]) -> Parser[Any]:
    """Try alternatives in order from the same cursor.

    The next alternative is only tried when the previous one failed without
    consuming input. Non-consuming failures are merged so the diagnostic lists
    every label that would have been accepted.
    """

    def parse_choice(cursor: Cursor) -> Result[Any]:
        failure: Failure | None = None
        for alternative in alternatives:
            result = alternative(cursor)
            if isinstance(result, Success):
                return result
            if result.consumed_from(cursor):
                return result
            failure = result if failure is None else failure.merge(result)
        assert failure is not None, "choice() needs at least one alternative"
        return failure

    return parse_choice


def optional(parser: Parser[T]) -> Parser[T | None]:
    def parse_optional(cursor: Cursor) -> Result[T | None]:
        result = parser(cursor)
        if isinstance(result, Failure) and not result.consumed_from(cursor):
            return Success(None, cursor)
        return result

    return parse_optional


def many(parser: Parser[T]) -> Parser[list[T]]:
    def parse_many(cursor: Cursor) -> Result[list[T]]:
        values: list[T] = []
        current = cursor
        while True:
            result = parser(current)
            if isinstance(result, Failure):
                if result.consumed_from(current):
                    return result
                return Success(values, current)
            if result.cursor.offset == current.offset:
                # An empty match would repeat forever.
                return Success(values, current)
            values.append(result.value)
            current = result.cursor

    return parse_many


def sep_by(parser: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    """Zero or more ``parser`` matches separated by ``separator``.

    Once a separator has matched, the element after it is mandatory.
    """

    def parse_sep_by(cursor: Cursor) -> Result[list[T]]:
        first = parser(cursor)
        if isinstance(first, Failure):
            if first.consumed_from(cursor):
                return first
            return Success([], cursor)
        values = [first.value]
        current = first.cursor
        while True:
            sep = separator(current)
            if isinstance(sep, Failure):
                if sep.consumed_from(current):
                    return sep
                return Success(values, current)
            item = parser(sep.cursor)
            if isinstance(item, Failure):
                return item
            values.append(item.value)
            current = item.cursor

    return parse_sep_by


def sep_by1(parser: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    def parse_sep_by1(cursor: Cursor) -> Result[list[T]]:
        first = parser(cursor)
        if isinstance(first, Failure):
            return first
        rest = many(mapped(sequence(separator, parser), lambda values: values[1]))(first.cursor)
        if isinstance(rest, Failure):
            return rest
        return Success([first.value, *rest.value], rest.cursor)

    return parse_sep_by1


def end_of_input(cursor: Cursor) -> Result[None]:
    if cursor.at_end():
        return Success(None, cursor)
    return _fail(cursor, "end of input")


def run(parser: Parser[T], text: str) -> Result[T]:
    """Apply ``parser`` to the start of ``text``."""
    return parser(Cursor(text))


def parse(parser: Parser[T], text: str, *, complete: bool = False) -> tuple[T, str]:
    """Run ``parser`` and return ``(value, remaining_text)``.

    With ``complete=True`` the whole of ``text`` must be consumed. Raises
    :class:`LedgerSyntaxError` on failure.
    """
    if complete:
        parser = skip(parser, end_of_input)
    result = run(parser, text)
    if isinstance(result, Failure):
        raise LedgerSyntaxError(result.position, result.expected, source=text)
    return result.value, result.remaining
