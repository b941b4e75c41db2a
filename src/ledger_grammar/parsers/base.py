from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True, slots=True)
class Position:
    offset: int
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Date:
    year: int
    month: int
    day: int

    def to_date(self) -> date:
        """Convert to ``datetime.date``; raises ``ValueError`` for impossible dates."""
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


class TransactionStatus(Enum):
    CLEARED = "*"
    UNCLEARED = "!"


@dataclass(frozen=True, slots=True)
class Symbol:
    value: str
    quoted: bool = False


class AmountFormat(Enum):
    SYMBOL_LEFT_NO_SPACE = "symbol_left_no_space"
    SYMBOL_LEFT_WITH_SPACE = "symbol_left_with_space"
    SYMBOL_RIGHT_NO_SPACE = "symbol_right_no_space"
    SYMBOL_RIGHT_WITH_SPACE = "symbol_right_with_space"

    @property
    def symbol_left(self) -> bool:
        return self in (AmountFormat.SYMBOL_LEFT_NO_SPACE, AmountFormat.SYMBOL_LEFT_WITH_SPACE)

    @property
    def spaced(self) -> bool:
        return self in (AmountFormat.SYMBOL_LEFT_WITH_SPACE, AmountFormat.SYMBOL_RIGHT_WITH_SPACE)


@dataclass(frozen=True, slots=True)
class Amount:
    value: str
    symbol: Symbol
    format: AmountFormat

    def to_decimal(self) -> Decimal:
        # Raises decimal.InvalidOperation for values like "1.2.3".
        return Decimal(self.value)


@dataclass(frozen=True, slots=True)
class Header:
    line_number: int
    date: Date
    status: TransactionStatus
    code: str | None
    payee: str
    comment: str | None = None


@dataclass(frozen=True, slots=True)
class Price:
    date: Date
    symbol: Symbol
    amount: Amount


PriceDatabase = list[Price]


class LedgerSyntaxError(Exception):
    """A failed parse, reported with its line, column and expectation."""

    def __init__(self, position: Position, expected: tuple[str, ...], source: str = "") -> None:
        self.position = position
        self.expected = expected
        self.source_line = _source_line(source, position)
        message = f"line {position.line}, column {position.column}: expected {describe_expected(expected)}"
        if self.source_line or source:
            message = f"{message}\n{self.source_line}\n{_caret_padding(self.source_line, position.column)}^"
        super().__init__(message)


def describe_expected(expected: tuple[str, ...]) -> str:
    if not expected:
        return "valid input"
    if len(expected) == 1:
        return expected[0]
    return f"{', '.join(expected[:-1])} or {expected[-1]}"


def _source_line(source: str, position: Position) -> str:
    if not source:
        return ""
    start = source.rfind("\n", 0, position.offset) + 1
    end = source.find("\n", position.offset)
    if end == -1:
        end = len(source)
    return source[start:end].rstrip("\r")


def _caret_padding(source_line: str, column: int) -> str:
    # Tabs in the source prefix stay tabs.
    prefix = source_line[: column - 1].ljust(column - 1)
    return "".join(ch if ch == "\t" else " " for ch in prefix)
