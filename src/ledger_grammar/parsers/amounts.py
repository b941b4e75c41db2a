"""Quantities, commodity symbols and the amounts built from them.

An amount is a quantity with its symbol on either side, with or without
whitespace between the two: ``$13,245.00``, ``$ 13,245.00``,
``13,245.463AAPL`` and ``13,245.463 "MUTF2351"``. Symbol-first is tried
before quantity-first. Unquoted symbols can never start with a digit or
``-`` and quantities always do, so for well-formed input at most one
ordering can match.

Quantities stay text: grouping commas are removed, everything else
(sign, decimal point, trailing zeros) is kept exactly as written.
"""

from __future__ import annotations

import re

from ledger_grammar.parsers.base import Amount, AmountFormat, Symbol
from ledger_grammar.parsers.combinators import (
    Cursor,
    Result,
    char,
    choice,
    mapped,
    optional,
    pattern,
    sequence,
)
from ledger_grammar.parsers.lexical import digit, whitespace


QUANTITY_TAIL_RE = re.compile(r"[0-9,.]*")
QUOTED_SYMBOL_BODY_RE = re.compile(r'[^"\r\n]+')
UNQUOTED_SYMBOL_RE = re.compile(r'[^0-9\-; "\t\r\n]+')


def normalize_quantity(text: str) -> str:
    """Strip thousands separators: ``-1,110.38`` -> ``-1110.38``."""
    return text.replace(",", "")


_quantity = mapped(
    sequence(
        optional(char("-")),
        digit,
        pattern(QUANTITY_TAIL_RE, "digit"),
    ),
    lambda values: normalize_quantity(f"{values[0] or ''}{values[1]}{values[2]}"),
)


def quantity(cursor: Cursor) -> Result[str]:
    """Signed decimal literal, e.g. ``-1,110.38`` -> ``"-1110.38"``.

    More than one ``.`` is accepted; the value is kept as text either way.
    """
    return _quantity(cursor)


_quoted_symbol = mapped(
    sequence(char('"'), pattern(QUOTED_SYMBOL_BODY_RE, "symbol character"), char('"')),
    lambda values: Symbol(value=values[1], quoted=True),
)

_unquoted_symbol = mapped(
    pattern(UNQUOTED_SYMBOL_RE, "symbol"),
    lambda value: Symbol(value=value, quoted=False),
)


def quoted_symbol(cursor: Cursor) -> Result[Symbol]:
    """A symbol in double quotes, which may contain spaces and digits."""
    return _quoted_symbol(cursor)


def unquoted_symbol(cursor: Cursor) -> Result[Symbol]:
    """A bare symbol such as ``$``, ``US$`` or ``AAPL``."""
    return _unquoted_symbol(cursor)


_symbol = choice(quoted_symbol, unquoted_symbol)


def symbol(cursor: Cursor) -> Result[Symbol]:
    return _symbol(cursor)


def _left_amount(values: tuple) -> Amount:
    symbol_value, spacing, quantity_value = values
    amount_format = AmountFormat.SYMBOL_LEFT_NO_SPACE if spacing is None else AmountFormat.SYMBOL_LEFT_WITH_SPACE
    return Amount(value=quantity_value, symbol=symbol_value, format=amount_format)


def _right_amount(values: tuple) -> Amount:
    quantity_value, spacing, symbol_value = values
    amount_format = AmountFormat.SYMBOL_RIGHT_NO_SPACE if spacing is None else AmountFormat.SYMBOL_RIGHT_WITH_SPACE
    return Amount(value=quantity_value, symbol=symbol_value, format=amount_format)


_amount_symbol_then_quantity = mapped(sequence(symbol, optional(whitespace), quantity), _left_amount)
_amount_quantity_then_symbol = mapped(sequence(quantity, optional(whitespace), symbol), _right_amount)


def amount_symbol_then_quantity(cursor: Cursor) -> Result[Amount]:
    return _amount_symbol_then_quantity(cursor)


def amount_quantity_then_symbol(cursor: Cursor) -> Result[Amount]:
    return _amount_quantity_then_symbol(cursor)


_amount = choice(amount_symbol_then_quantity, amount_quantity_then_symbol)


def amount(cursor: Cursor) -> Result[Amount]:
    """Parse an amount in either ordering and record which one was used."""
    return _amount(cursor)
