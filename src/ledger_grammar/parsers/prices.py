from __future__ import annotations

from ledger_grammar.parsers.amounts import amount, symbol
from ledger_grammar.parsers.base import Price
from ledger_grammar.parsers.combinators import Cursor, Result, char, mapped, sep_by, sequence, skip
from ledger_grammar.parsers.lexical import date, line_ending, whitespace


_price = mapped(
    sequence(
        skip(char("P"), whitespace),
        skip(date, whitespace),
        skip(symbol, whitespace),
        amount,
    ),
    lambda values: Price(date=values[1], symbol=values[2], amount=values[3]),
)


def price(cursor: Cursor) -> Result[Price]:
    """``P 2015-10-25 "MUTF2351" $5.42``: the symbol was worth the amount on that date."""
    return _price(cursor)


def price_db(cursor: Cursor) -> Result[list[Price]]:
    """Price entries, one per line. Empty input is an empty database."""
    return sep_by(price, line_ending)(cursor)
