from __future__ import annotations

from typing import Any

from ledger_grammar.parsers.accounts import account
from ledger_grammar.parsers.amounts import amount, quantity, symbol
from ledger_grammar.parsers.combinators import Parser
from ledger_grammar.parsers.header import header
from ledger_grammar.parsers.lexical import date
from ledger_grammar.parsers.prices import price, price_db


PARSER_BY_NAME: dict[str, Parser[Any]] = {
    "account": account,
    "amount": amount,
    "date": date,
    "header": header,
    "price": price,
    "price-db": price_db,
    "quantity": quantity,
    "symbol": symbol,
}


def parser_for_name(name: str) -> Parser[Any] | None:
    key = name.strip().lower().replace("_", "-")
    return PARSER_BY_NAME.get(key)
