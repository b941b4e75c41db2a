from __future__ import annotations

import re

from ledger_grammar.parsers.base import Header, TransactionStatus
from ledger_grammar.parsers.combinators import (
    Cursor,
    Result,
    char,
    choice,
    mapped,
    optional,
    pattern,
    sequence,
    skip,
)
from ledger_grammar.parsers.lexical import date, line_number, whitespace


CODE_BODY_RE = re.compile(r"[^\r\n)]*")
PAYEE_RE = re.compile(r"[^;\r\n]+")
COMMENT_BODY_RE = re.compile(r"[^\r\n]*")


status = choice(
    mapped(char("*"), lambda _: TransactionStatus.CLEARED),
    mapped(char("!"), lambda _: TransactionStatus.UNCLEARED),
)


def code(cursor: Cursor) -> Result[str]:
    """Transaction code in parentheses, e.g. ``(cheque #802)``. ``()`` gives ``""``."""
    return mapped(
        sequence(char("("), pattern(CODE_BODY_RE, "code"), char(")")),
        lambda values: values[1],
    )(cursor)


# Trailing whitespace before a comment belongs to the payee.
payee = pattern(PAYEE_RE, "payee")


def comment(cursor: Cursor) -> Result[str]:
    """``;`` and the rest of the line. The ``;`` is dropped, spaces after it are kept."""
    return mapped(
        sequence(char(";"), pattern(COMMENT_BODY_RE, "comment")),
        lambda values: values[1],
    )(cursor)


_header = mapped(
    sequence(
        line_number,
        skip(date, whitespace),
        skip(status, whitespace),
        optional(skip(code, whitespace)),
        payee,
        optional(comment),
    ),
    lambda values: Header(
        line_number=values[0],
        date=values[1],
        status=values[2],
        code=values[3],
        payee=values[4],
        comment=values[5],
    ),
)


def header(cursor: Cursor) -> Result[Header]:
    """Parse a transaction header line.

    ``2015-10-20 * (conf# abc-123) Payee ;Comment``

    The code and the comment are optional. When a code is present it must be
    followed by whitespace. A failure inside any part is reported where that
    part failed.
    """
    return _header(cursor)
