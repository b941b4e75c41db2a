from __future__ import annotations

import re

from ledger_grammar.parsers.combinators import Cursor, Result, char, pattern, sep_by1


# Letters and digits in any script, no underscore.
SUB_ACCOUNT_RE = re.compile(r"[^\W_]+")


sub_account = pattern(SUB_ACCOUNT_RE, "account name")


def account(cursor: Cursor) -> Result[list[str]]:
    """Colon-separated account path, root first: ``Expenses:Food:Groceries``."""
    return sep_by1(sub_account, char(":"))(cursor)
