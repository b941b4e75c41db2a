from __future__ import annotations

import pytest

from ledger_grammar.parsers.base import Date, Header, LedgerSyntaxError, TransactionStatus
from ledger_grammar.parsers.combinators import Failure, Success, parse, run, sequence
from ledger_grammar.parsers.header import code, comment, header, payee, status
from ledger_grammar.parsers.lexical import line_ending


def test_status_markers() -> None:
    assert run(status, "*").value is TransactionStatus.CLEARED
    assert run(status, "!").value is TransactionStatus.UNCLEARED
    assert isinstance(run(status, "?"), Failure)


def test_code() -> None:
    assert run(code, "()").value == ""
    assert run(code, "(89)").value == "89"
    assert run(code, "(conf# abc-123-DEF)").value == "conf# abc-123-DEF"


def test_unterminated_code_fails_at_line_end() -> None:
    failure = run(code, "(89\nrest")
    assert isinstance(failure, Failure)
    assert failure.position.offset == 3
    assert failure.expected == ("')'",)


def test_empty_payee_is_error() -> None:
    assert isinstance(run(payee, ""), Failure)
    assert isinstance(run(payee, ";comment"), Failure)


def test_payee() -> None:
    assert run(payee, "Z").value == "Z"
    assert run(payee, "WonderMart").value == "WonderMart"
    long_payee = "WonderMart - groceries, kitchen supplies (pot), light bulbs"
    assert run(payee, long_payee).value == long_payee


def test_payee_stops_at_line_end() -> None:
    result = run(payee, "Grocer\r\nnext")
    assert result.value == "Grocer"
    assert result.remaining == "\r\nnext"


def test_comment() -> None:
    assert run(comment, ";").value == ""
    assert run(comment, ";Comment").value == "Comment"
    assert run(comment, "; Comment").value == " Comment"


def test_full_header() -> None:
    result = run(header, "2015-10-20 * (conf# abc-123) Payee ;Comment")
    assert result.value == Header(
        line_number=1,
        date=Date(year=2015, month=10, day=20),
        status=TransactionStatus.CLEARED,
        code="conf# abc-123",
        payee="Payee ",
        comment="Comment",
    )


def test_header_with_code_and_no_comment() -> None:
    result = run(header, "2015-10-20 ! (conf# abc-123) Payee")
    assert result.value == Header(
        line_number=1,
        date=Date(year=2015, month=10, day=20),
        status=TransactionStatus.UNCLEARED,
        code="conf# abc-123",
        payee="Payee",
        comment=None,
    )


def test_header_with_comment_and_no_code() -> None:
    result = run(header, "2015-10-20 * Payee ;Comment")
    assert result.value.code is None
    assert result.value.payee == "Payee "
    assert result.value.comment == "Comment"


def test_header_with_no_code_or_comment() -> None:
    result = run(header, "2015-10-20 * Payee")
    assert result.value == Header(
        line_number=1,
        date=Date(year=2015, month=10, day=20),
        status=TransactionStatus.CLEARED,
        code=None,
        payee="Payee",
        comment=None,
    )


def test_header_empty_code_is_present() -> None:
    result = run(header, "2015-10-20 * () Payee")
    assert result.value.code == ""


def test_header_stops_at_line_ending() -> None:
    result = run(header, "2015-10-20 * Payee ; note\n    Expenses:Food  $5")
    assert isinstance(result, Success)
    assert result.value.comment == " note"
    assert result.remaining == "\n    Expenses:Food  $5"


def test_header_line_number_is_where_it_starts() -> None:
    result = run(sequence(line_ending, line_ending, header), "\n\n2015-10-20 * Payee")
    assert isinstance(result, Success)
    assert result.value[2].line_number == 3


def test_header_reports_failure_where_it_happened() -> None:
    failure = run(header, "2015-10-20 *Payee")
    assert isinstance(failure, Failure)
    assert failure.position.offset == 12
    assert failure.expected == ("whitespace",)

    failure = run(header, "2015-10-20 * (abc)Payee")
    assert isinstance(failure, Failure)
    assert failure.position.offset == 18
    assert failure.expected == ("whitespace",)

    failure = run(header, "2015-10-20 * (abc Payee")
    assert isinstance(failure, Failure)
    assert failure.position.offset == 23
    assert failure.expected == ("')'",)


def test_header_requires_payee() -> None:
    failure = run(header, "2015-10-20 * ;comment")
    assert isinstance(failure, Failure)
    assert failure.position.offset == 13
    assert failure.expected == ("payee",)


def test_header_syntax_error_message() -> None:
    with pytest.raises(LedgerSyntaxError) as excinfo:
        parse(header, "2015-10-20 ? Payee")
    err = excinfo.value
    assert err.position.line == 1
    assert err.position.column == 12
    assert "line 1, column 12: expected '*' or '!'" in str(err)
    assert str(err).endswith("2015-10-20 ? Payee\n           ^")


def test_syntax_error_caret_follows_tabs() -> None:
    with pytest.raises(LedgerSyntaxError) as excinfo:
        parse(header, "2015-10-20\t?\tPayee")
    assert excinfo.value.position.column == 12
    assert str(excinfo.value).endswith("2015-10-20\t?\tPayee\n" + " " * 10 + "\t^")
