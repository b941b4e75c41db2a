from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ledger_grammar.config import settings
from ledger_grammar.logging_setup import get_logger
from ledger_grammar.parsers.base import LedgerSyntaxError, Price
from ledger_grammar.parsers.combinators import parse
from ledger_grammar.parsers.prices import price_db
from ledger_grammar.parsers.registry import PARSER_BY_NAME, parser_for_name
from ledger_grammar.parsers.validation import CalendarIssue, validate_calendar


logger = get_logger("ledger_grammar.services.loader")


def _date_key(price: Price) -> tuple[int, int, int]:
    return (price.date.year, price.date.month, price.date.day)


@dataclass(slots=True)
class PriceDbReport:
    path: Path
    prices: list[Price] = field(default_factory=list)
    calendar_issues: list[CalendarIssue] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        first_date = last_date = None
        if self.prices:
            # Compare fields, not text: years may be wider than four digits.
            first_date = min(self.prices, key=_date_key).date.isoformat()
            last_date = max(self.prices, key=_date_key).date.isoformat()
        return {
            "path": str(self.path),
            "records": len(self.prices),
            "symbols": sorted({p.symbol.value for p in self.prices}),
            "first_date": first_date,
            "last_date": last_date,
            "calendar_issues": len(self.calendar_issues),
        }


def read_source(path: Path | str) -> str:
    file_path = Path(path)
    logger.debug("reading %s", file_path)
    # newline="" keeps CRLF so line_ending sees the original terminators.
    with file_path.open("r", encoding=settings.source_encoding, newline="") as handle:
        text = handle.read()
    if settings.strip_trailing_newlines:
        text = text.rstrip("\r\n")
    return text


def load_price_db(path: Path | str | None = None) -> PriceDbReport:
    """Read and parse a whole price database file."""
    file_path = Path(path) if path is not None else settings.prices_path
    text = read_source(file_path)
    try:
        prices, _ = parse(price_db, text, complete=True)
    except LedgerSyntaxError as exc:
        logger.warning("price db %s failed at line %d, column %d", file_path, exc.position.line, exc.position.column)
        raise

    report = PriceDbReport(path=file_path, prices=prices)
    if settings.validate_calendar_dates:
        report.calendar_issues = validate_calendar(prices)
        for issue in report.calendar_issues:
            logger.warning("record %d has %s: %s", issue.record_index + 1, issue.reason, issue.date.isoformat())
    logger.info("parsed %d price records from %s", len(prices), file_path)
    return report


def parse_text(name: str, text: str) -> Any:
    """Parse a complete snippet with the production registered under ``name``."""
    parser = parser_for_name(name)
    if parser is None:
        known = ", ".join(sorted(PARSER_BY_NAME))
        raise ValueError(f"Unknown production {name!r}; expected one of: {known}")
    value, _ = parse(parser, text, complete=True)
    return value
