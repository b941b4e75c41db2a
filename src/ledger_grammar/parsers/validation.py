from __future__ import annotations

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR

from ledger_grammar.parsers.base import Date, Header, Price


@dataclass(slots=True)
class CalendarIssue:
    record_index: int
    line_number: int | None
    date: Date
    reason: str


def calendar_issues(value: Date) -> list[str]:
    """Reasons a parsed date is not a real calendar day. Empty when it is."""
    if not MINYEAR <= value.year <= MAXYEAR:
        return ["year_out_of_range"]
    if not 1 <= value.month <= 12:
        return ["month_out_of_range"]
    last_day = calendar.monthrange(value.year, value.month)[1]
    if not 1 <= value.day <= last_day:
        return ["day_out_of_range"]
    return []


def validate_calendar(records: Iterable[Header | Price]) -> list[CalendarIssue]:
    issues: list[CalendarIssue] = []
    for index, record in enumerate(records):
        line = record.line_number if isinstance(record, Header) else None
        for reason in calendar_issues(record.date):
            issues.append(CalendarIssue(record_index=index, line_number=line, date=record.date, reason=reason))
    return issues
