"""Date -> season rule tables.

Each table is an ordered tuple of inclusive (month, day) ranges; the first
matching rule wins.  A range whose start is later in the year than its end
wraps across New Year (e.g. Dec 1 - Feb 29).  Feb 29 is listed as an end
day so leap years are covered without a separate table.
"""

from __future__ import annotations

import calendar as _stdlib_calendar
from dataclasses import dataclass
from datetime import date
from typing import NamedTuple

from shseasons.schemas.season import SeasonId

S = SeasonId

# Leap year used to enumerate every (month, day) pair including Feb 29.
_REFERENCE_LEAP_YEAR = 2024


class CalendarError(ValueError):
    """A rule table or calendar date is malformed."""


class MonthDay(NamedTuple):
    month: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> "MonthDay":
        return cls(value.month, value.day)

    def validate(self) -> "MonthDay":
        """Raise ``CalendarError`` unless this is a real day in a leap year."""
        month, day = self
        if isinstance(month, bool) or isinstance(day, bool):
            raise CalendarError(f"Invalid calendar date: {self!r}")
        if not isinstance(month, int) or not isinstance(day, int):
            raise CalendarError(f"Invalid calendar date: {self!r}")
        if not 1 <= month <= 12:
            raise CalendarError(f"Invalid month: {month}")
        last = _stdlib_calendar.monthrange(_REFERENCE_LEAP_YEAR, month)[1]
        if not 1 <= day <= last:
            raise CalendarError(f"Invalid day {day} for month {month}")
        return self

    @property
    def ordinal(self) -> int:
        """Sortable key, e.g. May 14 -> 514."""
        return self.month * 100 + self.day

    def __str__(self) -> str:
        return f"{_stdlib_calendar.month_abbr[self.month]} {self.day}"


@dataclass(frozen=True)
class DateRange:
    start: MonthDay
    end: MonthDay

    @property
    def wraps(self) -> bool:
        return self.start.ordinal > self.end.ordinal

    def contains(self, when: MonthDay) -> bool:
        key = when.ordinal
        if self.wraps:
            return key >= self.start.ordinal or key <= self.end.ordinal
        return self.start.ordinal <= key <= self.end.ordinal


@dataclass(frozen=True)
class CalendarRule:
    span: DateRange
    season: SeasonId


@dataclass(frozen=True)
class CalendarTable:
    """A named, ordered rule table plus its storm-eligible window.

    ``storm_window=None`` means storms may roll on any day classified Summer.
    """

    name: str
    rules: tuple[CalendarRule, ...]
    storm_window: tuple[DateRange, ...] | None = None

    def classify(self, when: MonthDay) -> SeasonId:
        """Return the base (non-storm) season for *when*."""
        when.validate()
        for rule in self.rules:
            if rule.span.contains(when):
                return rule.season
        raise CalendarError(f"No rule in '{self.name}' matches {when}")

    def storm_eligible(self, when: MonthDay, base: SeasonId) -> bool:
        if self.storm_window is None:
            return base is SeasonId.SUMMER
        return any(window.contains(when) for window in self.storm_window)


def _rule(start: tuple[int, int], end: tuple[int, int], season: SeasonId) -> CalendarRule:
    return CalendarRule(DateRange(MonthDay(*start), MonthDay(*end)), season)


# ---------------------------------------------------------------------------
# Registered variants
# ---------------------------------------------------------------------------

SOUTHERN = CalendarTable(
    name="southern",
    rules=(
        _rule((12, 1), (2, 29), S.SUMMER),
        _rule((3, 1), (4, 30), S.AUTUMN),
        _rule((5, 1), (5, 31), S.LATE_AUTUMN),
        _rule((6, 1), (8, 31), S.WINTER),
        _rule((9, 1), (9, 30), S.EARLY_SPRING),
        _rule((10, 1), (11, 30), S.SPRING),
    ),
)

# Older releases: Late Autumn started mid-May, no Early Spring, and storms
# only rolled after New Year.
SOUTHERN_LEGACY = CalendarTable(
    name="southern_legacy",
    rules=(
        _rule((12, 1), (2, 29), S.SUMMER),
        _rule((3, 1), (5, 14), S.AUTUMN),
        _rule((5, 15), (5, 31), S.LATE_AUTUMN),
        _rule((6, 1), (8, 31), S.WINTER),
        _rule((9, 1), (11, 30), S.SPRING),
    ),
    storm_window=(DateRange(MonthDay(1, 1), MonthDay(2, 29)),),
)

SOUTHERN_BASIC = CalendarTable(
    name="southern_basic",
    rules=(
        _rule((12, 1), (2, 29), S.SUMMER),
        _rule((3, 1), (5, 31), S.AUTUMN),
        _rule((6, 1), (8, 31), S.WINTER),
        _rule((9, 1), (11, 30), S.SPRING),
    ),
)

CALENDARS: dict[str, CalendarTable] = {
    table.name: table for table in (SOUTHERN, SOUTHERN_LEGACY, SOUTHERN_BASIC)
}


def get_calendar(name: str) -> CalendarTable:
    """Look up a registered table, raising ``KeyError`` for unknown names."""
    return CALENDARS[name]


def compatible_calendars(enabled: frozenset[SeasonId]) -> list[CalendarTable]:
    """Registered tables whose date rules only produce enabled seasons."""
    return [
        table for table in CALENDARS.values()
        if all(rule.season in enabled for rule in table.rules)
    ]


# ---------------------------------------------------------------------------
# Table validation
# ---------------------------------------------------------------------------

def all_month_days() -> list[MonthDay]:
    """Every (month, day) pair of a leap year, Jan 1 first."""
    return [
        MonthDay(month, day)
        for month in range(1, 13)
        for day in range(1, _stdlib_calendar.monthrange(_REFERENCE_LEAP_YEAR, month)[1] + 1)
    ]


def validate_partition(table: CalendarTable) -> None:
    """Raise ``CalendarError`` if any day of the year is left unclassified."""
    gaps = [
        when for when in all_month_days()
        if not any(rule.span.contains(when) for rule in table.rules)
    ]
    if gaps:
        shown = ", ".join(str(g) for g in gaps[:5])
        raise CalendarError(
            f"Calendar '{table.name}' leaves {len(gaps)} day(s) unclassified: {shown}"
        )


def find_overlaps(table: CalendarTable) -> dict[MonthDay, list[SeasonId]]:
    """Days matched by more than one rule, with every matching season in order."""
    overlaps: dict[MonthDay, list[SeasonId]] = {}
    for when in all_month_days():
        matches = [rule.season for rule in table.rules if rule.span.contains(when)]
        if len(matches) > 1:
            overlaps[when] = matches
    return overlaps
