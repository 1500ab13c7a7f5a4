"""Season resolution, from date and config to SeasonId.

Resolution order:
    1. forced season (validated at config load) -> returned as-is
    2. first matching rule in the calendar table
    3. storm roll, if storms are active and the day is storm-eligible
Any fault along the way falls back to Summer; the resolver never raises.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

import numpy as np

from shseasons.logging_config import get_logger
from shseasons.schemas.mod_config import SeasonConfig
from shseasons.schemas.season import SeasonId
from shseasons.season.calendar import CalendarTable, MonthDay, get_calendar

logger = get_logger(__name__)

FALLBACK_SEASON = SeasonId.SUMMER


class RandomSource(Protocol):
    def random(self) -> float: ...


class SeasonResolver:
    """Maps a calendar date to a season using one rule table.

    Parameters
    ----------
    table:
        Rule table to evaluate.  When *None* the table named by
        ``config.calendar`` is looked up on every call.
    rng:
        Object with a ``random()`` method returning floats in [0, 1).
        Defaults to a fresh ``numpy.random.default_rng()``.
    """

    def __init__(
        self,
        table: CalendarTable | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.table = table
        self.rng = rng if rng is not None else np.random.default_rng()

    def resolve(self, calendar: date | MonthDay | tuple[int, int], config: SeasonConfig) -> SeasonId:
        try:
            return self._resolve(calendar, config)
        except Exception:
            logger.exception(
                "Season resolution failed for %r, falling back to %s",
                calendar, FALLBACK_SEASON.display_name,
            )
            return FALLBACK_SEASON

    def _resolve(self, calendar, config: SeasonConfig) -> SeasonId:
        if config.force_season is not None:
            return SeasonId(config.force_season)

        when = calendar if isinstance(calendar, MonthDay) else _to_month_day(calendar)
        table = self.table if self.table is not None else get_calendar(config.calendar)
        base = table.classify(when)

        if config.storms_active and table.storm_eligible(when, base):
            roll = float(self.rng.random())
            if roll < config.storm_chance:
                logger.debug("Storm roll %.3f < %.3f on %s", roll, config.storm_chance, when)
                return SeasonId.STORM
        return base


def _to_month_day(calendar) -> MonthDay:
    if isinstance(calendar, date):
        return MonthDay.from_date(calendar)
    month, day = calendar
    return MonthDay(month, day)


def resolve_season(
    calendar: date | MonthDay | tuple[int, int],
    config: SeasonConfig,
    table: CalendarTable | None = None,
    rng: RandomSource | None = None,
) -> SeasonId:
    """One-shot convenience wrapper around :class:`SeasonResolver`."""
    return SeasonResolver(table=table, rng=rng).resolve(calendar, config)
