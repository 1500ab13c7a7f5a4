"""Day-by-day season tables for a whole year (no storm rolls)."""

from __future__ import annotations

import pandas as pd

from shseasons.season.calendar import CalendarTable, MonthDay


def year_calendar(year: int, table: CalendarTable) -> pd.DataFrame:
    """One row per day of *year*: date, month, day, season, season_name."""
    days = pd.date_range(f"{year}-01-01", f"{year}-12-31", freq="D")
    seasons = [table.classify(MonthDay(d.month, d.day)) for d in days]
    return pd.DataFrame({
        "date": days.date,
        "month": days.month,
        "day": days.day,
        "season": [int(s) for s in seasons],
        "season_name": [s.display_name for s in seasons],
    })


def season_spans(frame: pd.DataFrame) -> pd.DataFrame:
    """Collapse consecutive days of the same season into start/end/days rows.

    Summer appears twice (Jan-Feb and Dec) because the year is cut at Jan 1.
    """
    run_id = (frame["season"] != frame["season"].shift()).cumsum()
    spans = (
        frame.groupby(run_id)
        .agg(
            season=("season", "first"),
            season_name=("season_name", "first"),
            start=("date", "first"),
            end=("date", "last"),
            days=("date", "size"),
        )
        .reset_index(drop=True)
    )
    return spans
