"""Shared helpers for API blueprints."""

from datetime import date

from flask import current_app

from shseasons.season.controller import SeasonController


def get_controller() -> SeasonController:
    return current_app.extensions["season_controller"]


def parse_date_arg(value: str | None) -> tuple[date | None, tuple[dict, int] | None]:
    """Parse an ISO ``YYYY-MM-DD`` query value.

    Returns (date, None) on success, (None, (error_dict, 400)) on failure.
    Missing values resolve to today.
    """
    if not value:
        return date.today(), None
    try:
        return date.fromisoformat(value), None
    except ValueError:
        return None, ({"error": f"Invalid date '{value}', expected YYYY-MM-DD."}, 400)


def parse_year_arg(value: str | None) -> tuple[int | None, tuple[dict, int] | None]:
    if not value:
        return date.today().year, None
    try:
        year = int(value)
    except (TypeError, ValueError):
        return None, ({"error": "year must be an integer."}, 400)
    # pandas Timestamp bounds
    if not 1678 <= year <= 2261:
        return None, ({"error": "year must be between 1678 and 2261."}, 400)
    return year, None
