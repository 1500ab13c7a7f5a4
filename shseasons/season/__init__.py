"""Season resolution: calendar tables, resolver, override watcher and host hooks."""

from shseasons.season.calendar import CALENDARS, CalendarTable, MonthDay, get_calendar
from shseasons.season.controller import HostVariant, SeasonController, detect_host_variant
from shseasons.season.resolver import SeasonResolver, resolve_season
from shseasons.season.slot import InMemorySlot, WeatherConfigSlot
from shseasons.season.watcher import OverrideWatcher

__all__ = [
    "CALENDARS",
    "CalendarTable",
    "MonthDay",
    "get_calendar",
    "HostVariant",
    "SeasonController",
    "detect_host_variant",
    "SeasonResolver",
    "resolve_season",
    "InMemorySlot",
    "WeatherConfigSlot",
    "OverrideWatcher",
]
