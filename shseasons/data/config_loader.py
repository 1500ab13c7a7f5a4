"""Load the mod configuration from ``config/config.jsonc``.

The file is hand-edited, so comments and trailing commas are tolerated.
Any problem with the file or a single field is logged as a warning and
replaced with the documented default; nothing here raises.
"""

from __future__ import annotations

import json
import math
import re
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from shseasons.config import MOD_NAME, config_keys, defaults
from shseasons.logging_config import get_logger
from shseasons.paths import CONFIG_PATH
from shseasons.schemas.mod_config import SeasonConfig
from shseasons.schemas.season import ALL_SEASONS, SeasonId
from shseasons.season.calendar import CALENDARS, compatible_calendars

logger = get_logger(__name__)

# Strings are matched first so comment markers inside them survive.
_COMMENT_RE = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.DOTALL)
_TRAILING_COMMA_RE = re.compile(r'("(?:\\.|[^"\\])*")|,(\s*[}\]])')


def parse_jsonc(text: str) -> Any:
    """Parse JSON with ``//``/``/* */`` comments and trailing commas."""
    stripped = _COMMENT_RE.sub(lambda m: m.group(1) or "", text)
    stripped = _TRAILING_COMMA_RE.sub(lambda m: m.group(1) or m.group(2), stripped)
    return json.loads(stripped)


# ---------------------------------------------------------------------------
# Field normalisers
# ---------------------------------------------------------------------------

def normalise_force_season(value: Any, enabled: frozenset[SeasonId] = ALL_SEASONS) -> SeasonId | None:
    """Return a usable forced season, or None (auto) with a warning."""
    if value is None or (
        isinstance(value, int) and not isinstance(value, bool)
        and value in config_keys.auto_sentinels
    ):
        return None
    try:
        season = SeasonId.parse(value)
    except ValueError:
        logger.warning(
            "%s Invalid forceSeason value %r in config, must be between %d and %d or null",
            MOD_NAME, value, min(SeasonId), max(SeasonId),
        )
        return None
    if season not in enabled:
        logger.warning(
            "%s forceSeason %s is disabled in this deployment, using auto-detect",
            MOD_NAME, season.display_name,
        )
        return None
    return season


def normalise_storm_chance(value: Any) -> float:
    if (
        isinstance(value, (int, float)) and not isinstance(value, bool)
        and not math.isnan(value) and 0.0 <= value <= 1.0
    ):
        return float(value)
    logger.warning(
        "%s Invalid stormChance value %r in config, using default (%s)",
        MOD_NAME, value, defaults.storm_chance,
    )
    return defaults.storm_chance


def normalise_enabled_seasons(value: Any) -> frozenset[SeasonId]:
    if not isinstance(value, list):
        logger.warning("%s enabledSeasons must be a list, enabling all seasons", MOD_NAME)
        return ALL_SEASONS
    seasons: set[SeasonId] = set()
    for item in value:
        try:
            seasons.add(SeasonId.parse(item))
        except ValueError:
            logger.warning("%s Ignoring unknown season %r in enabledSeasons", MOD_NAME, item)
    if SeasonId.SUMMER not in seasons:
        logger.warning("%s Summer cannot be disabled, re-enabling it", MOD_NAME)
        seasons.add(SeasonId.SUMMER)
    return frozenset(seasons)


def normalise_calendar(value: Any, enabled: frozenset[SeasonId]) -> str:
    """Pick a registered calendar whose seasons are all enabled."""
    name = value
    if not isinstance(name, str) or name not in CALENDARS:
        logger.warning(
            "%s Unknown calendar %r in config, using '%s'", MOD_NAME, value, defaults.calendar,
        )
        name = defaults.calendar

    compatible = compatible_calendars(enabled)
    if name in {table.name for table in compatible}:
        return name
    if not compatible:
        return name  # caller re-enables all seasons
    logger.warning(
        "%s Calendar '%s' uses seasons disabled in this deployment, using '%s'",
        MOD_NAME, name, compatible[0].name,
    )
    return compatible[0].name


def _read_bool(raw: dict, key: str, default: bool) -> bool:
    value = raw.get(key, default)
    if isinstance(value, bool):
        return value
    logger.warning("%s Invalid %s value %r in config, using default (%s)", MOD_NAME, key, value, default)
    return default


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def config_from_dict(raw: dict) -> SeasonConfig:
    """Build a :class:`SeasonConfig` from parsed config-file content."""
    enabled_key = next((k for k in config_keys.enabled if k in raw), config_keys.enabled[0])
    enabled = _read_bool(raw, enabled_key, defaults.enabled)

    seasons = ALL_SEASONS
    if config_keys.enabled_seasons in raw:
        seasons = normalise_enabled_seasons(raw[config_keys.enabled_seasons])

    calendar = normalise_calendar(raw.get(config_keys.calendar, defaults.calendar), seasons)
    if not compatible_calendars(seasons):
        logger.warning("%s No calendar fits enabledSeasons, enabling all seasons", MOD_NAME)
        seasons = ALL_SEASONS

    storm_chance = defaults.storm_chance
    if config_keys.storm_chance in raw:
        storm_chance = normalise_storm_chance(raw[config_keys.storm_chance])
    storms_enabled = _read_bool(raw, config_keys.enable_storms, defaults.storms_enabled)
    if storms_enabled and SeasonId.STORM not in seasons:
        storms_enabled = False

    force_season = normalise_force_season(raw.get(config_keys.force_season), seasons)

    return SeasonConfig(
        enabled=enabled,
        force_season=force_season,
        storms_enabled=storms_enabled,
        storm_chance=storm_chance,
        calendar=calendar,
        enabled_seasons=seasons,
        console_messages=_read_bool(raw, config_keys.console_messages, defaults.console_messages),
    )


def load_mod_config(path: Path | None = None) -> SeasonConfig:
    """Read and validate the config file, falling back to defaults on error."""
    path = Path(path) if path is not None else CONFIG_PATH
    if not path.exists():
        logger.warning("%s Config file not found at %s, using defaults", MOD_NAME, path)
        return SeasonConfig()

    try:
        raw = parse_jsonc(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        logger.error("%s Error parsing config file: %s", MOD_NAME, exc)
        return SeasonConfig()

    if not isinstance(raw, dict):
        logger.error("%s Config file must contain a JSON object, using defaults", MOD_NAME)
        return SeasonConfig()

    try:
        return config_from_dict(raw)
    except ValidationError as exc:
        logger.error("%s Invalid config, using defaults: %s", MOD_NAME, exc)
        return SeasonConfig()
