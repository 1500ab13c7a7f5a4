"""Central configuration: every magic number in one place."""

from __future__ import annotations

from dataclasses import dataclass


MOD_NAME = "[Southern-Hemisphere-Seasons]"


# ---------------------------------------------------------------------------
# Mod defaults (used when config.jsonc is missing or a field is invalid)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class DefaultsConfig:
    enabled: bool = True
    storms_enabled: bool = True
    storm_chance: float = 0.1  # 10% per raid start on storm-eligible days
    force_season: int | None = None  # None = auto-detect from date
    calendar: str = "southern"
    console_messages: bool = True


# ---------------------------------------------------------------------------
# Config file keys
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ConfigKeys:
    enabled: tuple[str, ...] = ("enabled", "enable")
    force_season: str = "forceSeason"
    storm_chance: str = "stormChance"
    enable_storms: str = "enableStorms"
    calendar: str = "calendar"
    enabled_seasons: str = "enabledSeasons"
    console_messages: str = "consoleMessages"

    # Legacy generations wrote -1 instead of null for "auto"
    auto_sentinels: tuple[int, ...] = (-1,)


# ---------------------------------------------------------------------------
# Host integration
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class HostConfig:
    override_key: str = "overrideSeason"  # key in the host weather config
    fika_markers: tuple[str, ...] = ("fika", "fika-server", "fikaconfig")
    variant_env: str = "SHS_HOST_VARIANT"  # spt | fika, skips detection


# ---------------------------------------------------------------------------
# Dev server
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 6971


# ---------------------------------------------------------------------------
# Singleton instances (importable as `from shseasons.config import defaults, ...`)
# ---------------------------------------------------------------------------
defaults = DefaultsConfig()
config_keys = ConfigKeys()
host_cfg = HostConfig()
server_cfg = ServerConfig()
