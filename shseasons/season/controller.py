"""Host lifecycle controller: wires the resolver and watcher to host hooks.

Hooks, in the order the host calls them:
    on_load       config loaded, season set once so the first raid is correct
    on_post_load  checkpoint: did another mod overwrite our season?
    on_raid_start every raid/session start; the host may run for days, so
                  the date is re-read each time
"""

from __future__ import annotations

import logging
import os
from datetime import date
from enum import Enum
from typing import Any, Callable, Iterable

from shseasons.config import MOD_NAME, host_cfg
from shseasons.logging_config import SUCCESS, get_logger
from shseasons.schemas.mod_config import SeasonConfig
from shseasons.schemas.season import ConflictReport, SeasonId, season_label
from shseasons.season.resolver import SeasonResolver
from shseasons.season.slot import UNSET, SeasonSlot
from shseasons.season.watcher import OverrideWatcher

logger = get_logger(__name__)


class HostVariant(str, Enum):
    SPT = "spt"    # single-player: season set when the client fetches weather
    FIKA = "fika"  # multiplayer: season set when the raid is created


def detect_host_variant(installed_mods: Iterable[str] = ()) -> HostVariant:
    """FIKA when the multiplayer mod is installed (or forced via env), else SPT."""
    forced = os.environ.get(host_cfg.variant_env, "").strip().lower()
    if forced in {v.value for v in HostVariant}:
        return HostVariant(forced)
    names = {name.strip().lower() for name in installed_mods}
    if names & set(host_cfg.fika_markers):
        return HostVariant.FIKA
    return HostVariant.SPT


class SeasonController:
    """Owns one config snapshot, one slot, one resolver and one watcher."""

    def __init__(
        self,
        config: SeasonConfig,
        slot: SeasonSlot,
        resolver: SeasonResolver | None = None,
        host_variant: HostVariant = HostVariant.SPT,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.config = config
        self.slot = slot
        self.resolver = resolver or SeasonResolver()
        self.watcher = OverrideWatcher(enabled=config.enabled)
        self.host_variant = host_variant
        self.today = today
        self.last_report: ConflictReport | None = None

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def on_load(self) -> SeasonId | None:
        if not self.enabled:
            logger.info("%s Mod is disabled in config.jsonc", MOD_NAME)
            return None
        if self.host_variant is HostVariant.FIKA:
            logger.info("%s Detected FIKA installation", MOD_NAME)
        else:
            logger.info("%s Running in single-player mode (FIKA not detected)", MOD_NAME)
        return self.apply_season("Startup")

    def on_raid_start(self, label: str | None = None) -> SeasonId | None:
        if not self.enabled:
            return None
        if label is None:
            label = "FIKA Raid Creation" if self.host_variant is HostVariant.FIKA else "SPT Raid Start"
        return self.apply_season(label)

    def on_post_load(self) -> ConflictReport | None:
        report = self.check_override()
        logger.info("%s Mod loaded successfully", MOD_NAME)
        return report

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def apply_season(self, label: str) -> SeasonId:
        """Resolve for today and write the result to the slot."""
        self.slot.write(UNSET)
        season = self.resolver.resolve(self.today(), self.config)
        self.slot.write(season)
        self.watcher.record_expectation(season)
        level = SUCCESS if self.config.console_messages else logging.DEBUG
        logger.log(level, "%s Selected Season for %s: %s", MOD_NAME, label, season.display_name)
        return season

    def check_override(self) -> ConflictReport | None:
        """Run the conflict checkpoint and log the outcome."""
        if not self.enabled:
            return None
        current: Any = self.slot.read()
        report = self.watcher.check_for_conflict(current)
        self.last_report = report
        if report is None:
            return None
        if report.is_conflict:
            logger.warning("%s %s", MOD_NAME, report.describe())
        else:
            logger.info("%s %s", MOD_NAME, report.describe())
        return report

    def status(self) -> dict:
        current = self.slot.read()
        return {
            "enabled": self.enabled,
            "host_variant": self.host_variant.value,
            "slot": current,
            "slot_name": season_label(current),
            "expected": None if self.watcher.expected is None else int(self.watcher.expected),
            "config": self.config.model_dump(mode="json"),
        }
