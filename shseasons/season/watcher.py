"""Detects other mods overwriting the season we wrote to the shared slot."""

from __future__ import annotations

from typing import Any

from shseasons.schemas.season import ConflictKind, ConflictReport, SeasonId, is_known_season
from shseasons.season.slot import UNSET


class OverrideWatcher:
    """Remembers the last resolved season and classifies later slot values.

    Purely diagnostic: it never touches the slot itself.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.expected: SeasonId | None = None

    def record_expectation(self, season_id: SeasonId) -> None:
        self.expected = SeasonId(season_id)

    def check_for_conflict(self, current: Any) -> ConflictReport | None:
        """Compare *current* with the recorded season.

        Returns None when disabled or when nothing has been recorded yet.
        """
        if not self.enabled or self.expected is None:
            return None

        if current is UNSET:
            kind = ConflictKind.REVERTED_TO_AUTO
        elif not is_known_season(current):
            return ConflictReport(
                kind=ConflictKind.OVERRIDDEN_INVALID, expected=self.expected, raw=current,
            )
        elif current == self.expected:
            kind = ConflictKind.NO_CONFLICT
        else:
            return ConflictReport(
                kind=ConflictKind.OVERRIDDEN_VALID,
                expected=self.expected,
                other=SeasonId(current),
            )
        return ConflictReport(kind=kind, expected=self.expected)
