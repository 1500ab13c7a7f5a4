"""Season identifiers and conflict reports.

``SeasonId`` values are the raw integers the host stores in its weather
config, so members must never be renumbered or reordered.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel


class SeasonId(IntEnum):
    SUMMER = 0
    AUTUMN = 1
    WINTER = 2
    SPRING = 3
    LATE_AUTUMN = 4
    EARLY_SPRING = 5
    STORM = 6

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. ``Late Autumn``."""
        return self.name.replace("_", " ").title()

    @classmethod
    def parse(cls, value: Any) -> "SeasonId":
        """Coerce an int or a name (``"late_autumn"``, ``"Late Autumn"``).

        Raises ``ValueError`` for anything else, including bools.
        """
        if isinstance(value, bool):
            raise ValueError(f"Not a season: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().upper().replace(" ", "_").replace("-", "_")
            if key in cls.__members__:
                return cls[key]
        raise ValueError(f"Not a season: {value!r}")


ALL_SEASONS: frozenset[SeasonId] = frozenset(SeasonId)


def is_known_season(value: Any) -> bool:
    """True when *value* is an int (not a bool) inside the SeasonId range."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return min(SeasonId) <= value <= max(SeasonId)


def season_label(value: Any) -> str:
    """Display name for a raw slot value, falling back to ``repr``."""
    if value is None:
        return "auto"
    if is_known_season(value):
        return SeasonId(value).display_name
    return repr(value)


# ---------------------------------------------------------------------------
# Conflict reports
# ---------------------------------------------------------------------------

class ConflictKind(str, Enum):
    NO_CONFLICT = "no_conflict"
    REVERTED_TO_AUTO = "reverted_to_auto"
    OVERRIDDEN_VALID = "overridden_valid"
    OVERRIDDEN_INVALID = "overridden_invalid"


class ConflictReport(BaseModel):
    """Outcome of comparing the recorded season with the live slot value."""

    kind: ConflictKind
    expected: SeasonId
    other: SeasonId | None = None  # OVERRIDDEN_VALID only
    raw: Any = None  # OVERRIDDEN_INVALID only

    @property
    def is_conflict(self) -> bool:
        return self.kind is not ConflictKind.NO_CONFLICT

    def describe(self) -> str:
        expected = self.expected.display_name
        if self.kind is ConflictKind.NO_CONFLICT:
            return f"Season {expected} is still active"
        if self.kind is ConflictKind.REVERTED_TO_AUTO:
            return f"Season {expected} was cleared back to auto by another mod"
        if self.kind is ConflictKind.OVERRIDDEN_VALID:
            return (
                f"Season {expected} was overridden by another mod "
                f"(now {self.other.display_name})"
            )
        return (
            f"Season {expected} was overridden by another mod "
            f"with an invalid value: {self.raw!r}"
        )
