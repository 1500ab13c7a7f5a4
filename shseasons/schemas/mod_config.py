"""Pydantic model for the mod configuration snapshot."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shseasons.config import defaults
from shseasons.schemas.season import ALL_SEASONS, SeasonId


class SeasonConfig(BaseModel):
    """Immutable configuration used for one resolution.

    ``force_season=None`` means auto-detect from the date.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = defaults.enabled
    force_season: SeasonId | None = defaults.force_season
    storms_enabled: bool = defaults.storms_enabled
    storm_chance: float = Field(defaults.storm_chance, ge=0.0, le=1.0, allow_inf_nan=False)
    calendar: str = defaults.calendar
    enabled_seasons: frozenset[SeasonId] = ALL_SEASONS
    console_messages: bool = defaults.console_messages

    @field_validator("force_season", mode="before")
    @classmethod
    def _reject_bool_season(cls, value):
        if isinstance(value, bool):
            raise ValueError("forceSeason must be a season id, not a bool")
        return value

    @model_validator(mode="after")
    def validate_season_set(self) -> "SeasonConfig":
        if SeasonId.SUMMER not in self.enabled_seasons:
            raise ValueError("Summer cannot be disabled (it is the fallback season)")
        if self.force_season is not None and self.force_season not in self.enabled_seasons:
            raise ValueError(
                f"Forced season {self.force_season.display_name} is not enabled"
            )
        return self

    @property
    def storms_active(self) -> bool:
        """Storm sampling applies only when storms are on and Storm is enabled."""
        return self.storms_enabled and SeasonId.STORM in self.enabled_seasons
