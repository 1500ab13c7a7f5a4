"""Shared season slot, the host-owned cell the chosen season is written to.

The slot holds a raw value: ``None`` (auto / unset), a ``SeasonId`` integer,
or whatever another mod decided to put there.
"""

from __future__ import annotations

from typing import Any, MutableMapping, Protocol

from shseasons.config import host_cfg

UNSET = None


class SeasonSlot(Protocol):
    def read(self) -> Any: ...

    def write(self, value: Any) -> None: ...


class InMemorySlot:
    """Stand-alone slot, used by the dev server and tests."""

    def __init__(self, value: Any = UNSET) -> None:
        self._value = value

    def read(self) -> Any:
        return self._value

    def write(self, value: Any) -> None:
        self._value = value


class WeatherConfigSlot:
    """Adapts the host's weather-config mapping to the slot interface."""

    def __init__(
        self,
        weather_config: MutableMapping[str, Any],
        key: str = host_cfg.override_key,
    ) -> None:
        self.weather_config = weather_config
        self.key = key

    def read(self) -> Any:
        return self.weather_config.get(self.key, UNSET)

    def write(self, value: Any) -> None:
        self.weather_config[self.key] = None if value is None else int(value)
