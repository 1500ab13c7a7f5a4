"""Shared test fixtures for Southern Hemisphere Seasons."""

from datetime import date

import pytest

from shseasons.schemas.mod_config import SeasonConfig
from shseasons.season.calendar import SOUTHERN, SOUTHERN_LEGACY
from shseasons.season.controller import HostVariant, SeasonController
from shseasons.season.resolver import SeasonResolver
from shseasons.season.slot import InMemorySlot


class FixedRandom:
    """Deterministic stand-in for ``numpy.random.Generator``.

    Returns *values* in order, then repeats the last one.  ``calls`` counts
    how many samples were drawn.
    """

    def __init__(self, *values: float) -> None:
        self.values = list(values) or [0.5]
        self.calls = 0

    def random(self) -> float:
        idx = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[idx]


class RecordingSlot(InMemorySlot):
    """In-memory slot that remembers every write."""

    def __init__(self, value=None) -> None:
        super().__init__(value)
        self.writes = []

    def write(self, value) -> None:
        self.writes.append(value)
        super().write(value)


@pytest.fixture
def make_rng():
    return FixedRandom


@pytest.fixture
def calm_config():
    """Auto-detect, storms off."""
    return SeasonConfig(storms_enabled=False)


@pytest.fixture
def stormy_config():
    """Auto-detect, storm on every eligible day."""
    return SeasonConfig(storms_enabled=True, storm_chance=1.0)


@pytest.fixture
def southern_resolver():
    return SeasonResolver(table=SOUTHERN, rng=FixedRandom(0.5))


@pytest.fixture
def legacy_resolver():
    return SeasonResolver(table=SOUTHERN_LEGACY, rng=FixedRandom(0.5))


@pytest.fixture
def recording_slot():
    return RecordingSlot()


@pytest.fixture
def make_controller(recording_slot):
    """Factory: controller with a fixed date, no storms, recording slot."""

    def _make(config=None, today=date(2025, 1, 15), host_variant=HostVariant.SPT, rng=None):
        return SeasonController(
            config or SeasonConfig(storms_enabled=False),
            recording_slot,
            resolver=SeasonResolver(table=SOUTHERN, rng=rng or FixedRandom(0.5)),
            host_variant=host_variant,
            today=lambda: today,
        )

    return _make


@pytest.fixture
def write_config(tmp_path):
    """Write *text* to a config.jsonc in tmp_path and return the path."""

    def _write(text: str):
        path = tmp_path / "config.jsonc"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
