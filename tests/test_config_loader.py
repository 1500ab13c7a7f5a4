"""Tests for config.jsonc loading and per-field fallbacks."""

import logging

import pytest

from shseasons.data.config_loader import (
    config_from_dict,
    load_mod_config,
    normalise_force_season,
    normalise_storm_chance,
    parse_jsonc,
)
from shseasons.paths import CONFIG_DIR
from shseasons.schemas.mod_config import SeasonConfig
from shseasons.schemas.season import ALL_SEASONS, SeasonId

S = SeasonId

DEFAULTS = SeasonConfig().model_dump()


def _warnings(caplog):
    return [r.getMessage() for r in caplog.records if r.levelno >= logging.WARNING]


# ---------------------------------------------------------------------------
# JSONC parsing
# ---------------------------------------------------------------------------

class TestParseJsonc:
    def test_plain_json(self):
        assert parse_jsonc('{"a": 1}') == {"a": 1}

    def test_line_and_block_comments(self):
        text = """
        {
            // line comment
            "a": 1, /* block
            comment */ "b": 2
        }
        """
        assert parse_jsonc(text) == {"a": 1, "b": 2}

    def test_trailing_commas(self):
        assert parse_jsonc('{"a": [1, 2,], "b": {"c": 3,},}') == {"a": [1, 2], "b": {"c": 3}}

    def test_comment_markers_inside_strings_kept(self):
        text = '{"url": "http://host/a", "note": "/* not a comment */", "c": ",}"}'
        assert parse_jsonc(text) == {
            "url": "http://host/a",
            "note": "/* not a comment */",
            "c": ",}",
        }

    def test_escaped_quotes(self):
        assert parse_jsonc(r'{"a": "say \"hi\" // ok"}') == {"a": 'say "hi" // ok'}

    def test_malformed_raises_value_error(self):
        with pytest.raises(ValueError):
            parse_jsonc('{"a": }')


# ---------------------------------------------------------------------------
# Field normalisers
# ---------------------------------------------------------------------------

class TestNormaliseForceSeason:
    @pytest.mark.parametrize("value", [None, -1])
    def test_auto_sentinels(self, value, caplog):
        with caplog.at_level(logging.WARNING):
            assert normalise_force_season(value) is None
        assert _warnings(caplog) == []

    @pytest.mark.parametrize("value,expected", [(0, S.SUMMER), (6, S.STORM), ("winter", S.WINTER)])
    def test_valid(self, value, expected):
        assert normalise_force_season(value) is expected

    @pytest.mark.parametrize("value", [7, -2, 2.5, True, "monsoon", [1], {"season": 1}])
    def test_invalid_warns_and_returns_auto(self, value, caplog):
        with caplog.at_level(logging.WARNING):
            assert normalise_force_season(value) is None
        assert any("Invalid forceSeason" in msg for msg in _warnings(caplog))

    def test_disabled_season_rejected(self, caplog):
        enabled = ALL_SEASONS - {S.EARLY_SPRING}
        with caplog.at_level(logging.WARNING):
            assert normalise_force_season(5, enabled) is None
        assert any("disabled" in msg for msg in _warnings(caplog))


class TestNormaliseStormChance:
    @pytest.mark.parametrize("value", [0, 0.0, 0.25, 1, 1.0])
    def test_valid(self, value):
        assert normalise_storm_chance(value) == float(value)

    @pytest.mark.parametrize("value", [-0.1, 1.5, "0.5", None, True, float("nan")])
    def test_invalid(self, value, caplog):
        with caplog.at_level(logging.WARNING):
            assert normalise_storm_chance(value) == 0.1
        assert any("Invalid stormChance" in msg for msg in _warnings(caplog))


# ---------------------------------------------------------------------------
# config_from_dict
# ---------------------------------------------------------------------------

class TestConfigFromDict:
    def test_empty_gives_defaults(self):
        assert config_from_dict({}).model_dump() == DEFAULTS

    def test_full_config(self):
        config = config_from_dict({
            "enabled": True,
            "forceSeason": 2,
            "enableStorms": False,
            "stormChance": 0.3,
            "calendar": "southern_legacy",
            "consoleMessages": False,
        })
        assert config.force_season is S.WINTER
        assert config.storms_enabled is False
        assert config.storm_chance == 0.3
        assert config.calendar == "southern_legacy"
        assert config.console_messages is False

    def test_legacy_enable_key(self):
        assert config_from_dict({"enable": False}).enabled is False

    def test_enabled_takes_precedence(self):
        assert config_from_dict({"enabled": False, "enable": True}).enabled is False

    def test_non_bool_enabled_falls_back(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert config_from_dict({"enabled": "no"}).enabled is True
        assert _warnings(caplog)

    def test_legacy_auto_sentinel(self):
        assert config_from_dict({"forceSeason": -1}).force_season is None

    def test_out_of_range_force_season(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = config_from_dict({"forceSeason": 9})
        assert config.force_season is None
        assert _warnings(caplog)

    def test_unknown_calendar(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = config_from_dict({"calendar": "northern"})
        assert config.calendar == "southern"
        assert any("Unknown calendar" in msg for msg in _warnings(caplog))

    def test_enabled_seasons_subset_switches_calendar(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = config_from_dict({
                "enabledSeasons": [0, 1, 2, 3, 4, 6],
                "forceSeason": 5,
            })
        assert config.calendar == "southern_legacy"
        assert config.force_season is None
        assert S.EARLY_SPRING not in config.enabled_seasons
        assert len(_warnings(caplog)) == 2

    def test_enabled_seasons_by_name(self):
        config = config_from_dict({
            "enabledSeasons": ["summer", "autumn", "winter", "spring"],
            "calendar": "southern_basic",
        })
        assert config.enabled_seasons == frozenset({S.SUMMER, S.AUTUMN, S.WINTER, S.SPRING})
        assert config.calendar == "southern_basic"
        assert config.storms_enabled is False

    def test_summer_always_enabled(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = config_from_dict({"enabledSeasons": [1, 2, 3], "calendar": "southern_basic"})
        assert S.SUMMER in config.enabled_seasons
        assert any("Summer cannot be disabled" in msg for msg in _warnings(caplog))

    def test_unknown_season_names_ignored(self):
        config = config_from_dict({"enabledSeasons": [0, 1, 2, 3, "monsoon"]})
        assert config.enabled_seasons == frozenset({S.SUMMER, S.AUTUMN, S.WINTER, S.SPRING})
        assert config.calendar == "southern_basic"

    def test_no_compatible_calendar_enables_everything(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = config_from_dict({"enabledSeasons": [0]})
        assert config.enabled_seasons == ALL_SEASONS
        assert config.calendar == "southern"

    def test_enabled_seasons_not_a_list(self):
        assert config_from_dict({"enabledSeasons": "all"}).enabled_seasons == ALL_SEASONS

    def test_storm_chance_zero_kept(self):
        assert config_from_dict({"stormChance": 0}).storm_chance == 0.0


# ---------------------------------------------------------------------------
# load_mod_config
# ---------------------------------------------------------------------------

class TestLoadModConfig:
    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING):
            config = load_mod_config(tmp_path / "nope.jsonc")
        assert config.model_dump() == DEFAULTS
        assert any("not found" in msg for msg in _warnings(caplog))

    def test_malformed_file(self, write_config, caplog):
        path = write_config('{"enabled": true, "stormChance": }')
        with caplog.at_level(logging.WARNING):
            config = load_mod_config(path)
        assert config.model_dump() == DEFAULTS
        assert any("Error parsing config file" in msg for msg in _warnings(caplog))

    def test_not_an_object(self, write_config):
        assert load_mod_config(write_config("[1, 2, 3]")).model_dump() == DEFAULTS

    def test_binary_garbage(self, tmp_path):
        path = tmp_path / "config.jsonc"
        path.write_bytes(b"\xff\xfe\x00garbage")
        assert load_mod_config(path).model_dump() == DEFAULTS

    def test_commented_file(self, write_config):
        path = write_config("""
        {
            // turn storms right up
            "stormChance": 0.75,
            "forceSeason": null, /* auto */
        }
        """)
        config = load_mod_config(path)
        assert config.storm_chance == 0.75
        assert config.force_season is None

    def test_disabled(self, write_config):
        assert load_mod_config(write_config('{"enabled": false}')).enabled is False

    def test_accepts_str_path(self, write_config):
        path = write_config('{"forceSeason": 4}')
        assert load_mod_config(str(path)).force_season is S.LATE_AUTUMN

    def test_shipped_config_matches_defaults(self):
        assert load_mod_config(CONFIG_DIR / "config.jsonc").model_dump() == DEFAULTS
