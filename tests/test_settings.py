import json
import logging

import pytest

from pixel_starfield.constants import STAR_COUNT
from pixel_starfield.settings import (
    SettingsError,
    StarFieldSettings,
    load_settings,
    save_settings,
    settings_from_dict,
)


def test_defaults_match_constants():
    settings = StarFieldSettings()
    assert settings.star_count == STAR_COUNT == 120
    assert settings.size_tier_thresholds == (0.85, 0.5)
    assert settings.speed_range == (0.1, 0.4)
    assert (settings.twinkle_baseline, settings.twinkle_amplitude, settings.twinkle_rate) == (0.3, 0.7, 0.001)


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "nope.json") == StarFieldSettings()


def test_save_then_load(tmp_path):
    path = save_settings(StarFieldSettings(star_count=40, speed_range=(0.2, 0.3)), tmp_path / "cfg" / "s.json")
    loaded = load_settings(path)
    assert loaded.star_count == 40
    assert loaded.speed_range == (0.2, 0.3)
    assert loaded.background == StarFieldSettings().background


def test_partial_file_keeps_other_defaults(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"fps": 30}))
    loaded = load_settings(path)
    assert loaded.fps == 30
    assert loaded.star_count == 120


def test_malformed_json_falls_back(tmp_path, caplog):
    path = tmp_path / "s.json"
    path.write_text("{not json")
    with caplog.at_level(logging.WARNING):
        assert load_settings(path) == StarFieldSettings()
    assert "using defaults" in caplog.text


def test_non_object_json_falls_back(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("[1, 2, 3]")
    assert load_settings(path) == StarFieldSettings()


def test_unknown_keys_are_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        settings = settings_from_dict({"star_count": 7, "comet_count": 3})
    assert settings.star_count == 7
    assert "comet_count" in caplog.text


@pytest.mark.parametrize(
    "overrides",
    [
        {"star_count": -1},
        {"size_tier_thresholds": (1.5, 0.5)},
        {"size_tier_thresholds": (0.5,)},
        {"speed_range": (0.0, 0.4)},
        {"speed_range": (0.4, 0.1)},
        {"twinkle_baseline": 0.5, "twinkle_amplitude": 0.7},
        {"twinkle_amplitude": -0.1},
        {"width": 0},
        {"fps": 0},
        {"background": (300, 0, 0)},
        {"star_count": "many"},
        {"star_count": 1.5},
        {"star_count": True},
        {"speed_range": 5},
        {"speed_range": ("slow", "fast")},
        {"twinkle_rate": "fast"},
        {"background": "navy"},
        {"fps": 59.9},
    ],
)
def test_invalid_values_raise(overrides):
    with pytest.raises(SettingsError):
        StarFieldSettings(**overrides)


def test_invalid_file_values_raise(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"star_count": -5}))
    with pytest.raises(SettingsError):
        load_settings(path)


@pytest.mark.parametrize(
    "payload",
    [{"star_count": "many"}, {"speed_range": 5}, {"star_count": 1.5}],
)
def test_wrongly_typed_file_values_raise(tmp_path, payload):
    path = tmp_path / "s.json"
    path.write_text(json.dumps(payload))
    with pytest.raises(SettingsError):
        load_settings(path)
