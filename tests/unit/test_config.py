"""Unit tests for run configuration."""

import json

import pytest

from parlaykit.config import Config
from parlaykit.exceptions import ConfigurationError


def test_defaults():
    config = Config.from_env()
    assert config.num_legs == 3
    assert config.parlay_limit == 5
    assert config.top_bets_limit == 5
    assert config.max_total_odds is None
    assert config.min_per_leg_odds is None
    assert config.strict_validation is False


def test_from_env(monkeypatch):
    monkeypatch.setenv("PARLAY_NUM_LEGS", "4")
    monkeypatch.setenv("MAX_TOTAL_ODDS", "500")
    monkeypatch.setenv("MIN_PER_LEG_ODDS", "-120")
    monkeypatch.setenv("STRICT_VALIDATION", "yes")
    config = Config.from_env()
    assert config.num_legs == 4
    assert config.max_total_odds == 500
    assert config.min_per_leg_odds == -120
    assert config.strict_validation is True


def test_malformed_values_fall_back(monkeypatch):
    monkeypatch.setenv("PARLAY_LIMIT", "lots")
    monkeypatch.setenv("MAX_TOTAL_ODDS", "+five hundred")
    config = Config.from_env()
    assert config.parlay_limit == 5
    assert config.max_total_odds is None


def test_env_file_overrides_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("PARLAY_NUM_LEGS", "4")
    monkeypatch.setenv("PARLAY_LIMIT", "8")
    env_path = tmp_path / "parlaykit.env"
    env_path.write_text(
        "# parlay settings\nPARLAY_NUM_LEGS=2\nMIN_TOTAL_ODDS='200'\nnot a setting\n",
        encoding="utf-8",
    )
    config = Config.load(str(env_path))
    assert config.num_legs == 2
    assert config.parlay_limit == 8
    assert config.min_total_odds == 200


def test_json_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"TOP_BETS_LIMIT": 3, "MAX_PER_LEG_ODDS": 250}), encoding="utf-8")
    config = Config.load(str(path))
    assert config.top_bets_limit == 3
    assert config.max_per_leg_odds == 250


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError):
        Config.load(str(tmp_path / "missing.env"))


def test_json_config_must_be_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        Config.load(str(path))


def test_filter_options():
    config = Config(num_legs=4, max_total_odds=600, min_per_leg_odds=110)
    options = config.filter_options()
    assert options.num_legs == 4
    assert options.max_total_odds == 600
    assert options.min_per_leg_odds == 110
    assert options.min_total_odds is None
    assert config.filter_options(num_legs=2).num_legs == 2


def test_resolve_output_path(tmp_path, monkeypatch):
    monkeypatch.setenv("PARLAYKIT_OUTPUT_DIR", str(tmp_path / "reports"))
    config = Config.from_env()
    assert config.resolve_output_path("top.csv") == tmp_path / "reports" / "top.csv"
    absolute = tmp_path / "elsewhere.csv"
    assert config.resolve_output_path(str(absolute)) == absolute
