"""
Pytest configuration and shared fixtures for parlaykit tests.
"""

import pytest

from tests.factories import make_prediction

_CONFIG_ENV_VARS = [
    "PARLAY_NUM_LEGS",
    "PARLAY_LIMIT",
    "TOP_BETS_LIMIT",
    "MAX_TOTAL_ODDS",
    "MIN_TOTAL_ODDS",
    "MAX_PER_LEG_ODDS",
    "MIN_PER_LEG_ODDS",
    "PARLAYKIT_OUTPUT_DIR",
    "STRICT_VALIDATION",
    "PARLAYKIT_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Keep the caller's environment out of Config.from_env()."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def uconn_game():
    return make_prediction(
        0.956,
        away="Creighton",
        home="UConn",
        start="Feb. 18, 2026, 5 p.m.",
        spread=18.2,
    )


@pytest.fixture
def road_favorite_game():
    """Home side at 40%, so the away team is the 60% favorite."""
    return make_prediction(
        0.4,
        away="Purdue",
        home="Iowa",
        start="Feb. 18, 2026, 7 p.m.",
        spread=-3.5,
    )


@pytest.fixture
def slate():
    """Seven games with distinct favorite probabilities."""
    probs = [0.62, 0.35, 0.81, 0.55, 0.27, 0.71, 0.5]
    return [
        make_prediction(p, away=f"Away{i}", home=f"Home{i}", start=f"Feb. 18, 2026, {i + 1} p.m.")
        for i, p in enumerate(probs)
    ]


@pytest.fixture
def sample_tsv():
    return (
        "Start\tMatchup\tHome win %\tImplied Home Spread\n"
        "Feb. 18, 2026, 5 p.m.\tCreighton @ UConn\t0.956\t18.2\n"
        "Feb. 18, 2026, 7 p.m.\tPurdue @ Iowa\t0.4\t-3.5\n"
        "Feb. 18, 2026, 8 p.m.\tDuke @ North Carolina\t0.55\t1.5\n"
        "Feb. 18, 2026, 9 p.m.\tKansas @ Baylor\t0.3\t-6\n"
    )
