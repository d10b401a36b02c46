"""Unit tests for leg and slip construction."""

import math

import pytest

from parlaykit.parlays.legs import build_parlay_slip, prediction_to_best_leg
from parlaykit.utils.odds import decimal_to_american_odds
from tests.factories import make_prediction


def test_best_leg_home_favorite(uconn_game):
    leg = prediction_to_best_leg(uconn_game)
    assert leg.pick == "home"
    assert leg.team == "UConn"
    assert leg.opponent == "Creighton"
    assert leg.win_pct == pytest.approx(0.956)
    assert leg.american_odds == -2173
    assert leg.decimal_odds == pytest.approx(1 / 0.956)
    assert leg.prediction is uconn_game


def test_best_leg_away_favorite(road_favorite_game):
    leg = prediction_to_best_leg(road_favorite_game)
    assert leg.pick == "away"
    assert leg.team == "Purdue"
    assert leg.win_pct == pytest.approx(0.6)
    assert leg.american_odds == -150
    assert leg.decimal_odds == pytest.approx(1 / 0.6)


def test_best_leg_tie_goes_home():
    leg = prediction_to_best_leg(make_prediction(0.5))
    assert leg.pick == "home"
    assert leg.american_odds == -100
    assert leg.decimal_odds == pytest.approx(2.0)


def test_leg_odds_are_consistent():
    for prob in (0.05, 0.3, 0.5, 0.62, 0.9):
        leg = prediction_to_best_leg(make_prediction(prob))
        assert leg.win_pct >= 0.5
        assert decimal_to_american_odds(leg.decimal_odds) == pytest.approx(leg.american_odds, abs=1)


def test_slip_multiplies_decimal_odds(uconn_game, road_favorite_game):
    legs = [prediction_to_best_leg(uconn_game), prediction_to_best_leg(road_favorite_game)]
    slip = build_parlay_slip(legs)

    expected = (1 / 0.956) * (1 / 0.6)
    assert slip.combined_decimal_odds == pytest.approx(expected)
    assert slip.implied_probability * slip.combined_decimal_odds == pytest.approx(1.0)
    assert slip.combined_american_odds == decimal_to_american_odds(slip.combined_decimal_odds)
    assert slip.combined_american_odds == -135
    assert slip.legs == tuple(legs)
    assert slip.num_legs == 2


def test_single_leg_slip_matches_leg(road_favorite_game):
    leg = prediction_to_best_leg(road_favorite_game)
    slip = build_parlay_slip([leg])
    assert slip.combined_decimal_odds == pytest.approx(leg.decimal_odds)
    assert slip.combined_american_odds == leg.american_odds
    assert slip.implied_probability == pytest.approx(0.6)


def test_plus_money_parlay():
    legs = [prediction_to_best_leg(make_prediction(0.6)) for _ in range(3)]
    slip = build_parlay_slip(legs)
    # (1 / 0.6) ** 3 = 4.63 -> +363
    assert slip.combined_decimal_odds == pytest.approx(math.pow(1 / 0.6, 3))
    assert slip.combined_american_odds == 363
