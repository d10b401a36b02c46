"""Leg and slip construction."""

import math
from typing import Sequence

from parlaykit.constants import AWAY, HOME
from parlaykit.models.types import ParlayLeg, ParlaySlip, Prediction
from parlaykit.utils.odds import (
    decimal_to_american_odds,
    prob_to_american_odds,
    prob_to_decimal_odds,
)


def prediction_to_best_leg(prediction: Prediction) -> ParlayLeg:
    """Money-line leg on the side the model favors (ties go to the home team)."""
    home_prob = prediction.home_win_pct
    away_prob = 1 - home_prob
    is_home_favorite = home_prob >= away_prob

    win_pct = home_prob if is_home_favorite else away_prob
    return ParlayLeg(
        prediction=prediction,
        pick=HOME if is_home_favorite else AWAY,
        win_pct=win_pct,
        american_odds=prob_to_american_odds(win_pct),
        decimal_odds=prob_to_decimal_odds(win_pct),
    )


def build_parlay_slip(legs: Sequence[ParlayLeg]) -> ParlaySlip:
    """
    Combine legs into one parlay, treating outcomes as independent.

    The combined decimal odds are the product of the legs' decimal odds.
    Callers must pass at least one leg: an empty product is 1.0, which has
    no American odds.
    """
    combined_decimal_odds = math.prod(leg.decimal_odds for leg in legs)
    return ParlaySlip(
        legs=tuple(legs),
        combined_decimal_odds=combined_decimal_odds,
        combined_american_odds=decimal_to_american_odds(combined_decimal_odds),
        implied_probability=1 / combined_decimal_odds,
    )
