"""Leg, slip and parlay generation."""

from parlaykit.parlays.legs import prediction_to_best_leg, build_parlay_slip
from parlaykit.parlays.generator import (
    iter_leg_combinations,
    filter_legs_by_odds,
    passes_total_odds,
    generate_parlays,
    build_favorites_slip,
)
from parlaykit.parlays.best_bets import (
    best_win_pct,
    win_pct_tier,
    rank_best_bets,
    sort_predictions,
)

__all__ = [
    "prediction_to_best_leg",
    "build_parlay_slip",
    "iter_leg_combinations",
    "filter_legs_by_odds",
    "passes_total_odds",
    "generate_parlays",
    "build_favorites_slip",
    "best_win_pct",
    "win_pct_tier",
    "rank_best_bets",
    "sort_predictions",
]
