"""Utility modules for parlaykit."""

from parlaykit.utils.odds import (
    prob_to_american_odds,
    prob_to_decimal_odds,
    decimal_to_american_odds,
    american_to_decimal,
    american_to_implied_prob,
    calculate_payout,
    format_american_odds,
    format_percent,
    format_spread,
)

__all__ = [
    "prob_to_american_odds",
    "prob_to_decimal_odds",
    "decimal_to_american_odds",
    "american_to_decimal",
    "american_to_implied_prob",
    "calculate_payout",
    "format_american_odds",
    "format_percent",
    "format_spread",
]
