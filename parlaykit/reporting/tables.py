"""
Display tables for predictions, top bets and parlays.

Each builder returns a pandas DataFrame of already-formatted display values,
ready for the terminal (``render_table``) or CSV export.
"""

from typing import Optional, Sequence

import pandas as pd

from parlaykit.constants import DEFAULT_STAKE
from parlaykit.models.types import BestBet, ParlaySlip, Prediction
from parlaykit.parlays.best_bets import to_best_bet, win_pct_tier
from parlaykit.utils.odds import (
    american_to_decimal,
    american_to_implied_prob,
    calculate_payout,
    format_american_odds,
    format_percent,
    format_spread,
)

PREDICTION_COLUMNS = ["start", "matchup", "pick", "spread", "win_pct", "tier", "money_line"]
BEST_BET_COLUMNS = [
    "rank", "team", "opponent", "start", "win_pct", "money_line",
    "decimal_odds", "break_even", "spread",
]
PARLAY_COLUMNS = [
    "rank", "num_legs", "legs", "combined_odds", "decimal_odds",
    "implied_probability", "payout",
]


def predictions_frame(predictions: Sequence[Prediction]) -> pd.DataFrame:
    rows = []
    for prediction in predictions:
        bet = to_best_bet(prediction)
        rows.append({
            "start": prediction.start,
            "matchup": f"{prediction.away_team} @ {prediction.home_team}",
            "pick": bet.team,
            "spread": format_spread(-abs(prediction.implied_home_spread)),
            "win_pct": format_percent(bet.win_pct),
            "tier": win_pct_tier(bet.win_pct),
            "money_line": format_american_odds(bet.american_odds),
        })
    return pd.DataFrame(rows, columns=PREDICTION_COLUMNS)


def best_bets_frame(bets: Sequence[BestBet]) -> pd.DataFrame:
    rows = [
        {
            "rank": rank,
            "team": bet.team,
            "opponent": bet.opponent,
            "start": bet.prediction.start,
            "win_pct": format_percent(bet.win_pct),
            "money_line": format_american_odds(bet.american_odds),
            "decimal_odds": round(american_to_decimal(bet.american_odds), 2),
            "break_even": format_percent(american_to_implied_prob(bet.american_odds)),
            "spread": format_spread(bet.spread),
        }
        for rank, bet in enumerate(bets, start=1)
    ]
    return pd.DataFrame(rows, columns=BEST_BET_COLUMNS)


def _describe_legs(slip: ParlaySlip) -> str:
    return "; ".join(
        f"{leg.team} {format_american_odds(leg.american_odds)} ({format_percent(leg.win_pct)})"
        for leg in slip.legs
    )


def parlays_frame(slips: Sequence[ParlaySlip], stake: float = DEFAULT_STAKE) -> pd.DataFrame:
    rows = [
        {
            "rank": rank,
            "num_legs": slip.num_legs,
            "legs": _describe_legs(slip),
            "combined_odds": format_american_odds(slip.combined_american_odds),
            "decimal_odds": round(slip.combined_decimal_odds, 2),
            "implied_probability": format_percent(slip.implied_probability, digits=2),
            "payout": f"${calculate_payout(slip.combined_decimal_odds, stake):.0f}",
        }
        for rank, slip in enumerate(slips, start=1)
    ]
    return pd.DataFrame(rows, columns=PARLAY_COLUMNS)


def render_table(frame: pd.DataFrame, empty_message: Optional[str] = None) -> str:
    """Plain-text table for terminal output."""
    if frame.empty:
        return empty_message or "No rows."
    return frame.to_string(index=False)
