"""Single-game rankings: top money-line bets and the predictions table order."""

from typing import List, Sequence

from parlaykit.constants import LEAN_WIN_PCT, PREDICTION_SORT_KEYS, STRONG_WIN_PCT
from parlaykit.models.types import BestBet, Prediction
from parlaykit.parlays.legs import prediction_to_best_leg


def best_win_pct(prediction: Prediction) -> float:
    """Win probability of the favored side."""
    if prediction.home_win_pct >= 0.5:
        return prediction.home_win_pct
    return 1 - prediction.home_win_pct


def win_pct_tier(win_pct: float) -> str:
    if win_pct >= STRONG_WIN_PCT:
        return "strong"
    if win_pct >= LEAN_WIN_PCT:
        return "lean"
    return "underdog"


def to_best_bet(prediction: Prediction) -> BestBet:
    leg = prediction_to_best_leg(prediction)
    return BestBet(
        prediction=prediction,
        team=leg.team,
        opponent=leg.opponent,
        win_pct=leg.win_pct,
        american_odds=leg.american_odds,
        is_home_pick=leg.is_home_pick,
    )


def rank_best_bets(predictions: Sequence[Prediction], limit: int) -> List[BestBet]:
    """Favored side of each game, most confident first, truncated to ``limit``."""
    bets = [to_best_bet(p) for p in predictions]
    bets.sort(key=lambda bet: bet.win_pct, reverse=True)
    return bets[:limit]


def sort_predictions(
    predictions: Sequence[Prediction],
    key: str = "win_pct",
    descending: bool = True,
) -> List[Prediction]:
    """
    Order predictions for the table view.

    ``win_pct`` sorts by the favored side's probability; the other keys
    sort by the prediction field of the same name.
    """
    if key not in PREDICTION_SORT_KEYS:
        raise ValueError(f"Unknown sort key '{key}'. Valid keys: {', '.join(PREDICTION_SORT_KEYS)}")
    if key == "win_pct":
        sort_key = best_win_pct
    else:
        sort_key = lambda p: getattr(p, key)  # noqa: E731
    return sorted(predictions, key=sort_key, reverse=descending)
