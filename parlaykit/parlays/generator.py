"""
Parlay generation.

Builds one best-side leg per game, filters legs by odds magnitude, walks
leg combinations of the requested size, and keeps the slips whose combined
odds pass the total-odds filters.

Ranking is ascending combined decimal odds: the likeliest (shortest-priced)
parlay comes first.
"""

from itertools import combinations, islice
from typing import Iterator, List, Optional, Sequence, Tuple
import logging
import time

from parlaykit.constants import FAVORITES_SLIP_SIZE, MAX_COMBINATIONS
from parlaykit.models.types import ParlayFilterOptions, ParlayLeg, ParlaySlip, Prediction
from parlaykit.ops.metrics import MetricsRecorder
from parlaykit.parlays.legs import build_parlay_slip, prediction_to_best_leg

logger = logging.getLogger(__name__)


def iter_leg_combinations(
    legs: Sequence[ParlayLeg],
    num_legs: int,
    max_results: int = MAX_COMBINATIONS,
) -> Iterator[Tuple[ParlayLeg, ...]]:
    """
    Lazily yield size-``num_legs`` subsets of ``legs``, at most ``max_results``.

    Subsets come in lexicographic order of leg position, and the walk stops
    at the cap without materializing the rest. With a cap in force, subsets
    built from legs late in the list are never reached; that bias is
    accepted in exchange for bounded work. Each call starts a fresh walk.
    """
    return islice(combinations(legs, num_legs), max_results)


def filter_legs_by_odds(
    legs: Sequence[ParlayLeg],
    max_per_leg_odds: Optional[int] = None,
    min_per_leg_odds: Optional[int] = None,
) -> List[ParlayLeg]:
    """Keep legs whose absolute American odds fall inside the given bounds."""
    kept = list(legs)
    if max_per_leg_odds is not None:
        max_abs = abs(max_per_leg_odds)
        kept = [leg for leg in kept if abs(leg.american_odds) <= max_abs]
    if min_per_leg_odds is not None:
        min_abs = abs(min_per_leg_odds)
        kept = [leg for leg in kept if abs(leg.american_odds) >= min_abs]
    return kept


def passes_total_odds(
    slip: ParlaySlip,
    max_total_odds: Optional[int] = None,
    min_total_odds: Optional[int] = None,
) -> bool:
    """
    Total-odds filter on the slip's combined American odds.

    A maximum only constrains plus-money parlays; favorite-priced parlays
    always pass it. A minimum rejects every favorite-priced parlay.
    """
    odds = slip.combined_american_odds
    if max_total_odds is not None and odds > 0 and odds > max_total_odds:
        return False
    if min_total_odds is not None and (odds <= 0 or odds < min_total_odds):
        return False
    return True


def generate_parlays(
    predictions: Sequence[Prediction],
    options: ParlayFilterOptions,
    limit: int,
    metrics: Optional[MetricsRecorder] = None,
) -> List[ParlaySlip]:
    """
    Generate up to ``limit`` parlays from the predictions.

    Args:
        predictions: Games to draw legs from (one leg per game)
        options: Leg count and odds bounds
        limit: Maximum number of slips returned
        metrics: Optional recorder for generation counters and timing

    Returns:
        Slips sorted by ascending combined decimal odds. Empty when too few
        legs survive the per-leg filters or no slip passes the total filters.
    """
    started = time.perf_counter()

    legs = [prediction_to_best_leg(p) for p in predictions]
    legs = filter_legs_by_odds(legs, options.max_per_leg_odds, options.min_per_leg_odds)

    if options.num_legs < 1 or len(legs) < options.num_legs:
        logger.debug(
            "Only %d eligible legs for a %d-leg parlay", len(legs), options.num_legs
        )
        return []

    slips = [build_parlay_slip(combo) for combo in iter_leg_combinations(legs, options.num_legs)]
    combination_count = len(slips)

    slips = [
        slip for slip in slips
        if passes_total_odds(slip, options.max_total_odds, options.min_total_odds)
    ]
    slips.sort(key=lambda slip: slip.combined_decimal_odds)
    results = slips[:limit]

    if combination_count >= MAX_COMBINATIONS:
        logger.debug("Combination cap of %d reached for %d legs", MAX_COMBINATIONS, len(legs))
    if metrics is not None:
        metrics.increment("parlays.combinations", combination_count)
        metrics.increment("parlays.generated", len(results))
        if combination_count >= MAX_COMBINATIONS:
            metrics.increment("parlays.combination_cap_reached")
        metrics.timing("parlays.generate", (time.perf_counter() - started) * 1000)

    return results


def build_favorites_slip(predictions: Sequence[Prediction]) -> Optional[ParlaySlip]:
    """
    Single parlay of the least confident favorites.

    Takes the favored side of every game, orders by ascending win
    probability and combines the first five. No odds filters apply.
    Returns None when there are no predictions.
    """
    legs = sorted(
        (prediction_to_best_leg(p) for p in predictions),
        key=lambda leg: leg.win_pct,
    )[:FAVORITES_SLIP_SIZE]
    if not legs:
        return None
    return build_parlay_slip(legs)
