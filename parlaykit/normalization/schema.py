"""Validation of parsed predictions before they reach the parlay engine."""

from typing import List, Sequence, Set, Tuple
import logging
import math

from parlaykit.exceptions import PredictionValidationError
from parlaykit.models.types import Prediction

logger = logging.getLogger(__name__)


def _problem(prediction: Prediction, seen: Set[Tuple[str, str]]) -> str:
    pct = prediction.home_win_pct
    if not math.isfinite(pct) or pct <= 0 or pct >= 1:
        return f"home win % {pct} is outside (0, 1)"
    if (prediction.start, prediction.matchup) in seen:
        return f"duplicate game '{prediction.matchup}' at {prediction.start}"
    return ""


def validate_predictions(
    predictions: Sequence[Prediction],
    strict: bool = False,
) -> List[Prediction]:
    """
    Enforce the engine's input contract.

    Every home win probability must lie strictly between 0 and 1, and each
    game (start + matchup) may appear once. In strict mode the first
    offending row raises PredictionValidationError; otherwise offending
    rows are dropped with a warning and the first occurrence of a game wins.
    """
    kept: List[Prediction] = []
    seen: Set[Tuple[str, str]] = set()
    for idx, prediction in enumerate(predictions):
        problem = _problem(prediction, seen)
        if problem:
            if strict:
                raise PredictionValidationError(idx, problem)
            logger.warning("Dropping prediction row %d: %s", idx, problem)
            continue
        seen.add((prediction.start, prediction.matchup))
        kept.append(prediction)
    return kept
