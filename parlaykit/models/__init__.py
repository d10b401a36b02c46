"""Record types."""

from parlaykit.models.types import (
    Prediction,
    ParlayLeg,
    ParlaySlip,
    ParlayFilterOptions,
    BestBet,
)

__all__ = ["Prediction", "ParlayLeg", "ParlaySlip", "ParlayFilterOptions", "BestBet"]
