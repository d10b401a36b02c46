"""Input normalization and validation."""

from parlaykit.normalization.schema import validate_predictions

__all__ = ["validate_predictions"]
