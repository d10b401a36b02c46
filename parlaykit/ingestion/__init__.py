"""Prediction ingestion."""

from parlaykit.ingestion.predictions import parse_predictions, load_predictions

__all__ = ["parse_predictions", "load_predictions"]
