"""Operational helpers."""

from parlaykit.ops.logging import configure_logging
from parlaykit.ops.metrics import MetricsRecorder, InMemoryMetricsRecorder, get_metrics_recorder

__all__ = ["configure_logging", "MetricsRecorder", "InMemoryMetricsRecorder", "get_metrics_recorder"]
