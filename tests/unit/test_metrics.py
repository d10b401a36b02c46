"""Unit tests for the in-memory metrics recorder."""

from parlaykit.ops.metrics import InMemoryMetricsRecorder, get_metrics_recorder


def test_counters_and_timings():
    recorder = InMemoryMetricsRecorder()
    recorder.increment("parlays.generated", 3)
    recorder.increment("parlays.generated")
    recorder.timing("parlays.generate", 2.0)
    recorder.timing("parlays.generate", 4.0)

    snapshot = recorder.snapshot()
    assert snapshot["counters"] == {"parlays.generated": 4}
    assert snapshot["timings"]["parlays.generate"] == {"count": 2, "avg_ms": 3.0, "max_ms": 4.0}


def test_timed_context_records_once():
    recorder = InMemoryMetricsRecorder()
    with recorder.timed("cli.parlays"):
        pass
    assert recorder.snapshot()["timings"]["cli.parlays"]["count"] == 1


def test_reset_and_default_recorder():
    recorder = get_metrics_recorder()
    assert recorder is get_metrics_recorder()
    recorder.increment("x")
    recorder.reset()
    assert recorder.snapshot() == {"counters": {}, "timings": {}}
