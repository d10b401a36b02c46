"""Report tables and CSV export."""

from parlaykit.reporting.csv_output import write_rows_csv
from parlaykit.reporting.tables import (
    predictions_frame,
    best_bets_frame,
    parlays_frame,
    render_table,
)

__all__ = [
    "write_rows_csv",
    "predictions_frame",
    "best_bets_frame",
    "parlays_frame",
    "render_table",
]
