"""
Predictions sheet ingestion.

Reads tab-separated rows of ``Start, Matchup, Home win %, Implied Home
Spread`` where the matchup is written ``Away Team @ Home Team``. Rows that
do not fit that shape are skipped, never fatal.
"""

from pathlib import Path
from typing import List
import logging
import sys

import numpy as np
import pandas as pd

from parlaykit.constants import HEADER_MARKERS, MATCHUP_SEPARATOR
from parlaykit.exceptions import PredictionParseError
from parlaykit.models.types import Prediction

logger = logging.getLogger(__name__)

_COLUMNS = ["start", "matchup", "home_win_raw", "spread_raw"]

# Leading numeric prefix, so "0.956*" reads as 0.956 and "n/a" as missing.
_NUMBER_PREFIX = r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"


def _parse_number_prefix(values: pd.Series) -> pd.Series:
    return pd.to_numeric(values.str.extract(_NUMBER_PREFIX, expand=False), errors="coerce")


def _split_rows(raw: str) -> List[List[str]]:
    lines = raw.strip().split("\n")
    if len(lines) < 2:
        return []

    header = lines[0].lower()
    has_header = any(marker in header for marker in HEADER_MARKERS)
    data_lines = lines[1:] if has_header else lines

    rows = []
    for line in data_lines:
        cols = [col.strip() for col in line.split("\t")]
        if len(cols) < len(_COLUMNS):
            continue
        rows.append(cols[:len(_COLUMNS)])
    return rows


def parse_predictions(raw: str) -> List[Prediction]:
    """
    Parse pasted prediction text.

    A first line mentioning "matchup" or "home win" is a header. At least two
    lines are required, so a single data row without a header yields nothing.

    Args:
        raw: Tab-separated text

    Returns:
        Predictions in input order (possibly empty)
    """
    rows = _split_rows(raw)
    if not rows:
        return []

    frame = pd.DataFrame(rows, columns=_COLUMNS)
    teams = frame["matchup"].str.rpartition(MATCHUP_SEPARATOR)
    frame["away_team"] = teams[0].str.strip()
    frame["home_team"] = teams[2].str.strip()
    frame["home_win_pct"] = _parse_number_prefix(frame["home_win_raw"])
    frame["implied_home_spread"] = _parse_number_prefix(frame["spread_raw"])

    valid = (
        (teams[1] == MATCHUP_SEPARATOR)
        & np.isfinite(frame["home_win_pct"])
        & np.isfinite(frame["implied_home_spread"])
    )
    skipped = int((~valid).sum())
    if skipped:
        logger.debug("Skipped %d malformed prediction rows", skipped)

    return [
        Prediction(
            start=row.start,
            away_team=row.away_team,
            home_team=row.home_team,
            matchup=row.matchup,
            home_win_pct=float(row.home_win_pct),
            implied_home_spread=float(row.implied_home_spread),
        )
        for row in frame.loc[valid].itertuples(index=False)
    ]


def load_predictions(path: str) -> List[Prediction]:
    """Read and parse a predictions file ('-' for stdin); raise if nothing parses."""
    if path == "-":
        source = "<stdin>"
        text = sys.stdin.read()
    else:
        source = str(Path(path))
        text = Path(path).read_text(encoding="utf-8")
    predictions = parse_predictions(text)
    if not predictions:
        raise PredictionParseError(
            source,
            "expected tab-separated columns: Start, Matchup, Home win %, Implied Home Spread",
        )
    logger.info("Loaded %d predictions from %s", len(predictions), source)
    return predictions
