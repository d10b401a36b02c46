"""
Record types shared by ingestion, the parlay engine and reporting.

Predictions come from the parser once per load and are never mutated. Legs
and slips are derived values, rebuilt on every request.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from parlaykit.constants import HOME


@dataclass(frozen=True)
class Prediction:
    """Model output for one game."""
    start: str
    away_team: str
    home_team: str
    matchup: str
    home_win_pct: float  # probability the home team wins
    implied_home_spread: float

    @property
    def away_win_pct(self) -> float:
        return 1 - self.home_win_pct


@dataclass(frozen=True)
class ParlayLeg:
    """Single-game money-line wager on one side of a prediction."""
    prediction: Prediction
    pick: str  # 'home' or 'away'
    win_pct: float
    american_odds: int
    decimal_odds: float

    @property
    def is_home_pick(self) -> bool:
        return self.pick == HOME

    @property
    def team(self) -> str:
        return self.prediction.home_team if self.is_home_pick else self.prediction.away_team

    @property
    def opponent(self) -> str:
        return self.prediction.away_team if self.is_home_pick else self.prediction.home_team


@dataclass(frozen=True)
class ParlaySlip:
    """Legs combined into one wager, assuming independent outcomes."""
    legs: Tuple[ParlayLeg, ...]
    combined_decimal_odds: float
    combined_american_odds: int
    implied_probability: float

    @property
    def num_legs(self) -> int:
        return len(self.legs)


@dataclass(frozen=True)
class ParlayFilterOptions:
    """
    Parlay search settings.

    Every odds bound is an absolute American-odds magnitude: a per-leg bound
    of 200 covers both +200 and -200.
    """
    num_legs: int
    max_total_odds: Optional[int] = None
    min_total_odds: Optional[int] = None
    max_per_leg_odds: Optional[int] = None
    min_per_leg_odds: Optional[int] = None


@dataclass(frozen=True)
class BestBet:
    """Money-line pick shown in the top bets list."""
    prediction: Prediction
    team: str
    opponent: str
    win_pct: float
    american_odds: int
    is_home_pick: bool

    @property
    def spread(self) -> float:
        """Implied spread from the picked team's point of view."""
        spread = self.prediction.implied_home_spread
        return -spread if self.is_home_pick else spread
