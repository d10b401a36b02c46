"""
Constants for parlaykit.

Engine limits, leg-count bounds and predictions sheet markers.
"""

# =============================================================================
# ENGINE LIMITS
# =============================================================================

# Hard ceiling on enumerated leg combinations per generation request.
# Enumeration stops once it is reached, so earlier combinations (in
# lexicographic order over the leg list) are favored.
MAX_COMBINATIONS = 10_000

# Legs in the favorites-only slip.
FAVORITES_SLIP_SIZE = 5

# Allowed parlay sizes; the upper bound also depends on the games loaded.
MIN_PARLAY_LEGS = 2
MAX_PARLAY_LEGS = 10

# Stake used for "payout on $100" figures.
DEFAULT_STAKE = 100.0


# =============================================================================
# PICK SIDES
# =============================================================================

HOME = "home"
AWAY = "away"


# =============================================================================
# CONFIDENCE TIERS
# =============================================================================

STRONG_WIN_PCT = 0.70
LEAN_WIN_PCT = 0.50


# =============================================================================
# PREDICTIONS SHEET
# =============================================================================

# A first line containing any of these (lowercased) is treated as a header.
HEADER_MARKERS = ("matchup", "home win")

MATCHUP_SEPARATOR = " @ "

# Sort keys for the predictions table.
PREDICTION_SORT_KEYS = ("start", "matchup", "win_pct", "implied_home_spread")


def get_max_parlay_legs(prediction_count: int) -> int:
    """Largest parlay size offered for a given number of games."""
    return min(MAX_PARLAY_LEGS, prediction_count)
