"""
Odds conversion and betting math utilities.

Provides:
- Probability to odds conversions (American, Decimal)
- Decimal to American odds conversion
- American odds back to decimal / implied probability
- Payout and display formatting helpers

Probabilities outside the open interval (0, 1) have no meaningful price.
The probability converters return 0 for them instead of raising, so callers
must read 0 as "no odds", never as even money.
"""

import math


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (-2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


# =============================================================================
# PROBABILITY -> ODDS
# =============================================================================

def prob_to_american_odds(prob: float) -> int:
    """
    Convert a win probability to American odds.

    Favorites (prob >= 0.5) get negative odds, underdogs positive odds.

    Examples:
        0.50 -> -100
        0.60 -> -150
        0.40 -> +150

    Args:
        prob: Win probability (0 to 1, exclusive)

    Returns:
        American odds, or 0 when prob is outside (0, 1)
    """
    if prob <= 0 or prob >= 1:
        return 0
    if prob >= 0.5:
        return _round_half_away(-prob / (1 - prob) * 100)
    return _round_half_away((1 - prob) / prob * 100)


def prob_to_decimal_odds(prob: float) -> float:
    """
    Convert a win probability to decimal odds.

    Args:
        prob: Win probability (0 to 1, exclusive)

    Returns:
        1 / prob, or 0 when prob is outside (0, 1)
    """
    if prob <= 0 or prob >= 1:
        return 0
    return 1 / prob


def decimal_to_american_odds(decimal: float) -> int:
    """
    Convert decimal odds to American odds.

    Examples:
        2.00 -> +100
        3.50 -> +250
        1.50 -> -200

    Decimal odds of exactly 1.0 have no American equivalent; callers must
    only pass values above 1.

    Args:
        decimal: Decimal odds (> 1.0)

    Returns:
        American odds (positive at 2.0 and above, negative below)
    """
    if decimal >= 2:
        return _round_half_away((decimal - 1) * 100)
    return _round_half_away(-100 / (decimal - 1))


# =============================================================================
# AMERICAN ODDS -> OTHER FORMATS
# =============================================================================

def american_to_decimal(odds: int) -> float:
    """
    Decimal odds (total return per unit staked) for an American price.

    Examples:
        +150 -> 2.50
        -2173 -> 1.046

    Args:
        odds: Non-zero American odds

    Returns:
        Decimal odds above 1.0
    """
    if odds < 0:
        return 1 + 100 / -odds
    return 1 + odds / 100


def american_to_implied_prob(odds: int) -> float:
    """
    Break-even win probability of an American price.

    A bet at these odds has zero expected value when the team wins this
    often. Example: -150 -> 0.60, +150 -> 0.40.
    """
    if odds < 0:
        return -odds / (100 - odds)
    return 100 / (100 + odds)


def calculate_payout(decimal_odds: float, stake: float = 100.0) -> float:
    """Total return (stake included) of a winning wager."""
    return stake * decimal_odds


# =============================================================================
# FORMATTING
# =============================================================================

def format_american_odds(odds: int) -> str:
    """Format American odds with an explicit '+' for underdogs (0 -> '0')."""
    return f"+{odds}" if odds > 0 else f"{odds}"


def format_percent(prob: float, digits: int = 1) -> str:
    """0.956 -> '95.6%'"""
    return f"{prob * 100:.{digits}f}%"


def format_spread(spread: float) -> str:
    """Point spread with sign, 'PK' for a pick'em."""
    if spread == 0:
        return "PK"
    if spread > 0:
        return f"+{spread:g}"
    return f"-{abs(spread):g}"
