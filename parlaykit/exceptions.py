"""
Custom exceptions for parlaykit.

The odds and parlay engine never raises for numeric edge cases: it returns
the ``0`` odds sentinel or an empty list instead. These exceptions belong to
the layers around it (ingestion, validation, configuration) so callers can
tell "bad input file" apart from "no parlays matched".

Usage:
    from parlaykit.exceptions import PredictionParseError

    try:
        predictions = load_predictions("games.tsv")
    except PredictionParseError as e:
        print(f"Nothing to analyze: {e}")
"""

from typing import Optional


class ParlayKitError(Exception):
    """
    Base exception for all parlaykit errors.

    All custom exceptions inherit from this, allowing:
        except ParlayKitError:
            # Catch any system error
    """
    pass


# =============================================================================
# INPUT ERRORS
# =============================================================================

class PredictionParseError(ParlayKitError):
    """
    No predictions could be read from an input source.

    Raised when:
    - The input text is empty
    - No row has the Start / Matchup / Home win % / Implied Home Spread shape
    """

    def __init__(self, source: str, message: Optional[str] = None):
        self.source = source
        msg = f"Could not parse any predictions from {source}"
        if message:
            msg += f": {message}"
        super().__init__(msg)


class PredictionValidationError(ParlayKitError, ValueError):
    """
    A parsed prediction breaks the parser contract.

    Raised in strict mode when:
    - home win probability is not strictly between 0 and 1
    - the same game (start + matchup) appears twice
    """

    def __init__(self, row: int, reason: str):
        self.row = row
        self.reason = reason
        super().__init__(f"Prediction row {row} is invalid: {reason}")


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(ParlayKitError):
    """
    Configuration or setup error.

    Raised when:
    - A config file path does not exist
    - A JSON config file is not an object
    """

    def __init__(self, setting: str, message: str):
        self.setting = setting
        super().__init__(f"Configuration error ({setting}): {message}")
