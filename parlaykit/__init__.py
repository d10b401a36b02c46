"""Money-line odds, best bets and parlay builder for game predictions."""

__all__ = [
    "cli",
    "config",
    "constants",
    "exceptions",
    "ingestion",
    "normalization",
    "models",
    "parlays",
    "reporting",
    "ops",
    "utils",
]

__version__ = "0.1.0"
