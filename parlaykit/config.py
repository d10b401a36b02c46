"""Run configuration: environment variables, optionally overridden by a file."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict
import json
import os

from parlaykit.exceptions import ConfigurationError
from parlaykit.models.types import ParlayFilterOptions


_DEFAULT_NUM_LEGS = 3
_DEFAULT_PARLAY_LIMIT = 5
_DEFAULT_TOP_BETS_LIMIT = 5
_DEFAULT_OUTPUT_DIR = "output"
_DEFAULT_STRICT_VALIDATION = False


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _coerce_int(value: Optional[str], default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _coerce_optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _coerce_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _parse_env_file(path: Path) -> Dict[str, str]:
    data: Dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = _strip_quotes(value.strip())
    return data


def _load_config_data(path: Path) -> Dict[str, str]:
    if not path.exists():
        raise ConfigurationError(str(path), "config file not found")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(str(path), f"invalid JSON ({e})") from e
        if not isinstance(payload, dict):
            raise ConfigurationError(str(path), "JSON config must be an object")
        return {str(k): "" if v is None else str(v) for k, v in payload.items()}
    return _parse_env_file(path)


def _optional_override(data: Dict[str, str], key: str, fallback: Optional[int]) -> Optional[int]:
    if data.get(key) not in (None, ""):
        return _coerce_optional_int(data.get(key))
    return fallback


@dataclass
class Config:
    # Parlay builder
    num_legs: int = _DEFAULT_NUM_LEGS
    parlay_limit: int = _DEFAULT_PARLAY_LIMIT
    max_total_odds: Optional[int] = None
    min_total_odds: Optional[int] = None
    max_per_leg_odds: Optional[int] = None
    min_per_leg_odds: Optional[int] = None

    # Top bets
    top_bets_limit: int = _DEFAULT_TOP_BETS_LIMIT

    # Input / output
    output_dir: str = _DEFAULT_OUTPUT_DIR
    strict_validation: bool = _DEFAULT_STRICT_VALIDATION

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            num_legs=_coerce_int(os.environ.get("PARLAY_NUM_LEGS"), _DEFAULT_NUM_LEGS),
            parlay_limit=_coerce_int(os.environ.get("PARLAY_LIMIT"), _DEFAULT_PARLAY_LIMIT),
            max_total_odds=_coerce_optional_int(os.environ.get("MAX_TOTAL_ODDS")),
            min_total_odds=_coerce_optional_int(os.environ.get("MIN_TOTAL_ODDS")),
            max_per_leg_odds=_coerce_optional_int(os.environ.get("MAX_PER_LEG_ODDS")),
            min_per_leg_odds=_coerce_optional_int(os.environ.get("MIN_PER_LEG_ODDS")),
            top_bets_limit=_coerce_int(os.environ.get("TOP_BETS_LIMIT"), _DEFAULT_TOP_BETS_LIMIT),
            output_dir=os.environ.get("PARLAYKIT_OUTPUT_DIR", _DEFAULT_OUTPUT_DIR),
            strict_validation=_coerce_bool(
                os.environ.get("STRICT_VALIDATION"),
                _DEFAULT_STRICT_VALIDATION,
            ),
        )

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        env_config = cls.from_env()
        if not config_path:
            return env_config

        file_data = _load_config_data(Path(config_path))
        return cls(
            num_legs=_coerce_int(file_data.get("PARLAY_NUM_LEGS"), env_config.num_legs),
            parlay_limit=_coerce_int(file_data.get("PARLAY_LIMIT"), env_config.parlay_limit),
            max_total_odds=_optional_override(file_data, "MAX_TOTAL_ODDS", env_config.max_total_odds),
            min_total_odds=_optional_override(file_data, "MIN_TOTAL_ODDS", env_config.min_total_odds),
            max_per_leg_odds=_optional_override(
                file_data, "MAX_PER_LEG_ODDS", env_config.max_per_leg_odds
            ),
            min_per_leg_odds=_optional_override(
                file_data, "MIN_PER_LEG_ODDS", env_config.min_per_leg_odds
            ),
            top_bets_limit=_coerce_int(file_data.get("TOP_BETS_LIMIT"), env_config.top_bets_limit),
            output_dir=file_data.get("PARLAYKIT_OUTPUT_DIR", env_config.output_dir),
            strict_validation=_coerce_bool(
                file_data.get("STRICT_VALIDATION"),
                env_config.strict_validation,
            ),
        )

    def resolve_output_path(self, path: str) -> Path:
        """Relative report paths land under ``output_dir``; absolute ones are kept."""
        return Path(self.output_dir) / path

    def filter_options(self, num_legs: Optional[int] = None) -> ParlayFilterOptions:
        return ParlayFilterOptions(
            num_legs=self.num_legs if num_legs is None else num_legs,
            max_total_odds=self.max_total_odds,
            min_total_odds=self.min_total_odds,
            max_per_leg_odds=self.max_per_leg_odds,
            min_per_leg_odds=self.min_per_leg_odds,
        )
