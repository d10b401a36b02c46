"""CLI entry points."""

from typing import List, Optional, Sequence
import argparse
import logging
import uuid

from parlaykit.config import Config
from parlaykit.constants import MIN_PARLAY_LEGS, PREDICTION_SORT_KEYS, get_max_parlay_legs
from parlaykit.exceptions import ParlayKitError
from parlaykit.ingestion.predictions import load_predictions
from parlaykit.models.types import Prediction
from parlaykit.normalization.schema import validate_predictions
from parlaykit.ops import configure_logging, get_metrics_recorder
from parlaykit.parlays.best_bets import rank_best_bets, sort_predictions
from parlaykit.parlays.generator import build_favorites_slip, generate_parlays
from parlaykit.reporting.csv_output import write_rows_csv
from parlaykit.reporting.tables import (
    best_bets_frame,
    parlays_frame,
    predictions_frame,
    render_table,
)

logger = logging.getLogger(__name__)


def _load(input_path: str, config: Config) -> List[Prediction]:
    predictions = load_predictions(input_path)
    return validate_predictions(predictions, strict=config.strict_validation)


def _emit(frame, config: Config, csv_path: Optional[str], empty_message: str) -> None:
    print(render_table(frame, empty_message))
    if csv_path:
        path = write_rows_csv(frame.to_dict("records"), config.resolve_output_path(csv_path))
        logger.info("Wrote %d rows to %s", len(frame), path)


def run_predictions(
    input_path: str,
    config_path: Optional[str] = None,
    sort_by: str = "win_pct",
    ascending: bool = False,
    csv_path: Optional[str] = None,
) -> int:
    config = Config.load(config_path)
    predictions = _load(input_path, config)
    ordered = sort_predictions(predictions, key=sort_by, descending=not ascending)
    _emit(predictions_frame(ordered), config, csv_path, "No predictions loaded.")
    return 0


def run_top_bets(
    input_path: str,
    config_path: Optional[str] = None,
    limit: Optional[int] = None,
    csv_path: Optional[str] = None,
) -> int:
    config = Config.load(config_path)
    predictions = _load(input_path, config)
    bets = rank_best_bets(predictions, limit=config.top_bets_limit if limit is None else limit)
    _emit(best_bets_frame(bets), config, csv_path, "Load prediction data to see the top bets.")
    return 0


def run_parlays(
    input_path: str,
    config_path: Optional[str] = None,
    num_legs: Optional[int] = None,
    limit: Optional[int] = None,
    min_total_odds: Optional[int] = None,
    max_total_odds: Optional[int] = None,
    min_leg_odds: Optional[int] = None,
    max_leg_odds: Optional[int] = None,
    csv_path: Optional[str] = None,
) -> int:
    config = Config.load(config_path)
    overrides = {
        "min_total_odds": min_total_odds,
        "max_total_odds": max_total_odds,
        "min_per_leg_odds": min_leg_odds,
        "max_per_leg_odds": max_leg_odds,
    }
    for field_name, value in overrides.items():
        if value is not None:
            setattr(config, field_name, value)

    predictions = _load(input_path, config)
    if len(predictions) < MIN_PARLAY_LEGS:
        logger.error("Load at least %d predictions to build parlays.", MIN_PARLAY_LEGS)
        return 1

    options = config.filter_options(num_legs)
    max_legs = get_max_parlay_legs(len(predictions))
    if not MIN_PARLAY_LEGS <= options.num_legs <= max_legs:
        logger.error(
            "Number of legs must be between %d and %d for %d games (got %d)",
            MIN_PARLAY_LEGS, max_legs, len(predictions), options.num_legs,
        )
        return 2

    metrics = get_metrics_recorder()
    slips = generate_parlays(
        predictions,
        options,
        limit=config.parlay_limit if limit is None else limit,
        metrics=metrics,
    )
    logger.debug("Metrics: %s", metrics.snapshot())
    _emit(
        parlays_frame(slips),
        config,
        csv_path,
        "No parlays match your criteria. Loosen the odds limits or reduce the number of legs.",
    )
    return 0


def run_favorites(
    input_path: str,
    config_path: Optional[str] = None,
    csv_path: Optional[str] = None,
) -> int:
    config = Config.load(config_path)
    predictions = _load(input_path, config)
    slip = build_favorites_slip(predictions)
    _emit(parlays_frame([slip] if slip else []), config, csv_path, "No predictions loaded.")
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input",
        dest="input_path",
        required=True,
        help="Tab-separated predictions file ('-' for stdin)",
    )
    parser.add_argument("--config", dest="config_path", help="Path to config file")
    parser.add_argument(
        "--csv",
        dest="csv_path",
        help="Also write the table to this CSV path (relative paths go under the output dir)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parlaykit",
        description="Money-line odds, top bets and parlays from game predictions",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    predictions = subparsers.add_parser("predictions", help="Show all predictions")
    _add_common_arguments(predictions)
    predictions.add_argument(
        "--sort-by",
        dest="sort_by",
        choices=PREDICTION_SORT_KEYS,
        default="win_pct",
        help="Sort column",
    )
    predictions.add_argument("--ascending", action="store_true", help="Sort ascending")

    top_bets = subparsers.add_parser("top-bets", help="Show the strongest money-line picks")
    _add_common_arguments(top_bets)
    top_bets.add_argument("--limit", dest="limit", type=int, help="Number of bets to show")

    parlays = subparsers.add_parser("parlays", help="Build parlays under odds constraints")
    _add_common_arguments(parlays)
    parlays.add_argument("--legs", dest="num_legs", type=int, help="Legs per parlay")
    parlays.add_argument("--limit", dest="limit", type=int, help="Number of parlays to show")
    parlays.add_argument("--min-total-odds", dest="min_total_odds", type=int,
                         help="Minimum combined American odds (e.g. 200 for +200)")
    parlays.add_argument("--max-total-odds", dest="max_total_odds", type=int,
                         help="Maximum combined American odds (e.g. 500 for +500)")
    parlays.add_argument("--min-leg-odds", dest="min_leg_odds", type=int,
                         help="Minimum absolute odds per leg")
    parlays.add_argument("--max-leg-odds", dest="max_leg_odds", type=int,
                         help="Maximum absolute odds per leg")

    favorites = subparsers.add_parser("favorites", help="Parlay of the least confident favorites")
    _add_common_arguments(favorites)

    return parser


def _dispatch(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if args.command == "predictions":
        return run_predictions(
            input_path=args.input_path,
            config_path=args.config_path,
            sort_by=args.sort_by,
            ascending=args.ascending,
            csv_path=args.csv_path,
        )
    if args.command == "top-bets":
        return run_top_bets(
            input_path=args.input_path,
            config_path=args.config_path,
            limit=args.limit,
            csv_path=args.csv_path,
        )
    if args.command == "parlays":
        return run_parlays(
            input_path=args.input_path,
            config_path=args.config_path,
            num_legs=args.num_legs,
            limit=args.limit,
            min_total_odds=args.min_total_odds,
            max_total_odds=args.max_total_odds,
            min_leg_odds=args.min_leg_odds,
            max_leg_odds=args.max_leg_odds,
            csv_path=args.csv_path,
        )
    if args.command == "favorites":
        return run_favorites(
            input_path=args.input_path,
            config_path=args.config_path,
            csv_path=args.csv_path,
        )

    parser.error("Unknown command")
    return 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(run_id=uuid.uuid4().hex[:8])
    metrics = get_metrics_recorder()
    metrics.reset()

    try:
        with metrics.timed(f"cli.{args.command}"):
            return _dispatch(parser, args)
    except (ParlayKitError, OSError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
