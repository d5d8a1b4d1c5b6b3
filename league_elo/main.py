"""Main CLI interface for the league standings calculator."""

import argparse
import logging
import sys

from .config import RatingConfig, load_config
from .data.loader import DataLoader
from .engine.batch import NO_GAMES_ERROR, BatchResult, process_batch
from .report import head_to_head, save_standings_csv, standings_dataframe, team_schedule


def build_config(args) -> RatingConfig:
    """
    Build the rating configuration from CLI flags.

    Args:
        args: Parsed arguments

    Returns:
        RatingConfig
    """
    base = RatingConfig.tournament() if args.tournament else RatingConfig.standard()
    if args.config:
        base = load_config(args.config, base=base)

    overrides = {}
    if args.k_factor is not None:
        overrides["k_factor"] = args.k_factor
    if args.goal_multiplier:
        overrides["use_goal_differential_multiplier"] = True
    if args.no_rounding:
        overrides["round_ratings"] = False

    return RatingConfig.from_dict(overrides, base=base) if overrides else base


def run_batch(args, require_games: bool = True):
    """
    Load the feed and compute the table.

    Args:
        args: Parsed arguments
        require_games: Treat a feed with no played matches as an error

    Returns:
        Tuple of (BatchResult or None, RatingConfig or None)
    """
    try:
        config = build_config(args)
        rows = DataLoader.load_rows(args.input)
    except (OSError, ValueError) as e:
        print(f"Error loading data: {e}")
        return None, None

    result: BatchResult = process_batch(rows, config)
    if not result.ok:
        if require_games or result.error != NO_GAMES_ERROR:
            print(f"Error: {result.error}")
            return None, config
        print(f"Warning: {result.error}")

    return result, config


def show_standings(args):
    """Compute and print the league table."""
    result, _ = run_batch(args)
    if result is None:
        return 1

    print(f"Processed {result.processed_count} games, {len(result.table)} teams")
    if result.scheduled_count:
        print(f"{result.scheduled_count} fixtures not yet played")

    frame = standings_dataframe(result.table)
    print()
    print(frame.to_string(index=False))

    if args.output:
        DataLoader.save_table_to_json(result.table, args.output)
        print(f"\nSaved standings to {args.output}")
    if args.csv:
        save_standings_csv(result.table, args.csv)
        print(f"Saved standings CSV to {args.csv}")

    return 0


def show_saved(args):
    """Print a table saved earlier with standings --output."""
    try:
        table = DataLoader.load_table_from_json(args.standings)
    except (OSError, ValueError) as e:
        print(f"Error loading standings: {e}")
        return 1

    print(f"{len(table)} teams ({table.state.value})")
    print()
    print(standings_dataframe(table).to_string(index=False))
    return 0


def show_team(args):
    """Print one club's fixtures and results, played or not."""
    result, _ = run_batch(args, require_games=False)
    if result is None:
        return 1

    try:
        lines = team_schedule(result.table, args.team)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        return 1

    team = result.table.get_team(args.team)
    print(args.team)
    if team is not None:
        print(
            f"Elo {team.rating:g} | {team.wins}-{team.losses}-{team.ties} | "
            f"{team.points} pts | SoS {team.strength_of_schedule:.2f}"
        )
    for idx, line in enumerate(lines, start=1):
        print(f"  {idx}. {line}")

    return 0


def predict_matchup(args):
    """Print the head-to-head record and an Elo prediction for two clubs."""
    result, config = run_batch(args)
    if result is None:
        return 1

    try:
        summary = head_to_head(result.table, args.team1, args.team2, config)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        return 1

    print(
        f"{summary['team1']} vs {summary['team2']}: "
        f"{summary['wins']}-{summary['losses']}-{summary['ties']}"
    )
    for game in summary["games"]:
        print(f"  {game}")
    print(f"Predicted winner: {summary['predicted_winner']} ({summary['win_probability']:.1%})")

    return 0


def create_sample(args):
    """Create sample feed file."""
    print(f"Creating sample feed at {args.output}...")
    DataLoader.create_sample_data(args.output)
    print("✓ Sample feed created!")
    print(f"\nYou can now compute standings with:")
    print(f"  python -m league_elo.main standings --input {args.output}")
    return 0


def _add_batch_arguments(parser):
    parser.add_argument("--input", "-i", required=True, help="Tab-delimited league feed")
    parser.add_argument("--config", default=None, help="JSON file of rating/scoring overrides")
    parser.add_argument(
        "--tournament",
        action="store_true",
        help="Tournament scoring (6/3/0, goal points, shutout bonus, 10 max)",
    )
    parser.add_argument("--k-factor", type=float, default=None, help="Elo convergence constant")
    parser.add_argument(
        "--goal-multiplier",
        action="store_true",
        help="Scale rating changes by goal differential",
    )
    parser.add_argument(
        "--no-rounding",
        action="store_true",
        help="Keep full rating precision instead of rounding after every match",
    )


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="League standings with Elo ratings and strength of schedule"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    standings_parser = subparsers.add_parser("standings", help="Compute the league table")
    _add_batch_arguments(standings_parser)
    standings_parser.add_argument("--output", "-o", default=None, help="Write standings JSON")
    standings_parser.add_argument("--csv", default=None, help="Write standings CSV")

    show_parser = subparsers.add_parser("show", help="Print standings saved with --output")
    show_parser.add_argument("--standings", "-s", required=True, help="Saved standings JSON")

    team_parser = subparsers.add_parser("team", help="Show one club's fixtures and results")
    _add_batch_arguments(team_parser)
    team_parser.add_argument("--team", "-t", required=True, help="Club name")

    predict_parser = subparsers.add_parser("predict", help="Head-to-head record and Elo prediction")
    _add_batch_arguments(predict_parser)
    predict_parser.add_argument("team1", help="First club")
    predict_parser.add_argument("team2", help="Second club")

    sample_parser = subparsers.add_parser("sample", help="Create a sample league feed")
    sample_parser.add_argument("--output", "-o", default="sample_feed.tsv", help="Output file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "standings":
        return show_standings(args)
    elif args.command == "show":
        return show_saved(args)
    elif args.command == "team":
        return show_team(args)
    elif args.command == "predict":
        return predict_matchup(args)
    elif args.command == "sample":
        return create_sample(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
