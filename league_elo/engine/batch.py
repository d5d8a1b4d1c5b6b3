"""Full recompute of a standings table from a batch of feed rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from ..config import RatingConfig
from ..data.normalize import clean_team_name, parse_score
from ..models.game import ScheduledFixture
from ..models.standings import StandingsTable, TableState
from ..rating.elo import round_half_up
from .recorder import MatchRecorder

logger = logging.getLogger(__name__)

NO_GAMES_ERROR = "Did not find any games to process. Check input."

# Positions of the fields we read in an 11-field feed row
DATE = 1
TIME = 2
FIELD = 3
HOME_TEAM = 4
HOME_SCORE = 5
AWAY_SCORE = 6
AWAY_TEAM = 7

Row = Union[str, Sequence[str]]


@dataclass
class BatchResult:
    """Outcome of one batch: the final table and how many matches were played."""

    table: StandingsTable
    processed_count: int
    scheduled_count: int = 0
    skipped_count: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def split_row(row: Row) -> List[str]:
    """Split a text row on tabs; sequences are taken as already split."""
    if isinstance(row, str):
        return row.rstrip("\r\n").split("\t")
    return [("" if piece is None else str(piece)) for piece in row]


def process_batch(raw_rows: Iterable[Row], config: Optional[RatingConfig] = None) -> BatchResult:
    """
    Build a fresh standings table from feed rows.

    Rows with the wrong number of fields are skipped. Every well-formed row
    goes into the schedule; only rows with two numeric scores are played.

    Args:
        raw_rows: Text lines (tab-delimited) or pre-split field sequences
        config: Rating and scoring configuration

    Returns:
        BatchResult holding the aggregated table
    """
    config = config or RatingConfig()
    table = StandingsTable(initial_rating=config.initial_rating)
    table.state = TableState.LOADING
    recorder = MatchRecorder(table, config)

    processed = 0
    scheduled = 0
    skipped = 0

    for line_no, row in enumerate(raw_rows, start=1):
        pieces = split_row(row)
        if len(pieces) != config.fields_per_row:
            skipped += 1
            logger.debug(f"Skipping row {line_no}: {len(pieces)} fields, expected {config.fields_per_row}")
            continue

        home_team = clean_team_name(pieces[HOME_TEAM])
        away_team = clean_team_name(pieces[AWAY_TEAM])
        if not home_team or not away_team:
            skipped += 1
            logger.debug(f"Skipping row {line_no}: missing team name")
            continue
        if home_team == away_team:
            skipped += 1
            logger.debug(f"Skipping row {line_no}: {home_team} listed on both sides")
            continue

        date = pieces[DATE].strip()
        fixture_id = table.add_fixture(
            ScheduledFixture(
                date=date,
                home_team=home_team,
                away_team=away_team,
                time=pieces[TIME].strip(),
                field=pieces[FIELD].strip(),
            )
        )

        home_score = parse_score(pieces[HOME_SCORE])
        away_score = parse_score(pieces[AWAY_SCORE])
        if home_score is None or away_score is None:
            scheduled += 1
            continue

        recorder.record_match(home_team, away_team, home_score, away_score, date, fixture_id)
        processed += 1

    table.state = TableState.POPULATED

    if processed <= 0:
        logger.warning(NO_GAMES_ERROR)
        return BatchResult(table, processed, scheduled, skipped, error=NO_GAMES_ERROR)

    update_opponent_aggregates(table, config)
    logger.info(
        f"Processed {processed} matches for {len(table)} teams "
        f"({scheduled} scheduled, {skipped} rows skipped)"
    )
    return BatchResult(table, processed, scheduled, skipped)


def update_opponent_aggregates(table: StandingsTable, config: Optional[RatingConfig] = None):
    """
    Fill in opponent records, strength of schedule and points percentage.

    Opponents are counted once per match. Each opponent's record excludes
    the games it played against the team being rated.

    Args:
        table: Table with every match already recorded
        config: Scoring configuration (for max points per match)
    """
    config = config or RatingConfig()

    for team in table.teams.values():
        op_wins = op_losses = op_ties = 0
        op_rating_total = 0.0

        for name in team.opponents:
            opponent = table.teams[name]
            vs_team = opponent.head_to_head.get(team.name, [0, 0, 0])
            op_wins += opponent.wins - vs_team[0]
            op_losses += opponent.losses - vs_team[1]
            op_ties += opponent.ties - vs_team[2]
            op_rating_total += opponent.rating

        team.opponent_wins = op_wins
        team.opponent_losses = op_losses
        team.opponent_ties = op_ties

        op_games = op_wins + op_losses + op_ties
        team.strength_of_schedule = op_wins / op_games if op_games > 0 else 0.0
        team.scaled_points = team.strength_of_schedule * team.points

        if team.matches_played > 0:
            team.opponent_average_rating = float(round_half_up(op_rating_total / team.matches_played))
            team.points_percentage = team.points / (team.matches_played * config.max_points_per_match)
        else:
            team.opponent_average_rating = 0.0
            team.points_percentage = 0.0

    table.state = TableState.AGGREGATED
