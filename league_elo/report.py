"""Read-only views of a computed standings table."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import pandas as pd

from .config import RatingConfig
from .models.standings import StandingsTable
from .rating.elo import EloCalculator

logger = logging.getLogger(__name__)

STANDINGS_COLUMNS = [
    "Rank", "Club", "Pts", "Pts%", "Scaled", "Elo", "MP", "W", "D", "L",
    "GF", "GA", "GD", "OpElo", "SoS",
]


def standings_dataframe(table: StandingsTable) -> pd.DataFrame:
    """League table in display order, one row per team."""
    rows: List[Dict] = []
    for rank, team in enumerate(table.ranked(), start=1):
        rows.append(
            {
                "Rank": rank,
                "Club": team.name,
                "Pts": team.points,
                "Pts%": round(team.points_percentage, 2),
                "Scaled": round(team.scaled_points, 2),
                "Elo": team.rating,
                "MP": team.matches_played,
                "W": team.wins,
                "D": team.ties,
                "L": team.losses,
                "GF": team.goals_for,
                "GA": team.goals_against,
                "GD": team.goal_differential_display,
                "OpElo": team.opponent_average_rating,
                "SoS": round(team.strength_of_schedule, 2),
            }
        )
    return pd.DataFrame(rows, columns=STANDINGS_COLUMNS)


def save_standings_csv(table: StandingsTable, file_path: str) -> None:
    standings_dataframe(table).to_csv(file_path, index=False)
    logger.info(f"Wrote standings for {len(table)} teams to {file_path}")


def team_schedule(table: StandingsTable, team: str) -> List[str]:
    """
    The panel shown when a club is picked: every fixture in feed order.

    Played fixtures show the score line, the rest show date, venue and
    kick-off time.

    Args:
        table: Computed table
        team: Team name

    Returns:
        One line per fixture
    """
    if team not in table.schedule_by_team and team not in table.games_by_team:
        raise KeyError(f"Unknown team: {team}")

    fixture_ids = table.schedule_by_team.get(team)
    if not fixture_ids:
        return [str(entry) for entry in table.games_by_team.get(team, [])]

    lines = []
    for fixture_id in fixture_ids:
        played = table.games_by_fixture.get((fixture_id, team))
        if played is not None:
            lines.append(str(played))
        else:
            lines.append(table.fixtures[fixture_id].describe_for(team))
    return lines


def head_to_head(
    table: StandingsTable,
    team1: str,
    team2: str,
    config: Optional[RatingConfig] = None,
) -> Dict:
    """
    Results between two clubs plus an Elo prediction for the next meeting.

    Args:
        table: Computed table
        team1: First team name
        team2: Second team name
        config: Rating configuration used for the prediction

    Returns:
        Dictionary with the record of team1 against team2, the games
        from team1's side, and the predicted winner with its probability
    """
    first = table.get_team(team1)
    second = table.get_team(team2)
    if first is None:
        raise KeyError(f"Unknown team: {team1}")
    if second is None:
        raise KeyError(f"Unknown team: {team2}")

    wins, losses, ties = first.head_to_head.get(second.name, [0, 0, 0])
    games = [
        f"{entry.date} {entry}"
        for entry in table.games_by_team.get(first.name, [])
        if entry.opponent == second.name
    ]
    winner, probability = EloCalculator(config).predict(first, second)

    return {
        "team1": first.name,
        "team2": second.name,
        "wins": wins,
        "losses": losses,
        "ties": ties,
        "games": games,
        "predicted_winner": winner,
        "win_probability": probability,
    }
