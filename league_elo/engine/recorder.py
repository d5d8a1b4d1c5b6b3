"""Applies one played match to the standings table."""

import logging
from typing import Optional

from ..config import RatingConfig
from ..models.game import MatchLogEntry, MatchResult
from ..models.standings import StandingsTable
from ..models.team import TeamRecord
from ..rating.elo import EloCalculator, round_half_up

logger = logging.getLogger(__name__)


class MatchRecorder:
    """Updates ratings, records and points for both sides of a match."""

    def __init__(self, table: StandingsTable, config: Optional[RatingConfig] = None):
        """
        Initialize recorder.

        Args:
            table: Table that owns the team records
            config: Rating and scoring configuration
        """
        self.table = table
        self.config = config or RatingConfig()
        self.elo = EloCalculator(self.config)

    def record_match(
        self,
        home_team: str,
        away_team: str,
        home_score: int,
        away_score: int,
        date: str = "",
        fixture_id: Optional[int] = None,
    ) -> MatchResult:
        """
        Record a played match.

        Scores are expected to be ints and names non-empty; rows are
        validated by the batch processor before they get here.

        Args:
            home_team: First side
            away_team: Second side
            home_score: Goals scored by the first side
            away_score: Goals scored by the second side
            date: Match date, used to key the matchup history
            fixture_id: Schedule entry this result belongs to, if any

        Returns:
            The recorded MatchResult
        """
        match = MatchResult(date, home_team, away_team, home_score, away_score)
        home = self.table.get_or_create_team(home_team)
        away = self.table.get_or_create_team(away_team)

        home.opponents.append(away.name)
        away.opponents.append(home.name)

        self._update_ratings(match, home, away)

        home.matches_played += 1
        away.matches_played += 1

        home.add_goals(home_score, away_score)
        away.add_goals(away_score, home_score)

        if match.is_tie:
            home.add_tie(away.name)
            away.add_tie(home.name)
            home_outcome, away_outcome = "tie", "tie"
        elif match.winner == home.name:
            home.add_win(away.name)
            away.add_loss(home.name)
            home_outcome, away_outcome = "win", "lose"
        else:
            away.add_win(home.name)
            home.add_loss(away.name)
            home_outcome, away_outcome = "lose", "win"

        home.points += self.match_points(home_outcome, home_score, away_score)
        away.points += self.match_points(away_outcome, away_score, home_score)

        self.table.add_game(
            MatchLogEntry(date, home.name, away.name, home_score, away_score, home_outcome, fixture_id)
        )
        self.table.add_game(
            MatchLogEntry(date, away.name, home.name, away_score, home_score, away_outcome, fixture_id)
        )

        logger.debug(
            f"{date} {home.name} {home_score}-{away_score} {away.name}: "
            f"{home.name} {home.rating:g} ({home.last_rating_change:+g}), "
            f"{away.name} {away.rating:g} ({away.last_rating_change:+g})"
        )
        return match

    def _update_ratings(self, match: MatchResult, home: TeamRecord, away: TeamRecord):
        """Both deltas come from the same pre-match ratings."""
        home_before = home.rating
        away_before = away.rating

        multiplier = self.elo.match_multiplier(
            match.home_score, match.away_score, home_before, away_before
        )

        # match.result is 0 for a home win, so the home side scored 1 - result
        home_delta = self.elo.rating_delta(home_before, away_before, 1 - match.result, multiplier)
        away_delta = self.elo.rating_delta(away_before, home_before, match.result, multiplier)

        if self.config.round_ratings:
            home.last_rating_change = float(round_half_up(home_delta))
            away.last_rating_change = float(round_half_up(away_delta))
            home.rating = float(round_half_up(home_before + home_delta))
            away.rating = float(round_half_up(away_before + away_delta))
        else:
            home.last_rating_change = home_delta
            away.last_rating_change = away_delta
            home.rating = home_before + home_delta
            away.rating = away_before + away_delta

    def match_points(self, outcome: str, goals_for: int, goals_against: int) -> int:
        """
        League points earned by one side in one match.

        Args:
            outcome: "win", "lose" or "tie"
            goals_for: Goals scored by this side
            goals_against: Goals scored by the opponent

        Returns:
            Points, capped at max_points_per_match
        """
        config = self.config
        points = min(config.goal_point_cap, goals_for)

        if outcome == "win":
            points += config.win_points
            if goals_against == 0:
                points += config.shutout_bonus
        elif outcome == "tie":
            points += config.tie_points
        else:
            points += config.lose_points

        return min(config.max_points_per_match, points)
