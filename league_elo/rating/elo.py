"""Elo rating core with an optional goal-differential multiplier."""

import math
from typing import Optional, Tuple

from ..config import RatingConfig
from ..models.team import TeamRecord

VALID_RESULTS = (0, 0.5, 1)


class InvalidResultError(ValueError):
    """Raised when a match result is not a loss (0), tie (0.5) or win (1)."""


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (-2.5 -> -2, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def expected_score(rating_a: float, rating_b: float, divider: float = 600.0) -> float:
    """
    Logistic chance that side A beats side B.

    Args:
        rating_a: Rating of side A
        rating_b: Rating of side B
        divider: Rating gap that moves the odds by a factor of ten

    Returns:
        Expected score for A, strictly between 0 and 1
    """
    return 1.0 / (1.0 + 10 ** ((rating_b - rating_a) / divider))


def rating_delta(
    rating_self: float,
    rating_opponent: float,
    actual_result: float,
    goal_multiplier: float = 1.0,
    k_factor: float = 40.0,
    divider: float = 600.0,
) -> float:
    """
    Rating change for one side after a match.

    Args:
        rating_self: Pre-match rating of this side
        rating_opponent: Pre-match rating of the other side
        actual_result: 1 for a win, 0.5 for a tie, 0 for a loss
        goal_multiplier: Scale factor from the goal differential (1 = none)
        k_factor: Convergence constant

    Returns:
        Signed rating change
    """
    if isinstance(actual_result, bool) or actual_result not in VALID_RESULTS:
        raise InvalidResultError(f"Result must be one of {VALID_RESULTS}, got {actual_result!r}")

    expected = expected_score(rating_self, rating_opponent, divider)
    return k_factor * goal_multiplier * (actual_result - expected)


def new_rating(
    rating_self: float,
    rating_opponent: float,
    actual_result: float,
    goal_multiplier: float = 1.0,
    k_factor: float = 40.0,
    divider: float = 600.0,
) -> float:
    return rating_self + rating_delta(
        rating_self, rating_opponent, actual_result, goal_multiplier, k_factor, divider
    )


def goal_multiplier(goals_a: int, goals_b: int, rating_winner: float, rating_loser: float) -> float:
    """
    Margin-of-victory multiplier, capped at 1.

    ln(|margin| + 1) * 2.2 / (0.001 * |winner - loser| + 2.2). A blowout by a
    heavy favourite counts for less than the same blowout by an underdog.
    """
    margin = abs(goals_a - goals_b)
    gap = abs(rating_winner - rating_loser)
    return min(1.0, math.log(margin + 1) * (2.2 / (gap * 0.001 + 2.2)))


class EloCalculator:
    """Elo operations bound to one configuration."""

    def __init__(self, config: Optional[RatingConfig] = None):
        self.config = config or RatingConfig()

    @property
    def k_factor(self) -> float:
        return self.config.k_factor

    @property
    def divider(self) -> float:
        return self.config.chance_to_win_divider

    def expected_score(self, rating_a: float, rating_b: float) -> float:
        return expected_score(rating_a, rating_b, self.divider)

    def rating_delta(
        self, rating_self: float, rating_opponent: float, actual_result: float, multiplier: float = 1.0
    ) -> float:
        return rating_delta(
            rating_self, rating_opponent, actual_result, multiplier, self.k_factor, self.divider
        )

    def new_rating(
        self, rating_self: float, rating_opponent: float, actual_result: float, multiplier: float = 1.0
    ) -> float:
        return rating_self + self.rating_delta(rating_self, rating_opponent, actual_result, multiplier)

    def match_multiplier(
        self, goals_a: int, goals_b: int, rating_a: float, rating_b: float
    ) -> float:
        """
        Goal multiplier for a match, or 1 when the option is off.

        The first side is treated as the winner on a tie.
        """
        if not self.config.use_goal_differential_multiplier:
            return 1.0

        if goals_b > goals_a:
            return goal_multiplier(goals_a, goals_b, rating_b, rating_a)
        return goal_multiplier(goals_a, goals_b, rating_a, rating_b)

    def predict(self, team1: TeamRecord, team2: TeamRecord) -> Tuple[str, float]:
        """
        Predict the winner of a matchup from current ratings.

        Args:
            team1: First team
            team2: Second team

        Returns:
            Tuple of (predicted_winner_name, win_probability)
        """
        team1_win_prob = self.expected_score(team1.rating, team2.rating)

        if team1_win_prob >= 0.5:
            return team1.name, team1_win_prob
        else:
            return team2.name, 1.0 - team1_win_prob
