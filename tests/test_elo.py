"""Unit tests for the Elo rating core."""

import math

import pytest

from league_elo.config import RatingConfig
from league_elo.models.team import TeamRecord
from league_elo.rating.elo import (
    EloCalculator,
    InvalidResultError,
    expected_score,
    goal_multiplier,
    new_rating,
    rating_delta,
    round_half_up,
)


def test_equal_ratings_are_a_coin_flip():
    assert expected_score(1000, 1000) == pytest.approx(0.5)


@pytest.mark.parametrize("ra,rb", [(1000, 1000), (1200, 950), (800, 1400), (1000.5, 999.25)])
def test_expected_scores_are_complementary(ra, rb):
    assert expected_score(ra, rb) + expected_score(rb, ra) == pytest.approx(1.0)


def test_divider_controls_spread():
    """A 600-point gap is 10:1 odds with the default divider."""
    assert expected_score(1600, 1000) == pytest.approx(10 / 11)
    assert expected_score(1400, 1000, divider=400) == pytest.approx(10 / 11)


@pytest.mark.parametrize("result", [0, 0.5, 1])
@pytest.mark.parametrize("ra,rb", [(1000, 1000), (1100, 940), (870, 1315)])
def test_rating_delta_is_zero_sum(ra, rb, result):
    assert rating_delta(ra, rb, result, 1) == pytest.approx(-rating_delta(rb, ra, 1 - result, 1))


def test_win_between_equals_moves_half_k():
    assert rating_delta(1000, 1000, 1) == pytest.approx(20.0)
    assert new_rating(1000, 1000, 1) == pytest.approx(1020.0)
    assert new_rating(1000, 1000, 0) == pytest.approx(980.0)


def test_tie_between_equals_changes_nothing():
    assert rating_delta(1000, 1000, 0.5) == pytest.approx(0.0)


def test_k_factor_and_multiplier_scale_delta():
    assert rating_delta(1000, 1000, 1, goal_multiplier=0.5, k_factor=20) == pytest.approx(5.0)


@pytest.mark.parametrize("bad", [2, -1, 0.25, "1", None])
def test_invalid_result_raises(bad):
    with pytest.raises(InvalidResultError):
        rating_delta(1000, 1000, bad)


@pytest.mark.parametrize("flag", [True, False])
def test_bool_result_is_rejected(flag):
    with pytest.raises(InvalidResultError):
        rating_delta(1000, 1000, flag)


def test_invalid_result_is_a_value_error():
    assert issubclass(InvalidResultError, ValueError)


def test_goal_multiplier_one_goal_margin():
    assert goal_multiplier(1, 0, 1000, 1000) == pytest.approx(math.log(2))


def test_goal_multiplier_is_capped_at_one():
    assert goal_multiplier(7, 0, 1000, 1000) == 1.0


def test_goal_multiplier_shrinks_for_favourites():
    even = goal_multiplier(2, 1, 1000, 1000)
    favourite = goal_multiplier(2, 1, 1400, 1000)
    assert favourite < even


def test_goal_multiplier_of_a_tie_is_zero():
    assert goal_multiplier(2, 2, 1000, 1000) == 0.0


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(999.5) == 1000
    assert round_half_up(20.49) == 20


def test_calculator_uses_config():
    calc = EloCalculator(RatingConfig(k_factor=10, chance_to_win_divider=400))
    assert calc.rating_delta(1000, 1000, 1) == pytest.approx(5.0)
    assert calc.expected_score(1400, 1000) == pytest.approx(10 / 11)
    assert calc.new_rating(1000, 1000, 0) == pytest.approx(995.0)


def test_match_multiplier_off_by_default():
    calc = EloCalculator()
    assert calc.match_multiplier(5, 0, 1000, 1000) == 1.0


def test_match_multiplier_uses_winner_rating():
    calc = EloCalculator(RatingConfig(use_goal_differential_multiplier=True))
    home_wins = calc.match_multiplier(2, 1, 1300, 1000)
    away_wins = calc.match_multiplier(1, 2, 1000, 1300)
    assert home_wins == pytest.approx(away_wins)
    assert home_wins == pytest.approx(goal_multiplier(2, 1, 1300, 1000))


def test_predict_favours_higher_rating():
    strong = TeamRecord(name="Strong", rating=1300)
    weak = TeamRecord(name="Weak", rating=1000)

    winner, prob = EloCalculator().predict(weak, strong)

    assert winner == "Strong"
    assert 0.5 < prob < 1.0
    assert prob == pytest.approx(expected_score(1300, 1000))
