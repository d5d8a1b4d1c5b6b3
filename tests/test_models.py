"""Unit tests for team, match and table models."""

import pytest

from league_elo.models.game import (
    AWAY_WIN,
    HOME_WIN,
    TIE,
    MatchLogEntry,
    MatchResult,
    ScheduledFixture,
    matchup_key,
)
from league_elo.models.standings import StandingsTable, TableState
from league_elo.models.team import TeamRecord


@pytest.fixture
def sample_team():
    """Create a sample team record."""
    return TeamRecord(name="Red Dragons", rating=1040, wins=3, losses=1, goals_for=9, goals_against=4)


def test_team_creation(sample_team):
    assert sample_team.name == "Red Dragons"
    assert sample_team.rating == 1040
    assert sample_team.goal_differential == 5
    assert sample_team.goal_differential_display == "+5"


def test_goal_differential_display_non_positive():
    assert TeamRecord(name="X", goals_for=1, goals_against=3).goal_differential_display == "-2"
    assert TeamRecord(name="X").goal_differential_display == "0"


def test_team_requires_name():
    with pytest.raises(ValueError):
        TeamRecord(name="  ")


def test_team_round_trip(sample_team):
    sample_team.opponents.append("Blue Sharks")
    sample_team.add_win("Blue Sharks")
    restored = TeamRecord.from_dict(sample_team.to_dict())
    assert restored.name == sample_team.name
    assert restored.opponents == ["Blue Sharks"]
    assert restored.goal_differential == 5
    assert restored.head_to_head == {"Blue Sharks": [1, 0, 0]}
    assert restored.record_against("Blue Sharks") is not sample_team.record_against("Blue Sharks")


def test_match_result_codes():
    assert MatchResult("d", "A", "B", 2, 0).result == HOME_WIN
    assert MatchResult("d", "A", "B", 0, 2).result == AWAY_WIN
    assert MatchResult("d", "A", "B", 1, 1).result == TIE


def test_match_result_winner():
    assert MatchResult("d", "A", "B", 1, 4).winner == "B"
    assert MatchResult("d", "A", "B", 4, 1).winner == "A"
    assert MatchResult("d", "A", "B", 1, 1).winner is None


def test_fixture_descriptions():
    fixture = ScheduledFixture("9/7", "A", "B", time="9:00 AM", field="Field 2")
    assert fixture.describe_for("A") == "9/7 (H) vs B 9:00 AM Field 2"
    assert fixture.describe_for("B") == "9/7 at A 9:00 AM Field 2"
    assert fixture.opponent_of("B") == "A"
    assert matchup_key("9/7", "A", "B") == "9/7A vs B"


def test_fixture_rejects_outsider():
    with pytest.raises(ValueError):
        ScheduledFixture("9/7", "A", "B").opponent_of("C")


def test_log_entry_text():
    entry = MatchLogEntry("9/7", "A", "B", 2, 1, "win")
    assert str(entry) == "2 - 1 vs B"
    assert entry.key == "9/7A vs B"


def test_log_entry_rejects_unknown_outcome():
    with pytest.raises(ValueError):
        MatchLogEntry("9/7", "A", "B", 2, 1, "draw")


def test_table_creates_team_once():
    table = StandingsTable(initial_rating=1200)
    first = table.get_or_create_team("A")
    second = table.get_or_create_team("A")
    assert first is second
    assert first.rating == 1200
    assert isinstance(first.rating, float)
    assert len(table) == 1
    assert table.state == TableState.EMPTY


def test_table_schedule_index():
    table = StandingsTable()
    first = table.add_fixture(ScheduledFixture("9/7", "A", "B"))
    second = table.add_fixture(ScheduledFixture("9/14", "C", "A"))
    assert (first, second) == (0, 1)
    assert table.schedule_by_team["A"] == [0, 1]
    assert table.schedule_by_team["B"] == [0]
    assert [f.date for f in table.schedule_for("A")] == ["9/7", "9/14"]
    assert table.schedule_for("Z") == []
    # fixtures do not create team records
    assert len(table) == 0


def test_ranked_breaks_ties_on_percentage_then_rating():
    table = StandingsTable()
    a = table.get_or_create_team("A")
    b = table.get_or_create_team("B")
    c = table.get_or_create_team("C")
    a.points = b.points = c.points = 6
    a.points_percentage, b.points_percentage, c.points_percentage = 0.5, 0.67, 0.5
    a.rating, c.rating = 990, 1010
    assert [t.name for t in table.ranked()] == ["B", "C", "A"]


def test_same_day_meetings_get_separate_fixture_ids():
    table = StandingsTable()
    first = table.add_fixture(ScheduledFixture("9/7", "A", "B"))
    second = table.add_fixture(ScheduledFixture("9/7", "A", "B"))
    table.add_game(MatchLogEntry("9/7", "A", "B", 1, 0, "win", first))
    table.add_game(MatchLogEntry("9/7", "A", "B", 0, 2, "lose", second))

    assert first != second
    assert str(table.games_by_fixture[(first, "A")]) == "1 - 0 vs B"
    assert str(table.games_by_fixture[(second, "A")]) == "0 - 2 vs B"
    # the date-keyed matchup history still holds both
    assert len(table.games_by_matchup["9/7A vs B"]) == 2


def test_table_round_trip_restores_teams_and_state():
    table = StandingsTable(initial_rating=1200)
    a = table.get_or_create_team("A")
    a.add_win("B")
    a.points = 3
    table.get_or_create_team("B").add_loss("A")
    table.state = TableState.AGGREGATED

    restored = StandingsTable.from_dict(table.to_dict())

    assert restored.initial_rating == 1200
    assert restored.state == TableState.AGGREGATED
    assert sorted(restored.teams) == ["A", "B"]
    assert restored.get_team("A").points == 3
    assert restored.get_team("B").head_to_head == {"A": [0, 1, 0]}
