"""Standings table owning every team record and match log of one batch."""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from .game import MatchLogEntry, ScheduledFixture
from .team import TeamRecord


class TableState(Enum):
    EMPTY = "empty"
    LOADING = "loading"
    POPULATED = "populated"
    AGGREGATED = "aggregated"


class StandingsTable:
    """Team records keyed by name, plus the schedule and match histories."""

    def __init__(self, initial_rating: float = 1000.0):
        """
        Initialize an empty table.

        Args:
            initial_rating: Rating given to a team on first appearance
        """
        self.initial_rating = initial_rating
        self.teams: Dict[str, TeamRecord] = {}
        self.games_by_team: Dict[str, List[MatchLogEntry]] = {}
        self.games_by_matchup: Dict[str, List[MatchLogEntry]] = {}
        self.games_by_fixture: Dict[Tuple[int, str], MatchLogEntry] = {}
        self.schedule_by_team: Dict[str, List[int]] = {}
        self.fixtures: List[ScheduledFixture] = []
        self.state = TableState.EMPTY

    def __len__(self) -> int:
        return len(self.teams)

    def __contains__(self, name: str) -> bool:
        return name in self.teams

    def get_team(self, name: str) -> Optional[TeamRecord]:
        """Get a team by name."""
        return self.teams.get(name)

    def get_or_create_team(self, name: str) -> TeamRecord:
        """Get a team by name, adding a fresh record on first appearance."""
        team = self.teams.get(name)
        if team is None:
            team = TeamRecord(name=name, rating=float(self.initial_rating))
            self.teams[name] = team
        return team

    def add_fixture(self, fixture: ScheduledFixture) -> int:
        """
        Index a fixture under both teams, in feed order.

        Returns:
            Fixture id (its position among the table's fixtures)
        """
        fixture_id = len(self.fixtures)
        self.fixtures.append(fixture)
        for team in (fixture.home_team, fixture.away_team):
            self.schedule_by_team.setdefault(team, []).append(fixture_id)
        return fixture_id

    def add_game(self, entry: MatchLogEntry):
        """Append a played match to the team, matchup and fixture histories."""
        self.games_by_team.setdefault(entry.team, []).append(entry)
        self.games_by_matchup.setdefault(entry.key, []).append(entry)
        if entry.fixture_id is not None:
            self.games_by_fixture[(entry.fixture_id, entry.team)] = entry

    def schedule_for(self, team: str) -> List[ScheduledFixture]:
        return [self.fixtures[fixture_id] for fixture_id in self.schedule_by_team.get(team, [])]

    def ranked(self) -> List[TeamRecord]:
        """Teams ordered for display: points, points %, rating, then name."""
        return sorted(
            self.teams.values(),
            key=lambda t: (-t.points, -t.points_percentage, -t.rating, t.name),
        )

    @property
    def is_final(self) -> bool:
        return self.state == TableState.AGGREGATED

    def to_dict(self) -> dict:
        """Convert table to dictionary."""
        return {
            "state": self.state.value,
            "initial_rating": self.initial_rating,
            "teams": [team.to_dict() for team in self.ranked()],
            "games_by_team": {
                name: [entry.to_dict() for entry in entries]
                for name, entries in self.games_by_team.items()
            },
            "schedule_by_team": {
                name: [fixture.describe_for(name) for fixture in self.schedule_for(name)]
                for name in self.schedule_by_team
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StandingsTable":
        """
        Rebuild a table from a saved dictionary.

        Only team records and the table state come back; match logs and
        the schedule are kept in the saved file for reading, not restored.
        """
        table = cls(initial_rating=data.get("initial_rating", 1000.0))
        for team_data in data.get("teams", []):
            team = TeamRecord.from_dict(team_data)
            table.teams[team.name] = team
        table.state = TableState(data.get("state", TableState.POPULATED.value))
        return table
