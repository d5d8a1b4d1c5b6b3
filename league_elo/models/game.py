"""Match and fixture models for the league table."""

from dataclasses import dataclass
from typing import Optional

# Result codes, relative to the first (home) side
HOME_WIN = 0.0
AWAY_WIN = 1.0
TIE = 0.5


def matchup_key(date: str, team: str, opponent: str) -> str:
    """Key used to index a fixture from one team's point of view."""
    return f"{date}{team} vs {opponent}"


@dataclass(frozen=True)
class ScheduledFixture:
    """A fixture from the feed, played or not."""

    date: str
    home_team: str
    away_team: str
    time: str = ""
    field: str = ""

    def opponent_of(self, team: str) -> str:
        if team == self.home_team:
            return self.away_team
        if team == self.away_team:
            return self.home_team
        raise ValueError(f"{team} does not play in {self.home_team} vs {self.away_team}")

    def describe_for(self, team: str) -> str:
        """
        Describe the fixture from one team's side.

        Args:
            team: Home or away team name

        Returns:
            "<date> (H) vs <away> <time> <field>" for the home side,
            "<date> at <home> <time> <field>" for the away side
        """
        opponent = self.opponent_of(team)
        if team == self.home_team:
            return f"{self.date} (H) vs {opponent} {self.time} {self.field}"
        return f"{self.date} at {opponent} {self.time} {self.field}"


@dataclass(frozen=True)
class MatchResult:
    """A played match with both scores known."""

    date: str
    home_team: str
    away_team: str
    home_score: int
    away_score: int

    @property
    def result(self) -> float:
        """0 when the home side wins, 1 when the away side wins, 0.5 for a tie."""
        if self.home_score > self.away_score:
            return HOME_WIN
        if self.away_score > self.home_score:
            return AWAY_WIN
        return TIE

    @property
    def winner(self) -> Optional[str]:
        if self.result == HOME_WIN:
            return self.home_team
        if self.result == AWAY_WIN:
            return self.away_team
        return None

    @property
    def is_tie(self) -> bool:
        return self.result == TIE


@dataclass(frozen=True)
class MatchLogEntry:
    """One played match as seen by one of the two teams."""

    date: str
    team: str
    opponent: str
    goals_for: int
    goals_against: int
    outcome: str
    fixture_id: Optional[int] = None

    OUTCOMES = ("win", "lose", "tie")

    def __post_init__(self):
        if self.outcome not in self.OUTCOMES:
            raise ValueError(f"Invalid outcome: {self.outcome}")

    @property
    def key(self) -> str:
        return matchup_key(self.date, self.team, self.opponent)

    def __str__(self) -> str:
        return f"{self.goals_for} - {self.goals_against} vs {self.opponent}"

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "team": self.team,
            "opponent": self.opponent,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "outcome": self.outcome,
        }
