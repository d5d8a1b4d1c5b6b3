"""Team record model for the league table."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class TeamRecord:
    """Running record of one team across a batch of matches."""

    name: str
    rating: float = 1000.0
    matches_played: int = 0
    wins: int = 0
    losses: int = 0
    ties: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0
    opponents: List[str] = field(default_factory=list)
    last_rating_change: float = 0.0
    head_to_head: Dict[str, List[int]] = field(default_factory=dict)

    # Filled in by the opponent aggregation pass
    opponent_wins: int = 0
    opponent_losses: int = 0
    opponent_ties: int = 0
    opponent_average_rating: float = 0.0
    strength_of_schedule: float = 0.0
    scaled_points: float = 0.0
    points_percentage: float = 0.0

    def __post_init__(self):
        """Validate team data."""
        if not self.name or not self.name.strip():
            raise ValueError("Team name must be non-empty")

    @property
    def goal_differential(self) -> int:
        return self.goals_for - self.goals_against

    @property
    def goal_differential_display(self) -> str:
        """Goal differential with an explicit sign for positive values."""
        diff = self.goal_differential
        return f"+{diff}" if diff > 0 else str(diff)

    def record_against(self, opponent: str) -> List[int]:
        """
        Get the [wins, losses, ties] tally against one opponent.

        Args:
            opponent: Opponent team name

        Returns:
            Mutable list stored on this record
        """
        return self.head_to_head.setdefault(opponent, [0, 0, 0])

    def add_win(self, opponent: str):
        self.wins += 1
        self.record_against(opponent)[0] += 1

    def add_loss(self, opponent: str):
        self.losses += 1
        self.record_against(opponent)[1] += 1

    def add_tie(self, opponent: str):
        self.ties += 1
        self.record_against(opponent)[2] += 1

    def add_goals(self, scored: int, allowed: int):
        self.goals_for += scored
        self.goals_against += allowed

    def to_dict(self) -> dict:
        """Convert team to dictionary."""
        return {
            "name": self.name,
            "rating": self.rating,
            "last_rating_change": self.last_rating_change,
            "matches_played": self.matches_played,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "goal_differential": self.goal_differential,
            "points": self.points,
            "opponents": list(self.opponents),
            "head_to_head": {name: list(tally) for name, tally in self.head_to_head.items()},
            "opponent_wins": self.opponent_wins,
            "opponent_losses": self.opponent_losses,
            "opponent_ties": self.opponent_ties,
            "opponent_average_rating": self.opponent_average_rating,
            "strength_of_schedule": self.strength_of_schedule,
            "scaled_points": self.scaled_points,
            "points_percentage": self.points_percentage,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TeamRecord":
        """Create a team record from dictionary."""
        return cls(
            name=data["name"],
            rating=data.get("rating", 1000.0),
            matches_played=data.get("matches_played", 0),
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            ties=data.get("ties", 0),
            goals_for=data.get("goals_for", 0),
            goals_against=data.get("goals_against", 0),
            points=data.get("points", 0),
            opponents=list(data.get("opponents", [])),
            last_rating_change=data.get("last_rating_change", 0.0),
            head_to_head={name: list(tally) for name, tally in data.get("head_to_head", {}).items()},
            opponent_wins=data.get("opponent_wins", 0),
            opponent_losses=data.get("opponent_losses", 0),
            opponent_ties=data.get("opponent_ties", 0),
            opponent_average_rating=data.get("opponent_average_rating", 0.0),
            strength_of_schedule=data.get("strength_of_schedule", 0.0),
            scaled_points=data.get("scaled_points", 0.0),
            points_percentage=data.get("points_percentage", 0.0),
        )
