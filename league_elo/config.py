"""Tunable rating and scoring configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from typing import Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class RatingConfig:
    """All knobs used by the rating engine and the points table."""

    # Elo
    k_factor: float = 40.0
    chance_to_win_divider: float = 600.0
    initial_rating: float = 1000.0
    use_goal_differential_multiplier: bool = False
    round_ratings: bool = True

    # League points
    win_points: int = 3
    tie_points: int = 1
    lose_points: int = 0
    goal_point_cap: int = 0
    shutout_bonus: int = 0
    max_points_per_match: int = 3

    # Input feed
    fields_per_row: int = 11

    def __post_init__(self):
        """Validate configuration values."""
        if self.k_factor <= 0:
            raise ValueError(f"k_factor must be positive, got {self.k_factor}")
        if self.chance_to_win_divider <= 0:
            raise ValueError(
                f"chance_to_win_divider must be positive, got {self.chance_to_win_divider}"
            )
        for name in ("win_points", "tie_points", "lose_points", "goal_point_cap", "shutout_bonus"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.max_points_per_match <= 0:
            raise ValueError(
                f"max_points_per_match must be positive, got {self.max_points_per_match}"
            )
        if self.fields_per_row < 8:
            raise ValueError(f"fields_per_row must be at least 8, got {self.fields_per_row}")

    @classmethod
    def standard(cls) -> "RatingConfig":
        """League scoring: 3 for a win, 1 for a tie."""
        return cls()

    @classmethod
    def tournament(cls) -> "RatingConfig":
        """Tournament scoring: 6/3/0, a point per goal up to 3, 1 for a shutout, 10 max."""
        return cls(
            win_points=6,
            tie_points=3,
            lose_points=0,
            goal_point_cap=3,
            shutout_bonus=1,
            max_points_per_match=10,
        )

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict, base: Optional["RatingConfig"] = None) -> "RatingConfig":
        """Create config from dictionary, layering known keys over ``base``."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        values = (base or cls()).to_dict()
        values.update({k: v for k, v in data.items() if k in known})
        return cls(**values)


def load_config(file_path: str, base: Optional[RatingConfig] = None) -> RatingConfig:
    """
    Load a config from a JSON file of overrides.

    Args:
        file_path: Path to JSON file
        base: Config the overrides are applied to (defaults to standard scoring)

    Returns:
        RatingConfig
    """
    with open(file_path, "r") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {file_path} must contain a JSON object")

    return RatingConfig.from_dict(data, base=base)
