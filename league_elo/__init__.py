"""League standings with Elo ratings, built from pasted schedule/results feeds."""

from .config import RatingConfig, load_config
from .engine.batch import BatchResult, process_batch, update_opponent_aggregates
from .engine.recorder import MatchRecorder
from .models.standings import StandingsTable, TableState
from .models.team import TeamRecord
from .rating.elo import EloCalculator, InvalidResultError, expected_score, new_rating, rating_delta

__version__ = "0.1.0"

__all__ = [
    "BatchResult",
    "EloCalculator",
    "InvalidResultError",
    "MatchRecorder",
    "RatingConfig",
    "StandingsTable",
    "TableState",
    "TeamRecord",
    "expected_score",
    "load_config",
    "new_rating",
    "process_batch",
    "rating_delta",
    "update_opponent_aggregates",
]
