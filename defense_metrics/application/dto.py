# defense_metrics/application/dto.py - Data Transfer Objects with input validation

from dataclasses import dataclass
from typing import List, Optional

from ..domain.validation import MetricsValidator


@dataclass
class MetricsSummaryRequest:
    """Request for a metrics summary over a selection of games.

    ``game_ids`` of None selects every uploaded game.
    """
    game_ids: Optional[List[str]] = None

    def __post_init__(self):
        """Validate input data after initialization."""
        self.game_ids = MetricsValidator.validate_game_ids(self.game_ids, "game_ids")


@dataclass
class TrendRequest:
    """Request for per-game trend series, in the order the games are given."""
    game_ids: List[str]

    def __post_init__(self):
        self.game_ids = MetricsValidator.validate_trend_game_ids(self.game_ids, "game_ids")
