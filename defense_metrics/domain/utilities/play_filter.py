# defense_metrics/domain/utilities/play_filter.py

import logging
from typing import Iterable
import pandas as pd

from ...config.metric_constants import (
    THIRD_DOWN, EARLY_DOWNS, LATE_GAME_START_QUARTER
)

logger = logging.getLogger(__name__)


class PlayFilter:
    """Handles filtering of plays and drives for different metric contexts.

    All inputs are DataFrames produced by ``records.normalize_plays`` and
    ``records.normalize_drives``. Subsets keep play order.
    """

    @staticmethod
    def flag(data: pd.DataFrame, column: str) -> pd.Series:
        """Boolean mask of a flag column; missing values count as False."""
        return data[column].eq(True)

    def any_flag(self, data: pd.DataFrame, columns: Iterable[str]) -> pd.Series:
        """Mask of rows where at least one of the flag columns is set."""
        mask = pd.Series(False, index=data.index)
        for column in columns:
            mask |= self.flag(data, column)
        return mask

    def success(self, data: pd.DataFrame) -> pd.Series:
        """Mask of defensive successes; unevaluated plays are not successes."""
        return self.flag(data, 'defense_success')

    def get_evaluable_plays(self, data: pd.DataFrame) -> pd.DataFrame:
        """Plays where defensive success was judged (non-null)."""
        return data[data['defense_success'].notna()]

    def get_run_plays(self, data: pd.DataFrame) -> pd.DataFrame:
        return data[self.flag(data, 'is_run')]

    def get_pass_plays(self, data: pd.DataFrame) -> pd.DataFrame:
        return data[self.flag(data, 'is_pass')]

    def get_third_down_plays(self, data: pd.DataFrame) -> pd.DataFrame:
        return data[data['down'] == THIRD_DOWN]

    def get_early_down_plays(self, data: pd.DataFrame) -> pd.DataFrame:
        return data[data['down'].isin(EARLY_DOWNS)]

    def get_late_game_plays(self, data: pd.DataFrame) -> pd.DataFrame:
        return data[data['quarter'] >= LATE_GAME_START_QUARTER]

    def get_non_positive_gain_plays(self, data: pd.DataFrame) -> pd.DataFrame:
        """Plays with a recorded gain of zero or less."""
        return data[data['gain'].notna() & (data['gain'] <= 0)]

    def get_edge_runs(self, data: pd.DataFrame, keywords: Iterable[str]) -> pd.DataFrame:
        """Run plays whose direction mentions one of the edge keywords (case-insensitive)."""
        runs = self.get_run_plays(data)
        if len(runs) == 0:
            return runs
        direction = runs['play_direction'].fillna('').astype(str).str.lower()
        mask = pd.Series(False, index=runs.index)
        for keyword in keywords:
            mask |= direction.str.contains(keyword.lower(), regex=False)
        return runs[mask]

    def get_red_zone_drives(self, drives: pd.DataFrame, max_yards_to_goal: float) -> pd.DataFrame:
        """Drives that started within the red zone."""
        start = drives['start_yard_to_goal']
        return drives[start.notna() & (start <= max_yards_to_goal)]
