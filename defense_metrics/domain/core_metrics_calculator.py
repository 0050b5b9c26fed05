# defense_metrics/domain/core_metrics_calculator.py - Core defensive metrics calculator

import logging
from typing import Optional
import pandas as pd

from .entities import CoreMetrics
from .metrics import DefensiveMetrics as M
from .utilities import PlayFilter, calculate_percentage, safe_ratio, create_metric_value
from ..config.metric_constants import (
    DRIVE_RESULT_TD, DRIVE_RESULT_FG, DEFAULT_START_YARDS_TO_GOAL
)
from ..config.settings import MetricsSettings

logger = logging.getLogger(__name__)

HAVOC_FLAGS = ('is_tfl', 'is_sack', 'is_takeaway', 'is_pbu')
DISRUPTION_FLAGS = ('is_sack', 'is_pbu', 'is_takeaway')


class CoreMetricsCalculator:
    """Calculates the 13 core rate and count metrics."""

    def __init__(self, settings: Optional[MetricsSettings] = None):
        self._settings = settings or MetricsSettings.default()
        self._play_filter = PlayFilter()

    def calculate(self, plays: pd.DataFrame, drives: pd.DataFrame) -> CoreMetrics:
        """Calculate core metrics from normalised plays and drives."""
        pf = self._play_filter
        total_plays = len(plays)
        total_drives = len(drives)
        evaluable_plays = pf.get_evaluable_plays(plays)
        run_plays = pf.get_run_plays(plays)
        pass_plays = pf.get_pass_plays(plays)
        third_down_plays = pf.get_third_down_plays(plays)
        early_down_plays = pf.get_early_down_plays(plays)
        red_zone_drives = pf.get_red_zone_drives(drives, self._settings.red_zone_max_yards_to_goal)

        logger.debug(
            f"Total plays: {total_plays}, Evaluable plays: {len(evaluable_plays)}, "
            f"Run: {len(run_plays)}, Pass: {len(pass_plays)}, 3rd down: {len(third_down_plays)}, "
            f"Red zone drives: {len(red_zone_drives)}"
        )

        return CoreMetrics(
            defensive_success_rate=create_metric_value(
                calculate_percentage(int(pf.success(evaluable_plays).sum()), len(evaluable_plays)),
                M.DEFENSIVE_SUCCESS_RATE.description
            ),
            havoc_rate=create_metric_value(
                calculate_percentage(int(pf.any_flag(plays, HAVOC_FLAGS).sum()), total_plays),
                M.HAVOC_RATE.description
            ),
            stuff_rate=create_metric_value(
                calculate_percentage(len(pf.get_non_positive_gain_plays(run_plays)), len(run_plays)),
                M.STUFF_RATE.description
            ),
            explosives_allowed_rate=create_metric_value(
                calculate_percentage(int(pf.flag(plays, 'is_explosive').sum()), total_plays),
                M.EXPLOSIVES_ALLOWED_RATE.description
            ),
            red_zone_td_percent_allowed=create_metric_value(
                calculate_percentage(int((red_zone_drives['result'] == DRIVE_RESULT_TD).sum()),
                                     len(red_zone_drives)),
                M.RED_ZONE_TD_PERCENT_ALLOWED.description
            ),
            third_down_stop_rate=create_metric_value(
                calculate_percentage(int(pf.success(third_down_plays).sum()), len(third_down_plays)),
                M.THIRD_DOWN_STOP_RATE.description
            ),
            takeaway_rate=create_metric_value(
                safe_ratio(int(pf.flag(plays, 'is_takeaway').sum()), total_drives),
                M.TAKEAWAY_RATE.description
            ),
            points_per_drive_allowed=create_metric_value(
                self._estimate_points_per_drive(drives),
                M.POINTS_PER_DRIVE_ALLOWED.description
            ),
            avg_start_field_position=create_metric_value(
                self._average_start_field_position(drives),
                M.AVG_START_FIELD_POSITION.description
            ),
            passer_disruption_rate=create_metric_value(
                calculate_percentage(int(pf.any_flag(pass_plays, DISRUPTION_FLAGS).sum()), len(pass_plays)),
                M.PASSER_DISRUPTION_RATE.description
            ),
            penalty_hurt_rate=create_metric_value(
                safe_ratio(int(pf.flag(plays, 'is_penalty_defense').sum()), total_drives),
                M.PENALTY_HURT_RATE.description
            ),
            early_down_success=create_metric_value(
                calculate_percentage(int(pf.success(early_down_plays).sum()), len(early_down_plays)),
                M.EARLY_DOWN_SUCCESS.description
            ),
            avg_third_down_distance=create_metric_value(
                # Missing distances count as zero yards to go
                safe_ratio(float(third_down_plays['distance'].fillna(0).sum()), len(third_down_plays)),
                M.AVG_THIRD_DOWN_DISTANCE.description
            )
        )

    def _estimate_points_per_drive(self, drives: pd.DataFrame) -> float:
        """7 points per touchdown drive, 3 per field goal drive, averaged over all drives."""
        if len(drives) == 0:
            return 0
        touchdowns = int((drives['result'] == DRIVE_RESULT_TD).sum())
        field_goals = int((drives['result'] == DRIVE_RESULT_FG).sum())
        total_points = (touchdowns * self._settings.touchdown_points
                        + field_goals * self._settings.field_goal_points)
        return total_points / len(drives)

    def _average_start_field_position(self, drives: pd.DataFrame) -> float:
        if len(drives) == 0:
            return DEFAULT_START_YARDS_TO_GOAL
        # Only missing starts default; a start of 0 is the goal line
        return float(drives['start_yard_to_goal'].fillna(DEFAULT_START_YARDS_TO_GOAL).mean())
