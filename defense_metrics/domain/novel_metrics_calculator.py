# defense_metrics/domain/novel_metrics_calculator.py

"""
Novel Defensive Metrics Calculator
Composite indices built on top of the play and drive records: containment,
pressure persistence, in-game adjustment, field-zone expected points and
momentum. Sequence-based metrics rely on plays being in play order.
"""

import logging
from typing import List, Optional, Tuple
import numpy as np
import pandas as pd

from .entities import MetricValue, NovelMetrics
from .metrics import DefensiveMetrics as M
from .utilities import (
    PlayFilter, calculate_percentage, safe_ratio, sequential_mean, format_half_up, create_metric_value
)
from ..config.metric_constants import (
    SITUATIONAL_FIELD_ZONES, THIRD_DOWN, FIELD_ZONE_RED_ZONE
)
from ..config.settings import MetricsSettings

logger = logging.getLogger(__name__)

PRESSURE_FLAGS = ('is_sack', 'is_pbu', 'is_takeaway')
OUTCOME_FLAGS = ('is_sack', 'is_takeaway')
DRIVE_KILL_FLAGS = ('is_sack', 'is_tfl', 'is_takeaway', 'is_penalty_offense')
CONTEST_FLAGS = ('is_pbu', 'is_takeaway')

NO_DRIVES_STRESS_EXPLANATION = "Composite stress score based on plays, yards, and conversions (0-100 scale)"
NO_ZONES_FLEX_EXPLANATION = "Consistency of performance across field zones (1 = perfectly consistent)"


class NovelMetricsCalculator:
    """Calculates the 16 novel composite metrics."""

    def __init__(self, settings: Optional[MetricsSettings] = None):
        self._settings = settings or MetricsSettings.default()
        self._play_filter = PlayFilter()

    def calculate(self, plays: pd.DataFrame, drives: pd.DataFrame) -> NovelMetrics:
        """Calculate every novel metric from normalised plays and drives."""
        return NovelMetrics(
            contain_integrity_index=self.contain_integrity_index(plays),
            explosive_response_factor=self.explosive_response_factor(plays),
            sustained_pressure_score=self.sustained_pressure_score(plays),
            finishing_strength=self.finishing_strength(plays),
            drive_stress_index=self.drive_stress_index(drives),
            negative_net_yardage_chain=self.negative_net_yardage_chain(plays),
            explosive_differential=self.explosive_differential(plays, drives),
            red_zone_shrink_factor=self.red_zone_shrink_factor(plays),
            situational_flex_score=self.situational_flex_score(plays),
            formation_stress_rate=self.formation_stress_rate(plays),
            adaptive_adjustment_lag=self.adaptive_adjustment_lag(plays),
            pressure_to_outcome_ratio=self.pressure_to_outcome_ratio(plays),
            drive_kill_actions_per_drive=self.drive_kill_actions_per_drive(plays, drives),
            coverage_contest_rate=self.coverage_contest_rate(plays),
            field_zone_epa_surrogate=self.field_zone_epa_surrogate(plays),
            momentum_swing_index=self.momentum_swing_index(plays)
        )

    def _success_rate(self, plays: pd.DataFrame) -> float:
        return calculate_percentage(int(self._play_filter.success(plays).sum()), len(plays))

    # === Containment and pressure ===

    def contain_integrity_index(self, plays: pd.DataFrame) -> MetricValue:
        edge_runs = self._play_filter.get_edge_runs(plays, self._settings.edge_keywords)
        gain = edge_runs['gain']
        contained = int((gain.notna() & (gain <= self._settings.max_contained_gain)).sum())

        return create_metric_value(
            calculate_percentage(contained, len(edge_runs)),
            M.CONTAIN_INTEGRITY_INDEX.description
        )

    def explosive_response_factor(self, plays: pd.DataFrame) -> MetricValue:
        """Success fraction of the follow-up plays after each explosive play.

        Explosive plays too close to the end to have a full follow-up
        window are skipped.
        """
        follow_up = self._settings.explosive_follow_up_plays
        explosive = self._play_filter.flag(plays, 'is_explosive').to_numpy()
        success = self._play_filter.success(plays).to_numpy()

        responses = [
            int(success[i + 1:i + 1 + follow_up].sum()) / follow_up
            for i in range(len(plays) - follow_up)
            if explosive[i]
        ]

        return create_metric_value(
            sequential_mean(responses),
            M.EXPLOSIVE_RESPONSE_FACTOR.description
        )

    def sustained_pressure_score(self, plays: pd.DataFrame) -> MetricValue:
        pass_plays = self._play_filter.get_pass_plays(plays)
        window = self._settings.pressure_window_size
        pressure = self._play_filter.any_flag(pass_plays, PRESSURE_FLAGS).astype(int).reset_index(drop=True)
        window_counts = pressure.rolling(window=window).sum().dropna()

        return create_metric_value(
            sequential_mean(int(round(count)) / window for count in window_counts),
            M.SUSTAINED_PRESSURE_SCORE.description
        )

    def pressure_to_outcome_ratio(self, plays: pd.DataFrame) -> MetricValue:
        pressure_events = int(self._play_filter.any_flag(plays, PRESSURE_FLAGS).sum())
        outcomes = int(self._play_filter.any_flag(plays, OUTCOME_FLAGS).sum())

        return create_metric_value(
            safe_ratio(outcomes, pressure_events),
            M.PRESSURE_TO_OUTCOME_RATIO.description
        )

    def coverage_contest_rate(self, plays: pd.DataFrame) -> MetricValue:
        # Every pass play stands in for a target
        pass_plays = self._play_filter.get_pass_plays(plays)
        contests = int(self._play_filter.any_flag(pass_plays, CONTEST_FLAGS).sum())

        return create_metric_value(
            calculate_percentage(contests, len(pass_plays)),
            M.COVERAGE_CONTEST_RATE.description
        )

    # === Game flow ===

    def finishing_strength(self, plays: pd.DataFrame) -> MetricValue:
        evaluable = self._play_filter.get_evaluable_plays(plays)
        late_game = self._play_filter.get_late_game_plays(evaluable)

        overall_success = self._success_rate(evaluable)
        late_game_success = self._success_rate(late_game)

        return create_metric_value(
            safe_ratio(late_game_success, overall_success),
            M.FINISHING_STRENGTH.description
        )

    def negative_net_yardage_chain(self, plays: pd.DataFrame) -> MetricValue:
        max_chain = 0
        current_chain = 0

        for gain in plays['gain']:
            if not np.isnan(gain) and gain <= 0:
                current_chain += 1
                max_chain = max(max_chain, current_chain)
            else:
                current_chain = 0

        return create_metric_value(max_chain, M.NEGATIVE_NET_YARDAGE_CHAIN.description)

    def adaptive_adjustment_lag(self, plays: pd.DataFrame) -> MetricValue:
        """Median number of plays from an explosive play to the next stop
        against the same formation, looking ahead a bounded number of plays."""
        lookahead = self._settings.adjustment_lookahead_plays
        explosive = self._play_filter.flag(plays, 'is_explosive').to_numpy()
        success = self._play_filter.success(plays).to_numpy()
        formations = plays['offense_formation'].to_numpy()
        total = len(plays)
        lags: List[int] = []

        for i in range(total):
            formation = formations[i]
            if not explosive[i] or not formation:
                continue
            for j in range(i + 1, min(i + lookahead, total)):
                if formations[j] == formation and success[j]:
                    lags.append(j - i)
                    break

        median_lag = sorted(lags)[len(lags) // 2] if lags else 0

        return create_metric_value(median_lag, M.ADAPTIVE_ADJUSTMENT_LAG.description)

    def momentum_swing_index(self, plays: pd.DataFrame) -> MetricValue:
        if len(plays) == 0:
            return create_metric_value(0, M.MOMENTUM_SWING_INDEX.description)

        pf = self._play_filter
        weights = self._settings.momentum_weights
        third_down_stop = (plays['down'] == THIRD_DOWN) & pf.success(plays)

        swings = (
            pf.flag(plays, 'is_takeaway').astype(int) * weights['takeaway']
            + third_down_stop.astype(int) * weights['third_down_stop']
            + pf.flag(plays, 'is_sack').astype(int) * weights['sack']
            + pf.flag(plays, 'is_tfl').astype(int) * weights['tfl']
            + pf.flag(plays, 'is_explosive').astype(int) * weights['explosive']
            + pf.flag(plays, 'is_td_allowed').astype(int) * weights['td_allowed']
        )
        momentum = swings.cumsum()

        return create_metric_value(int(momentum.iloc[-1]), M.MOMENTUM_SWING_INDEX.description)

    # === Drives ===

    def drive_stress_index(self, drives: pd.DataFrame) -> MetricValue:
        if len(drives) == 0:
            return create_metric_value(0, NO_DRIVES_STRESS_EXPLANATION)

        s = self._settings
        plays_component = (drives['total_plays'].fillna(0) / s.stress_max_plays).clip(upper=1) * s.stress_weights['plays']
        yards_component = (drives['total_yards'].fillna(0) / s.stress_max_yards).clip(upper=1) * s.stress_weights['yards']
        conversion = drives['result'].map(s.stress_conversion_credit).fillna(0).astype(float)
        conversion_component = conversion * s.stress_weights['conversion']

        drive_stress = (plays_component + yards_component + conversion_component) * 100

        return create_metric_value(sequential_mean(drive_stress), M.DRIVE_STRESS_INDEX.description)

    def explosive_differential(self, plays: pd.DataFrame, drives: pd.DataFrame) -> MetricValue:
        explosives_per_drive = safe_ratio(int(self._play_filter.flag(plays, 'is_explosive').sum()), len(drives))

        return create_metric_value(
            explosives_per_drive - self._settings.league_explosives_per_drive,
            M.EXPLOSIVE_DIFFERENTIAL.description
        )

    def drive_kill_actions_per_drive(self, plays: pd.DataFrame, drives: pd.DataFrame) -> MetricValue:
        kill_actions = int(self._play_filter.any_flag(plays, DRIVE_KILL_FLAGS).sum())

        return create_metric_value(
            safe_ratio(kill_actions, len(drives)),
            M.DRIVE_KILL_ACTIONS_PER_DRIVE.description
        )

    # === Field position and situations ===

    def red_zone_shrink_factor(self, plays: pd.DataFrame) -> MetricValue:
        evaluable = self._play_filter.get_evaluable_plays(plays)
        in_red_zone = evaluable['field_zone'] == FIELD_ZONE_RED_ZONE

        return create_metric_value(
            self._success_rate(evaluable[in_red_zone]) - self._success_rate(evaluable[~in_red_zone]),
            M.RED_ZONE_SHRINK_FACTOR.description
        )

    def situational_flex_score(self, plays: pd.DataFrame) -> MetricValue:
        evaluable = self._play_filter.get_evaluable_plays(plays)
        success_rates = []
        for zone in SITUATIONAL_FIELD_ZONES:
            zone_plays = evaluable[evaluable['field_zone'] == zone]
            if len(zone_plays) > 0:
                success_rates.append(self._success_rate(zone_plays))

        if not success_rates:
            return create_metric_value(0, NO_ZONES_FLEX_EXPLANATION)

        rates = np.array(success_rates, dtype=float)
        mean = rates.mean()
        normalized_std = rates.std() / mean if mean > 0 else 0

        return create_metric_value(max(0.0, 1 - normalized_std), M.SITUATIONAL_FLEX_SCORE.description)

    def formation_stress_rate(self, plays: pd.DataFrame) -> MetricValue:
        """Worst stress rate across offensive formations.

        A stress event is an explosive play or a third down the defense
        failed to stop. Ties keep the formation seen first.
        """
        worst_formation, worst_rate = self._worst_formation(plays)
        explanation = (f"{M.FORMATION_STRESS_RATE.description}: "
                       f"{worst_formation or 'N/A'} ({format_half_up(worst_rate, 1)}%)")

        return create_metric_value(worst_rate, explanation, note=worst_formation)

    def _worst_formation(self, plays: pd.DataFrame) -> Tuple[Optional[str], float]:
        pf = self._play_filter
        stress = pf.flag(plays, 'is_explosive') | ((plays['down'] == THIRD_DOWN) & ~pf.success(plays))
        formations = [f for f in pd.unique(plays['offense_formation']) if f]

        worst_formation, worst_rate = None, 0
        for formation in formations:
            in_formation = plays['offense_formation'] == formation
            rate = calculate_percentage(int((stress & in_formation).sum()), int(in_formation.sum()))
            if worst_formation is None or rate > worst_rate:
                worst_formation, worst_rate = formation, rate

        return worst_formation, worst_rate

    def field_zone_epa_surrogate(self, plays: pd.DataFrame) -> MetricValue:
        """Simplified EPA using fixed field-position weights per zone."""
        s = self._settings
        zone = plays['field_zone']
        qualifying = plays[zone.notna() & (zone != '') & plays['gain'].notna()]
        if len(qualifying) == 0:
            return create_metric_value(0, M.FIELD_ZONE_EPA_SURROGATE.description)

        weights = qualifying['field_zone'].map(s.epa_zone_weights).fillna(0).astype(float)
        contributions = np.where(
            self._play_filter.success(qualifying),
            weights * s.epa_success_multiplier,
            weights * s.epa_failure_multiplier
        )

        return create_metric_value(sequential_mean(contributions), M.FIELD_ZONE_EPA_SURROGATE.description)
