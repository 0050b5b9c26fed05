# defense_metrics/domain/metrics.py - Centralized metric definitions

"""
Centralized definitions for the defensive metrics.
This module is the single source of truth for metric keys, categories,
the published order and the fixed explanation text that accompanies every computed value.
Explanations are part of the published output and must not be reworded.
"""

from dataclasses import dataclass
from typing import List
from enum import Enum


class MetricType(Enum):
    """Types of metrics for categorization."""
    PERCENTAGE = "percentage"      # bounded to [0, 100]
    RATE = "rate"                  # events per drive
    AVERAGE = "average"            # mean of a raw quantity
    INDEX = "index"                # composite score with its own range
    COUNT = "count"                # streak or cumulative count
    DIFFERENTIAL = "differential"  # difference against a reference, may be negative


class MetricGroup(Enum):
    CORE = "core"
    NOVEL = "novel"


@dataclass(frozen=True)
class MetricDefinition:
    """Definition of a metric with all its properties."""
    key: str                    # Published key (e.g., 'havocRate')
    attribute: str              # Attribute on CoreMetrics/NovelMetrics (e.g., 'havoc_rate')
    metric_type: MetricType     # Type category for grouping
    group: MetricGroup          # Core or novel metric set
    description: str            # Fixed explanation attached to computed values


class DefensiveMetrics:
    """Centralized constants for all defensive metrics."""

    # === Core metrics ===

    DEFENSIVE_SUCCESS_RATE = MetricDefinition(
        key='defensiveSuccessRate',
        attribute='defensive_success_rate',
        metric_type=MetricType.PERCENTAGE,
        group=MetricGroup.CORE,
        description="Percentage of plays where offense gained less than required yards for expected success"
    )

    HAVOC_RATE = MetricDefinition(
        key='havocRate',
        attribute='havoc_rate',
        metric_type=MetricType.PERCENTAGE,
        group=MetricGroup.CORE,
        description="Percentage of plays resulting in TFL, sacks, interceptions, or pass breakups"
    )

    STUFF_RATE = MetricDefinition(
        key='stuffRate',
        attribute='stuff_rate',
        metric_type=MetricType.PERCENTAGE,
        group=MetricGroup.CORE,
        description="Percentage of run plays held to zero or negative yards"
    )

    EXPLOSIVES_ALLOWED_RATE = MetricDefinition(
        key='explosivesAllowedRate',
        attribute='explosives_allowed_rate',
        metric_type=MetricType.PERCENTAGE,
        group=MetricGroup.CORE,
        description="Percentage of plays resulting in explosive gains (10+ rush, 15+ pass)"
    )

    RED_ZONE_TD_PERCENT_ALLOWED = MetricDefinition(
        key='redZoneTdPercentAllowed',
        attribute='red_zone_td_percent_allowed',
        metric_type=MetricType.PERCENTAGE,
        group=MetricGroup.CORE,
        description="Percentage of red zone drives ending in touchdowns"
    )

    THIRD_DOWN_STOP_RATE = MetricDefinition(
        key='thirdDownStopRate',
        attribute='third_down_stop_rate',
        metric_type=MetricType.PERCENTAGE,
        group=MetricGroup.CORE,
        description="Percentage of third down plays that were defensive successes"
    )

    TAKEAWAY_RATE = MetricDefinition(
        key='takeawayRate',
        attribute='takeaway_rate',
        metric_type=MetricType.RATE,
        group=MetricGroup.CORE,
        description="Average takeaways per defensive drive"
    )

    POINTS_PER_DRIVE_ALLOWED = MetricDefinition(
        key='pointsPerDriveAllowed',
        attribute='points_per_drive_allowed',
        metric_type=MetricType.RATE,
        group=MetricGroup.CORE,
        description="Estimated points allowed per opposing drive"
    )

    AVG_START_FIELD_POSITION = MetricDefinition(
        key='avgStartFieldPosition',
        attribute='avg_start_field_position',
        metric_type=MetricType.AVERAGE,
        group=MetricGroup.CORE,
        description="Average yards to goal at start of opposing drives"
    )

    PASSER_DISRUPTION_RATE = MetricDefinition(
        key='passerDisruptionRate',
        attribute='passer_disruption_rate',
        metric_type=MetricType.PERCENTAGE,
        group=MetricGroup.CORE,
        description="Percentage of pass plays with sacks, PBUs, or interceptions"
    )

    PENALTY_HURT_RATE = MetricDefinition(
        key='penaltyHurtRate',
        attribute='penalty_hurt_rate',
        metric_type=MetricType.RATE,
        group=MetricGroup.CORE,
        description="Average defensive penalties per drive"
    )

    EARLY_DOWN_SUCCESS = MetricDefinition(
        key='earlyDownSuccess',
        attribute='early_down_success',
        metric_type=MetricType.PERCENTAGE,
        group=MetricGroup.CORE,
        description="Defensive success rate on 1st and 2nd downs"
    )

    AVG_THIRD_DOWN_DISTANCE = MetricDefinition(
        key='avgThirdDownDistance',
        attribute='avg_third_down_distance',
        metric_type=MetricType.AVERAGE,
        group=MetricGroup.CORE,
        description="Average yards to go on third down attempts"
    )

    # === Novel metrics ===

    CONTAIN_INTEGRITY_INDEX = MetricDefinition(
        key='containIntegrityIndex',
        attribute='contain_integrity_index',
        metric_type=MetricType.PERCENTAGE,
        group=MetricGroup.NOVEL,
        description="Percentage of edge runs held to 5 yards or fewer - measures edge containment discipline"
    )

    EXPLOSIVE_RESPONSE_FACTOR = MetricDefinition(
        key='explosiveResponseFactor',
        attribute='explosive_response_factor',
        metric_type=MetricType.INDEX,
        group=MetricGroup.NOVEL,
        description="Average defensive success rate of the next 2 plays after allowing an explosive play"
    )

    SUSTAINED_PRESSURE_SCORE = MetricDefinition(
        key='sustainedPressureScore',
        attribute='sustained_pressure_score',
        metric_type=MetricType.INDEX,
        group=MetricGroup.NOVEL,
        description="Moving average of passer disruption rate over last 10 pass plays"
    )

    FINISHING_STRENGTH = MetricDefinition(
        key='finishingStrength',
        attribute='finishing_strength',
        metric_type=MetricType.INDEX,
        group=MetricGroup.NOVEL,
        description="Ratio of late-game (3rd/4th quarter) success rate to overall success rate"
    )

    DRIVE_STRESS_INDEX = MetricDefinition(
        key='driveStressIndex',
        attribute='drive_stress_index',
        metric_type=MetricType.INDEX,
        group=MetricGroup.NOVEL,
        description="Composite stress score based on plays (40%), yards (30%), and conversions (30%) on 0-100 scale"
    )

    NEGATIVE_NET_YARDAGE_CHAIN = MetricDefinition(
        key='negativeNetYardageChain',
        attribute='negative_net_yardage_chain',
        metric_type=MetricType.COUNT,
        group=MetricGroup.NOVEL,
        description="Maximum consecutive defensive plays holding offense to zero or negative net yards"
    )

    EXPLOSIVE_DIFFERENTIAL = MetricDefinition(
        key='explosiveDifferential',
        attribute='explosive_differential',
        metric_type=MetricType.DIFFERENTIAL,
        group=MetricGroup.NOVEL,
        description="Difference between current explosive plays per drive and season average"
    )

    RED_ZONE_SHRINK_FACTOR = MetricDefinition(
        key='redZoneShrinkFactor',
        attribute='red_zone_shrink_factor',
        metric_type=MetricType.DIFFERENTIAL,
        group=MetricGroup.NOVEL,
        description="Difference between red zone and non-red zone defensive success rates"
    )

    SITUATIONAL_FLEX_SCORE = MetricDefinition(
        key='situationalFlexScore',
        attribute='situational_flex_score',
        metric_type=MetricType.INDEX,
        group=MetricGroup.NOVEL,
        description="Consistency of performance across field zones (1 = perfectly consistent, 0 = highly variable)"
    )

    FORMATION_STRESS_RATE = MetricDefinition(
        key='formationStressRate',
        attribute='formation_stress_rate',
        metric_type=MetricType.PERCENTAGE,
        group=MetricGroup.NOVEL,
        description="Stress rate for worst formation"
    )

    ADAPTIVE_ADJUSTMENT_LAG = MetricDefinition(
        key='adaptiveAdjustmentLag',
        attribute='adaptive_adjustment_lag',
        metric_type=MetricType.COUNT,
        group=MetricGroup.NOVEL,
        description="Median plays between explosive by formation and next successful stop vs that formation"
    )

    PRESSURE_TO_OUTCOME_RATIO = MetricDefinition(
        key='pressureToOutcomeRatio',
        attribute='pressure_to_outcome_ratio',
        metric_type=MetricType.INDEX,
        group=MetricGroup.NOVEL,
        description="Ratio of high-value outcomes (sacks + takeaways) to total pressure events"
    )

    DRIVE_KILL_ACTIONS_PER_DRIVE = MetricDefinition(
        key='driveKillActionsPerDrive',
        attribute='drive_kill_actions_per_drive',
        metric_type=MetricType.RATE,
        group=MetricGroup.NOVEL,
        description="Average drive-killing actions (sacks, TFL, takeaways, offensive penalties) per drive"
    )

    COVERAGE_CONTEST_RATE = MetricDefinition(
        key='coverageContestRate',
        attribute='coverage_contest_rate',
        metric_type=MetricType.PERCENTAGE,
        group=MetricGroup.NOVEL,
        description="Percentage of pass targets with pass breakups or interceptions"
    )

    FIELD_ZONE_EPA_SURROGATE = MetricDefinition(
        key='fieldZoneEpaSurrogate',
        attribute='field_zone_epa_surrogate',
        metric_type=MetricType.DIFFERENTIAL,
        group=MetricGroup.NOVEL,
        description="Expected points impact per play by field zone (negative = good for defense)"
    )

    MOMENTUM_SWING_INDEX = MetricDefinition(
        key='momentumSwingIndex',
        attribute='momentum_swing_index',
        metric_type=MetricType.COUNT,
        group=MetricGroup.NOVEL,
        description="Cumulative momentum score (+2 takeaway, +1 3rd stop/sack/TFL, -2 explosive, -3 TD)"
    )

    @classmethod
    def get_core_metrics(cls) -> List[MetricDefinition]:
        """Core metric definitions in published order."""
        return cls._get_group(MetricGroup.CORE)

    @classmethod
    def get_novel_metrics(cls) -> List[MetricDefinition]:
        """Novel metric definitions in published order."""
        return cls._get_group(MetricGroup.NOVEL)

    @classmethod
    def _get_group(cls, group: MetricGroup) -> List[MetricDefinition]:
        # Published order is declaration order within the class body
        return [
            value for value in vars(cls).values()
            if isinstance(value, MetricDefinition) and value.group == group
        ]

    @classmethod
    def get_all_metrics(cls) -> List[MetricDefinition]:
        """Get all metric definitions."""
        return cls.get_core_metrics() + cls.get_novel_metrics()

    @classmethod
    def get_trend_metrics(cls) -> List[MetricDefinition]:
        """Core metrics tracked game by game in trend series."""
        return [
            cls.DEFENSIVE_SUCCESS_RATE,
            cls.HAVOC_RATE,
            cls.STUFF_RATE,
            cls.EXPLOSIVES_ALLOWED_RATE
        ]

    @classmethod
    def get_metric_by_key(cls, key: str) -> MetricDefinition:
        """Get metric definition by key."""
        for metric in cls.get_all_metrics():
            if metric.key == key:
                return metric
        raise ValueError(f"Unknown metric key: {key}")

    @classmethod
    def get_metrics_by_type(cls, metric_type: MetricType) -> List[MetricDefinition]:
        """Get all metrics of a specific type."""
        return [metric for metric in cls.get_all_metrics() if metric.metric_type == metric_type]
