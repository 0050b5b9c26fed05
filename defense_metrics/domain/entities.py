# defense_metrics/domain/entities.py - Core domain entities

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .metrics import DefensiveMetrics
from ..config.metric_constants import (
    DRIVE_RESULTS, NO_DATA_EXPLANATION, DEFAULT_START_YARDS_TO_GOAL
)


@dataclass(frozen=True)
class Game:
    """Uploaded game entity."""
    game_id: str
    filename: str
    display_name: Optional[str] = None

    @property
    def label(self) -> str:
        """Name shown in trend series: display name, falling back to filename."""
        return self.display_name or self.filename

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> 'Game':
        """Factory method to create Game from a store row (camelCase or snake_case)."""
        game_id = record.get('id', record.get('game_id', record.get('gameId')))
        if game_id is None:
            raise ValueError(f"Game record has no identifier: {dict(record)}")
        return cls(
            game_id=str(game_id),
            filename=record.get('filename') or '',
            display_name=record.get('display_name', record.get('displayName')) or None
        )


@dataclass(frozen=True)
class MetricValue:
    """A single computed metric with its fixed explanation."""
    value: Optional[float]
    explanation: str
    note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {'value': self.value, 'explanation': self.explanation}
        if self.note is not None:
            result['note'] = self.note
        return result


def _no_data(value: float = 0) -> MetricValue:
    return MetricValue(value=value, explanation=NO_DATA_EXPLANATION)


@dataclass(frozen=True)
class CoreMetrics:
    """The 13 core rate/count metrics."""
    defensive_success_rate: MetricValue
    havoc_rate: MetricValue
    stuff_rate: MetricValue
    explosives_allowed_rate: MetricValue
    red_zone_td_percent_allowed: MetricValue
    third_down_stop_rate: MetricValue
    takeaway_rate: MetricValue
    points_per_drive_allowed: MetricValue
    avg_start_field_position: MetricValue
    passer_disruption_rate: MetricValue
    penalty_hurt_rate: MetricValue
    early_down_success: MetricValue
    avg_third_down_distance: MetricValue

    @classmethod
    def empty(cls) -> 'CoreMetrics':
        """Create core metrics for when no data has been uploaded.

        Every value is zero except the average start field position, which
        defaults to midfield.
        """
        values = {d.attribute: _no_data() for d in DefensiveMetrics.get_core_metrics()}
        values[DefensiveMetrics.AVG_START_FIELD_POSITION.attribute] = _no_data(DEFAULT_START_YARDS_TO_GOAL)
        return cls(**values)

    def get(self, key: str) -> MetricValue:
        """Look up a metric by its published key."""
        return getattr(self, DefensiveMetrics.get_metric_by_key(key).attribute)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {d.key: getattr(self, d.attribute).to_dict() for d in DefensiveMetrics.get_core_metrics()}


@dataclass(frozen=True)
class NovelMetrics:
    """The 16 composite metrics."""
    contain_integrity_index: MetricValue
    explosive_response_factor: MetricValue
    sustained_pressure_score: MetricValue
    finishing_strength: MetricValue
    drive_stress_index: MetricValue
    negative_net_yardage_chain: MetricValue
    explosive_differential: MetricValue
    red_zone_shrink_factor: MetricValue
    situational_flex_score: MetricValue
    formation_stress_rate: MetricValue
    adaptive_adjustment_lag: MetricValue
    pressure_to_outcome_ratio: MetricValue
    drive_kill_actions_per_drive: MetricValue
    coverage_contest_rate: MetricValue
    field_zone_epa_surrogate: MetricValue
    momentum_swing_index: MetricValue

    @classmethod
    def empty(cls) -> 'NovelMetrics':
        return cls(**{d.attribute: _no_data() for d in DefensiveMetrics.get_novel_metrics()})

    def get(self, key: str) -> MetricValue:
        return getattr(self, DefensiveMetrics.get_metric_by_key(key).attribute)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {d.key: getattr(self, d.attribute).to_dict() for d in DefensiveMetrics.get_novel_metrics()}


def empty_drive_distribution() -> Dict[str, int]:
    """Fresh histogram with every drive result category at zero."""
    return {result: 0 for result in DRIVE_RESULTS}


@dataclass(frozen=True)
class MetricsSummary:
    """Everything the presentation layer renders for a selection of games."""
    core: CoreMetrics
    novel: NovelMetrics
    drive_end_distribution: Dict[str, int] = field(default_factory=empty_drive_distribution)

    @classmethod
    def empty(cls) -> 'MetricsSummary':
        """Create the zero summary used when there are no plays.

        Built fresh on every call so callers can never share state.
        """
        return cls(
            core=CoreMetrics.empty(),
            novel=NovelMetrics.empty(),
            drive_end_distribution=empty_drive_distribution()
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'core': self.core.to_dict(),
            'novel': self.novel.to_dict(),
            'driveEndDistribution': dict(self.drive_end_distribution)
        }


@dataclass(frozen=True)
class TrendPoint:
    """One game's value of a metric in a trend series."""
    name: str
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'value': self.value}


def trends_to_dict(trends: Dict[str, List[TrendPoint]]) -> Dict[str, List[Dict[str, Any]]]:
    """Serialise a trend mapping into plain dictionaries."""
    return {key: [point.to_dict() for point in points] for key, points in trends.items()}
