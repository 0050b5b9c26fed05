# defense_metrics/config/settings.py - Metric tuning settings loaded from YAML

"""
Loads the tuning constants used by the metric calculators from
``metrics_config.yaml``. The default file ships with the package; a custom
path can be supplied for experiments.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from ..domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "metrics_config.yaml"


@dataclass(frozen=True)
class MetricsSettings:
    """Immutable tuning constants for the metric calculators."""
    touchdown_points: float
    field_goal_points: float
    red_zone_max_yards_to_goal: float
    league_explosives_per_drive: float
    explosive_follow_up_plays: int
    pressure_window_size: int
    adjustment_lookahead_plays: int
    max_contained_gain: float
    edge_keywords: Tuple[str, ...]
    stress_max_plays: float
    stress_max_yards: float
    stress_weights: Dict[str, float] = field(default_factory=dict)
    stress_conversion_credit: Dict[str, float] = field(default_factory=dict)
    epa_success_multiplier: float = -0.5
    epa_failure_multiplier: float = 0.3
    epa_zone_weights: Dict[str, float] = field(default_factory=dict)
    momentum_weights: Dict[str, int] = field(default_factory=dict)

    _default = None

    @classmethod
    def default(cls) -> 'MetricsSettings':
        """Settings from the packaged YAML file, parsed once per process."""
        if cls._default is None:
            cls._default = cls.load()
        return cls._default

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> 'MetricsSettings':
        """Load settings from a YAML file.

        Raises:
            ConfigurationError: if the file cannot be read or a key is missing
        """
        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        try:
            with open(config_path, 'r') as f:
                raw = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Unable to read metrics config {config_path}: {e}",
                                     source=str(config_path)) from e

        if not isinstance(raw, dict):
            raise ConfigurationError(f"Metrics config {config_path} is empty or malformed",
                                     source=str(config_path))

        settings = cls.from_dict(raw, source=str(config_path))
        logger.debug(f"Loaded metrics settings from {config_path}")
        return settings

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], source: str = "<dict>") -> 'MetricsSettings':
        """Build settings from an already parsed configuration mapping."""
        try:
            stress = raw['drive_stress']
            epa = raw['field_zone_epa']
            contain = raw['contain_integrity']
            return cls(
                touchdown_points=float(raw['scoring']['touchdown_points']),
                field_goal_points=float(raw['scoring']['field_goal_points']),
                red_zone_max_yards_to_goal=float(raw['red_zone']['max_yards_to_goal']),
                league_explosives_per_drive=float(raw['explosive_differential']['league_average_per_drive']),
                explosive_follow_up_plays=int(raw['explosive_response']['follow_up_plays']),
                pressure_window_size=int(raw['sustained_pressure']['window_size']),
                adjustment_lookahead_plays=int(raw['adaptive_adjustment']['lookahead_plays']),
                max_contained_gain=float(contain['max_contained_gain']),
                edge_keywords=tuple(str(k).lower() for k in contain['edge_keywords']),
                stress_max_plays=float(stress['max_plays']),
                stress_max_yards=float(stress['max_yards']),
                stress_weights={k: float(v) for k, v in stress['weights'].items()},
                stress_conversion_credit={k: float(v) for k, v in stress['conversion_credit'].items()},
                epa_success_multiplier=float(epa['success_multiplier']),
                epa_failure_multiplier=float(epa['failure_multiplier']),
                epa_zone_weights={k: float(v) for k, v in epa['weights'].items()},
                momentum_weights={k: int(v) for k, v in raw['momentum'].items()},
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(f"Invalid metrics config {source}: missing or bad value {e}",
                                     source=source) from e
