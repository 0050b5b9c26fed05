# tests/domain/test_settings.py

"""
Unit tests for loading metric tuning settings from YAML.
"""

import pytest
import yaml
from defense_metrics.config.settings import MetricsSettings, DEFAULT_CONFIG_PATH
from defense_metrics.domain.exceptions import ConfigurationError
from defense_metrics.domain.novel_metrics_calculator import NovelMetricsCalculator
from defense_metrics.domain.records import normalize_plays, normalize_drives
from tests.builders import play, drive


class TestDefaultSettings:
    """Test the packaged configuration."""

    def test_default_values(self):
        settings = MetricsSettings.default()

        assert settings.touchdown_points == 7
        assert settings.field_goal_points == 3
        assert settings.league_explosives_per_drive == 1.8
        assert settings.pressure_window_size == 10
        assert settings.edge_keywords == ('outside', 'edge', 'sweep')
        assert settings.stress_conversion_credit == {'TD': 1.0, 'FG': 0.7}
        assert settings.epa_zone_weights['Goal-to-Go'] == 3.0
        assert settings.momentum_weights['td_allowed'] == -3

    def test_default_is_cached(self):
        assert MetricsSettings.default() is MetricsSettings.default()


class TestLoad:
    """Test loading custom files."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Unable to read metrics config"):
            MetricsSettings.load(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        with pytest.raises(ConfigurationError, match="empty or malformed"):
            MetricsSettings.load(path)

    def test_missing_section(self, tmp_path):
        with open(DEFAULT_CONFIG_PATH) as f:
            raw = yaml.safe_load(f)
        del raw['momentum']
        path = tmp_path / "partial.yaml"
        path.write_text(yaml.safe_dump(raw))

        with pytest.raises(ConfigurationError, match="missing or bad value"):
            MetricsSettings.load(path)

    def test_custom_values_reach_calculators(self, tmp_path):
        with open(DEFAULT_CONFIG_PATH) as f:
            raw = yaml.safe_load(f)
        raw['explosive_differential']['league_average_per_drive'] = 1.0
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump(raw))

        calculator = NovelMetricsCalculator(MetricsSettings.load(path))
        plays = normalize_plays([play(is_explosive=True), play(is_explosive=True)])
        drives = normalize_drives([drive()])

        assert calculator.explosive_differential(plays, drives).value == 1.0
