# tests/domain/test_novel_metrics_calculator.py

"""
Unit tests for NovelMetricsCalculator.
Covers every composite metric with hand-checked sequences, plus the empty
and boundary cases of the sequence-based metrics.
"""

import pytest
from defense_metrics.domain.novel_metrics_calculator import (
    NovelMetricsCalculator, NO_DRIVES_STRESS_EXPLANATION, NO_ZONES_FLEX_EXPLANATION
)
from defense_metrics.domain.metrics import DefensiveMetrics
from defense_metrics.domain.records import normalize_plays, normalize_drives
from tests.builders import play, drive


@pytest.fixture
def calculator():
    return NovelMetricsCalculator()


def plays_of(*rows):
    return normalize_plays(list(rows))


def drives_of(*rows):
    return normalize_drives(list(rows))


class TestContainIntegrityIndex:
    """Test edge containment."""

    def test_contained_edge_runs(self, calculator):
        plays = plays_of(
            play(is_run=True, play_direction='Outside Left', gain=3),
            play(is_run=True, play_direction='edge', gain=8),
            play(is_run=True, play_direction='Sweep right', gain=None),
            play(is_run=True, play_direction='Inside', gain=20),
            play(is_pass=True, play_direction='outside', gain=1),
        )

        assert calculator.contain_integrity_index(plays).value == 33.33

    def test_boundary_gain_is_contained(self, calculator):
        plays = plays_of(play(is_run=True, play_direction='OUTSIDE', gain=5))

        assert calculator.contain_integrity_index(plays).value == 100.0

    def test_no_edge_runs(self, calculator):
        plays = plays_of(play(is_run=True, play_direction='Inside', gain=1))

        assert calculator.contain_integrity_index(plays).value == 0


class TestExplosiveResponseFactor:
    """Test success after explosive plays."""

    def test_mean_follow_up_success(self, calculator):
        plays = plays_of(
            play(is_explosive=True),
            play(defense_success=True),
            play(defense_success=False),
            play(is_explosive=True),
            play(defense_success=True, is_explosive=True),
            play(defense_success=True),
        )

        assert calculator.explosive_response_factor(plays).value == 0.75

    def test_explosive_without_full_window_is_skipped(self, calculator):
        plays = plays_of(play(), play(is_explosive=True), play(defense_success=True))

        assert calculator.explosive_response_factor(plays).value == 0


class TestSustainedPressureScore:
    """Test the rolling pressure window over pass plays."""

    def test_rolling_window_mean(self, calculator):
        rows = [play(is_pass=True) for _ in range(12)]
        rows[0]['is_sack'] = True
        rows[11]['is_pbu'] = True
        rows.insert(5, play(is_run=True, is_sack=True))

        assert calculator.sustained_pressure_score(plays_of(*rows)).value == 0.07

    def test_window_fractions_are_averaged(self, calculator):
        rows = [play(is_pass=True) for _ in range(11)]
        for index in (0, 3, 6):
            rows[index]['is_sack'] = True

        # Windows hold 3 and 2 pressure plays
        assert calculator.sustained_pressure_score(plays_of(*rows)).value == 0.25

    def test_fewer_pass_plays_than_window(self, calculator):
        plays = plays_of(*[play(is_pass=True, is_sack=True) for _ in range(9)])

        assert calculator.sustained_pressure_score(plays).value == 0


class TestFinishingStrength:
    """Test late-game success against overall success."""

    def test_ratio_of_late_to_overall(self, calculator):
        plays = plays_of(
            play(quarter=1, defense_success=True),
            play(quarter=1, defense_success=False),
            play(quarter=3, defense_success=True),
            play(quarter=3, defense_success=True),
            play(quarter=4, defense_success=False),
            play(quarter=4, defense_success=None),
        )

        assert calculator.finishing_strength(plays).value == 1.11

    def test_no_successes(self, calculator):
        plays = plays_of(play(quarter=4, defense_success=False))

        assert calculator.finishing_strength(plays).value == 0


class TestDriveStressIndex:
    """Test the composite drive stress score."""

    def test_mean_drive_stress(self, calculator):
        drives = drives_of(
            drive('TD', total_plays=15, total_yards=80),
            drive('Punt', total_plays=3, total_yards=8),
            drive('FG', total_plays=30, total_yards=40),
        )
        result = calculator.drive_stress_index(drives)

        assert result.value == 62.33
        assert result.explanation == DefensiveMetrics.DRIVE_STRESS_INDEX.description

    def test_no_drives_uses_alternate_explanation(self, calculator):
        result = calculator.drive_stress_index(drives_of())

        assert result.value == 0
        assert result.explanation == NO_DRIVES_STRESS_EXPLANATION


class TestNegativeNetYardageChain:
    """Test the longest run of non-positive gains."""

    def test_longest_chain(self, calculator):
        plays = plays_of(*[play(gain=g) for g in [-1, -2, 3, -1, -1, -1, 5]])

        assert calculator.negative_net_yardage_chain(plays).value == 3

    def test_missing_gain_breaks_chain(self, calculator):
        plays = plays_of(*[play(gain=g) for g in [0, None, 0, 0]])

        assert calculator.negative_net_yardage_chain(plays).value == 2


class TestExplosiveDifferential:
    """Test explosives per drive against the league average."""

    def test_below_league_average(self, calculator):
        plays = plays_of(*[play(is_explosive=True) for _ in range(3)])
        drives = drives_of(drive(), drive())

        assert calculator.explosive_differential(plays, drives).value == -0.3

    def test_no_drives(self, calculator):
        plays = plays_of(play(is_explosive=True))

        assert calculator.explosive_differential(plays, drives_of()).value == -1.8


class TestRedZoneShrinkFactor:
    """Test red zone success against the rest of the field."""

    def test_difference_of_success_rates(self, calculator):
        plays = plays_of(
            play(field_zone='Red Zone', defense_success=True),
            play(field_zone='Red Zone', defense_success=True),
            play(field_zone='Red Zone', defense_success=False),
            play(field_zone='Red Zone', defense_success=None),
            play(field_zone='Own 0-20', defense_success=True),
            play(field_zone='Own 0-20', defense_success=False),
            play(field_zone='Midfield 41-59', defense_success=False),
            play(field_zone='Goal-to-Go', defense_success=False),
        )

        assert calculator.red_zone_shrink_factor(plays).value == 41.67


class TestSituationalFlexScore:
    """Test consistency across field zones."""

    def test_two_zones(self, calculator):
        plays = plays_of(
            play(field_zone='Own 0-20', defense_success=True),
            play(field_zone='Own 0-20', defense_success=False),
            play(field_zone='Opp 40-21', defense_success=True),
            play(field_zone='Opp 40-21', defense_success=True),
            play(field_zone='Goal-to-Go', defense_success=False),
        )

        assert calculator.situational_flex_score(plays).value == 0.67

    def test_single_zone_is_perfectly_consistent(self, calculator):
        plays = plays_of(play(field_zone='Red Zone', defense_success=False))

        assert calculator.situational_flex_score(plays).value == 1.0

    def test_no_evaluable_plays(self, calculator):
        result = calculator.situational_flex_score(plays_of(play()))

        assert result.value == 0
        assert result.explanation == NO_ZONES_FLEX_EXPLANATION


class TestFormationStressRate:
    """Test the worst formation's stress rate."""

    def test_worst_formation(self, calculator):
        plays = plays_of(
            play(offense_formation='Shotgun', is_explosive=True),
            play(offense_formation='Shotgun', down=3, defense_success=False),
            play(offense_formation='Shotgun'),
            play(offense_formation='I-Form', down=3, defense_success=True),
            play(offense_formation='Empty', is_explosive=True),
        )
        result = calculator.formation_stress_rate(plays)

        assert result.value == 100.0
        assert result.note == 'Empty'
        assert result.explanation == "Stress rate for worst formation: Empty (100.0%)"

    def test_explanation_rate_rounds_half_up(self, calculator):
        rows = [play(offense_formation='Shotgun', is_explosive=index < 5) for index in range(16)]
        result = calculator.formation_stress_rate(plays_of(*rows))

        assert result.value == 31.25
        assert result.explanation == "Stress rate for worst formation: Shotgun (31.3%)"

    def test_unevaluated_third_down_counts_as_stress(self, calculator):
        plays = plays_of(
            play(offense_formation='Pistol', down=3, defense_success=None),
            play(offense_formation='Pistol'),
        )

        assert calculator.formation_stress_rate(plays).value == 50.0

    def test_tie_keeps_first_formation(self, calculator):
        plays = plays_of(
            play(offense_formation='Shotgun', is_explosive=True),
            play(offense_formation='Pistol', is_explosive=True),
            play(offense_formation='Shotgun'),
            play(offense_formation='Pistol'),
        )

        assert calculator.formation_stress_rate(plays).note == 'Shotgun'

    def test_no_formations(self, calculator):
        result = calculator.formation_stress_rate(plays_of(play(is_explosive=True)))

        assert result.value == 0
        assert result.note is None
        assert result.explanation == "Stress rate for worst formation: N/A (0.0%)"


class TestAdaptiveAdjustmentLag:
    """Test plays from an explosive to the next stop against that formation."""

    def test_median_lag(self, calculator):
        plays = plays_of(
            play(offense_formation='Shotgun', is_explosive=True),
            play(offense_formation='I-Form', defense_success=True),
            play(offense_formation='Shotgun', defense_success=False),
            play(offense_formation='Shotgun', defense_success=True),
            play(offense_formation='I-Form', is_explosive=True),
            play(offense_formation='I-Form', defense_success=True),
            play(offense_formation='Pistol', is_explosive=True),
        )

        # Lags of 3 and 1; the upper middle element is reported
        assert calculator.adaptive_adjustment_lag(plays).value == 3

    def test_stop_at_end_of_lookahead(self, calculator):
        rows = [play(offense_formation='Shotgun', is_explosive=True)]
        rows += [play(offense_formation='I-Form') for _ in range(18)]
        rows.append(play(offense_formation='Shotgun', defense_success=True))

        assert calculator.adaptive_adjustment_lag(plays_of(*rows)).value == 19

    def test_stop_beyond_lookahead_is_ignored(self, calculator):
        rows = [play(offense_formation='Shotgun', is_explosive=True)]
        rows += [play(offense_formation='I-Form') for _ in range(19)]
        rows.append(play(offense_formation='Shotgun', defense_success=True))

        assert calculator.adaptive_adjustment_lag(plays_of(*rows)).value == 0


class TestPressureAndCoverage:
    """Test pressure conversion, drive kills and coverage contests."""

    def test_pressure_to_outcome_ratio(self, calculator):
        plays = plays_of(
            play(is_sack=True),
            play(is_pbu=True),
            play(is_pbu=True),
            play(is_takeaway=True),
            play(is_sack=True, is_pbu=True),
        )

        assert calculator.pressure_to_outcome_ratio(plays).value == 0.6

    def test_no_pressure(self, calculator):
        assert calculator.pressure_to_outcome_ratio(plays_of(play())).value == 0

    def test_drive_kill_actions_per_drive(self, calculator):
        plays = plays_of(
            play(is_sack=True),
            play(is_tfl=True),
            play(is_takeaway=True),
            play(is_penalty_offense=True),
            play(is_sack=True, is_tfl=True),
            play(is_penalty_defense=True),
        )

        assert calculator.drive_kill_actions_per_drive(plays, drives_of(drive(), drive())).value == 2.5

    def test_coverage_contest_rate_counts_pass_plays_only(self, calculator):
        plays = plays_of(
            play(is_pass=True, is_pbu=True),
            play(is_pass=True, is_takeaway=True),
            play(is_pass=True),
            play(is_pass=True),
            play(is_run=True, is_takeaway=True),
        )

        assert calculator.coverage_contest_rate(plays).value == 50.0


class TestFieldZoneEpaSurrogate:
    """Test the expected points surrogate."""

    def test_weighted_mean(self, calculator):
        plays = plays_of(
            play(field_zone='Red Zone', gain=2, defense_success=True),
            play(field_zone='Own 0-20', gain=5, defense_success=False),
            play(field_zone='Goal-to-Go', gain=0, defense_success=False),
            play(field_zone='Unknown Zone', gain=1, defense_success=True),
            play(field_zone='Red Zone', gain=None, defense_success=True),
            play(field_zone=None, gain=4, defense_success=True),
        )

        assert calculator.field_zone_epa_surrogate(plays).value == -0.06

    def test_no_qualifying_plays(self, calculator):
        assert calculator.field_zone_epa_surrogate(plays_of(play(field_zone=None))).value == 0


class TestMomentumSwingIndex:
    """Test the cumulative momentum score."""

    def test_takeaway_and_sack(self, calculator):
        plays = plays_of(play(is_takeaway=True, is_sack=True))

        assert calculator.momentum_swing_index(plays).value == 3

    def test_sequence(self, calculator):
        plays = plays_of(
            play(is_takeaway=True),
            play(is_explosive=True, is_td_allowed=True),
            play(down=3, defense_success=True, is_tfl=True),
            play(down=3, defense_success=None),
        )

        assert calculator.momentum_swing_index(plays).value == -1

    def test_no_plays(self, calculator):
        assert calculator.momentum_swing_index(plays_of()).value == 0


class TestCalculate:
    """Test the combined calculation."""

    def test_all_metrics_present(self, calculator):
        plays = plays_of(play(is_pass=True, is_sack=True, defense_success=True))
        result = calculator.calculate(plays, drives_of(drive()))

        for definition in DefensiveMetrics.get_novel_metrics():
            assert result.get(definition.key).value is not None
