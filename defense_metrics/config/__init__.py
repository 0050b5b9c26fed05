"""Configuration - football constants and metric tuning."""

from .metric_constants import (
    FIELD_ZONES, SITUATIONAL_FIELD_ZONES, DRIVE_RESULTS,
    FIELD_ZONE_RED_ZONE, DRIVE_RESULT_TD, DRIVE_RESULT_FG, DRIVE_RESULT_OTHER,
    NO_DATA_EXPLANATION, DEFAULT_START_YARDS_TO_GOAL, MIN_TREND_GAMES
)
