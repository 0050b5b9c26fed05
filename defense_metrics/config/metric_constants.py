# defense_metrics/config/metric_constants.py - Centralized football constants for defensive metrics

# Field zones in order from the offense's own goal line
FIELD_ZONE_OWN_0_20 = 'Own 0-20'
FIELD_ZONE_OWN_21_40 = 'Own 21-40'
FIELD_ZONE_MIDFIELD = 'Midfield 41-59'
FIELD_ZONE_OPP_40_21 = 'Opp 40-21'
FIELD_ZONE_RED_ZONE = 'Red Zone'
FIELD_ZONE_GOAL_TO_GO = 'Goal-to-Go'

FIELD_ZONES = [
    FIELD_ZONE_OWN_0_20,
    FIELD_ZONE_OWN_21_40,
    FIELD_ZONE_MIDFIELD,
    FIELD_ZONE_OPP_40_21,
    FIELD_ZONE_RED_ZONE,
    FIELD_ZONE_GOAL_TO_GO,
]

# Zones compared by the situational flex score (goal-to-go is folded into the red zone)
SITUATIONAL_FIELD_ZONES = FIELD_ZONES[:5]

# Drive results
DRIVE_RESULT_TD = 'TD'
DRIVE_RESULT_FG = 'FG'
DRIVE_RESULT_PUNT = 'Punt'
DRIVE_RESULT_INT = 'INT'
DRIVE_RESULT_FUMBLE = 'Fumble'
DRIVE_RESULT_DOWNS = 'Downs'
DRIVE_RESULT_OTHER = 'Other'

DRIVE_RESULTS = [
    DRIVE_RESULT_TD,
    DRIVE_RESULT_FG,
    DRIVE_RESULT_PUNT,
    DRIVE_RESULT_INT,
    DRIVE_RESULT_FUMBLE,
    DRIVE_RESULT_DOWNS,
    DRIVE_RESULT_OTHER,
]

# Downs
THIRD_DOWN = 3
EARLY_DOWNS = (1, 2)

# Quarter from which plays count as late-game
LATE_GAME_START_QUARTER = 3

# Explanation used for every metric when nothing has been uploaded
NO_DATA_EXPLANATION = "No game data uploaded yet"

# Default yards to goal when a drive start is unknown or there are no drives
DEFAULT_START_YARDS_TO_GOAL = 50

# Rounding precision for all reported metric values
METRIC_DECIMAL_PLACES = 2

# Minimum number of resolved games before a trend series is produced
MIN_TREND_GAMES = 2
