# defense_metrics/domain/records.py - Normalisation of raw play and drive rows

"""
Play and drive rows reach the engine from different stores: the upload
application speaks camelCase, the database speaks snake_case, and optional
fields are frequently absent. Everything downstream works on DataFrames with
a fixed snake_case schema, so rows are normalised once here.

Flags keep three states (True, False, None): ``defense_success`` relies on
None meaning "not evaluable". Numeric fields become floats with NaN for
missing values.
"""

import logging
from typing import Any, Iterable, Mapping, Union
import pandas as pd
import numpy as np

logger = logging.getLogger(__name__)

PLAY_NUMERIC_COLUMNS = ['down', 'distance', 'quarter', 'gain']
PLAY_FLAG_COLUMNS = [
    'is_run', 'is_pass', 'is_explosive', 'is_tfl', 'is_sack', 'is_takeaway',
    'is_pbu', 'is_penalty_defense', 'is_penalty_offense', 'is_td_allowed',
    'defense_success'
]
PLAY_TEXT_COLUMNS = ['game_id', 'field_zone', 'offense_formation', 'play_direction']
PLAY_COLUMNS = PLAY_TEXT_COLUMNS + PLAY_NUMERIC_COLUMNS + PLAY_FLAG_COLUMNS

DRIVE_NUMERIC_COLUMNS = ['start_yard_to_goal', 'total_plays', 'total_yards']
DRIVE_TEXT_COLUMNS = ['game_id', 'result']
DRIVE_COLUMNS = DRIVE_TEXT_COLUMNS + DRIVE_NUMERIC_COLUMNS

# camelCase keys used by the upload application
CAMEL_CASE_ALIASES = {
    'gameId': 'game_id',
    'fieldZone': 'field_zone',
    'offenseFormation': 'offense_formation',
    'playDirection': 'play_direction',
    'isRun': 'is_run',
    'isPass': 'is_pass',
    'isExplosive': 'is_explosive',
    'isTfl': 'is_tfl',
    'isSack': 'is_sack',
    'isTakeaway': 'is_takeaway',
    'isPbu': 'is_pbu',
    'isPenaltyDefense': 'is_penalty_defense',
    'isPenaltyOffense': 'is_penalty_offense',
    'isTdAllowed': 'is_td_allowed',
    'defenseSuccess': 'defense_success',
    'startYardToGoal': 'start_yard_to_goal',
    'totalPlays': 'total_plays',
    'totalYards': 'total_yards',
}

RecordSource = Union[pd.DataFrame, Iterable[Mapping[str, Any]], None]


def _to_frame(rows: RecordSource) -> pd.DataFrame:
    if rows is None:
        return pd.DataFrame()
    if isinstance(rows, pd.DataFrame):
        return rows.copy()
    return pd.DataFrame(list(rows))


def _to_flag(value: Any):
    """Collapse any truthy/falsy value into True/False, keeping missing as None."""
    if value is None:
        return None
    if isinstance(value, float) and np.isnan(value):
        return None
    if value is pd.NA:
        return None
    return bool(value)


def _to_text(value: Any):
    if value is None or value is pd.NA:
        return None
    if isinstance(value, float) and np.isnan(value):
        return None
    return str(value)


def _normalize(rows: RecordSource, text_columns, numeric_columns, flag_columns) -> pd.DataFrame:
    data = _to_frame(rows).rename(columns=CAMEL_CASE_ALIASES)
    columns = text_columns + numeric_columns + flag_columns

    normalized = pd.DataFrame(index=pd.RangeIndex(len(data)))
    for column in text_columns:
        if column in data.columns:
            normalized[column] = pd.Series([_to_text(v) for v in data[column]], dtype=object)
        else:
            normalized[column] = pd.Series([None] * len(data), dtype=object)

    for column in numeric_columns:
        if column in data.columns:
            normalized[column] = pd.to_numeric(data[column].reset_index(drop=True),
                                               errors='coerce').astype(float)
        else:
            normalized[column] = np.nan

    for column in flag_columns:
        if column in data.columns:
            normalized[column] = pd.Series([_to_flag(v) for v in data[column]], dtype=object)
        else:
            normalized[column] = pd.Series([None] * len(data), dtype=object)

    return normalized[columns]


def normalize_plays(rows: RecordSource) -> pd.DataFrame:
    """Return plays as a DataFrame with the full play schema, in input order."""
    plays = _normalize(rows, PLAY_TEXT_COLUMNS, PLAY_NUMERIC_COLUMNS, PLAY_FLAG_COLUMNS)
    logger.debug(f"Normalized {len(plays)} plays")
    return plays


def normalize_drives(rows: RecordSource) -> pd.DataFrame:
    """Return drives as a DataFrame with the full drive schema, in input order."""
    drives = _normalize(rows, DRIVE_TEXT_COLUMNS, DRIVE_NUMERIC_COLUMNS, [])
    logger.debug(f"Normalized {len(drives)} drives")
    return drives


def filter_by_games(data: pd.DataFrame, game_ids) -> pd.DataFrame:
    """Keep rows whose game_id is in game_ids; no filtering when game_ids is None."""
    if game_ids is None:
        return data
    wanted = {str(game_id) for game_id in game_ids}
    return data[data['game_id'].isin(wanted)].reset_index(drop=True)
