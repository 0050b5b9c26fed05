# defense_metrics/domain/validation.py - Domain validation rules for metric requests

from typing import Any, List, Optional
from .exceptions import DataValidationError


class MetricsValidator:
    """Domain validator for metric request inputs."""

    @staticmethod
    def validate_game_id(game_id: Any, field_name: str = "game_id") -> str:
        """Validate a single game identifier.

        Business rules:
        - Must be a string (integers are accepted and converted)
        - Cannot be blank
        """
        if game_id is None:
            raise DataValidationError(f"{field_name} cannot be None", field_name, game_id)

        if isinstance(game_id, bool) or not isinstance(game_id, (str, int)):
            raise DataValidationError(f"{field_name} must be a string", field_name, game_id)

        normalized = str(game_id).strip()
        if not normalized:
            raise DataValidationError(f"{field_name} cannot be blank", field_name, game_id)

        return normalized

    @staticmethod
    def validate_game_ids(game_ids: Any, field_name: str = "game_ids") -> Optional[List[str]]:
        """Validate an optional selection of games.

        Business rules:
        - None means "all games" and is kept as None
        - A single identifier is treated as a one-game selection
        - Duplicates are dropped, keeping first occurrence
        """
        if game_ids is None:
            return None

        if isinstance(game_ids, (str, int)) and not isinstance(game_ids, bool):
            game_ids = [game_ids]

        if not isinstance(game_ids, (list, tuple, set, frozenset)):
            raise DataValidationError(f"{field_name} must be a list of game ids", field_name, game_ids)

        validated = []
        for game_id in game_ids:
            normalized = MetricsValidator.validate_game_id(game_id, field_name)
            if normalized not in validated:
                validated.append(normalized)

        return validated

    @staticmethod
    def validate_trend_game_ids(game_ids: Any, field_name: str = "game_ids") -> List[str]:
        """Validate the ordered game selection for trend series.

        Business rules:
        - Required (None is rejected); order is significant
        - Fewer than two games is allowed and yields empty trends
        """
        if game_ids is None:
            raise DataValidationError(f"{field_name} cannot be None", field_name, game_ids)

        if isinstance(game_ids, (set, frozenset)):
            raise DataValidationError(f"{field_name} must be an ordered list", field_name, game_ids)

        return MetricsValidator.validate_game_ids(game_ids, field_name)
