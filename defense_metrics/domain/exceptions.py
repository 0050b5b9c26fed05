# defense_metrics/domain/exceptions.py - Domain exceptions for standardized error handling

class DefenseMetricsException(Exception):
    """Base exception for the defensive metrics application."""
    pass


class ConfigurationError(DefenseMetricsException):
    """Raised when metric tuning or store configuration is unusable."""

    def __init__(self, message: str, source: str = None):
        self.source = source
        super().__init__(message)


class DataAccessError(DefenseMetricsException):
    """Raised when data access operations fail."""

    def __init__(self, message: str, game_ids: list = None, operation: str = None):
        self.game_ids = game_ids
        self.operation = operation
        super().__init__(message)


class DataValidationError(DefenseMetricsException):
    """Raised when data validation fails.

    Used for input validation errors, not data access errors.
    """

    def __init__(self, message: str, field_name: str = None, field_value=None):
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(message)


class UseCaseError(DefenseMetricsException):
    """Raised when use case execution fails.

    High-level exception for business logic failures.
    """

    def __init__(self, message: str, operation: str = None, context: dict = None):
        self.operation = operation
        self.context = context or {}
        super().__init__(message)
