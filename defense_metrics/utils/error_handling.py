# defense_metrics/utils/error_handling.py - Standardized error handling utilities

import logging
import functools
from typing import Callable, Tuple, Type
from ..domain.exceptions import UseCaseError, DataAccessError

logger = logging.getLogger(__name__)


def handle_service_errors(
    operation: str,
    error_type: Type[Exception] = UseCaseError,
    catch: Tuple[Type[Exception], ...] = (Exception,),
    log_level: str = "error"
):
    """
    Decorator translating low-level failures into a domain exception.

    Errors are logged and re-raised as ``error_type`` chained to the
    original; nothing is swallowed.

    Args:
        operation: Description of the operation for error messages
        error_type: Exception type to raise on errors
        catch: Exception types to translate; anything else propagates untouched
        log_level: Logging level ('error', 'warning', 'info')
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except error_type:
                raise
            except catch as e:
                error_msg = f"Failed to {operation}: {str(e)}"

                if log_level == "error":
                    logger.error(error_msg)
                elif log_level == "warning":
                    logger.warning(error_msg)
                elif log_level == "info":
                    logger.info(error_msg)

                raise error_type(error_msg, operation=operation) from e

        return wrapper
    return decorator


def handle_data_access_errors(operation: str, catch: Tuple[Type[Exception], ...] = (Exception,)):
    """Specialized decorator for data access operations."""
    return handle_service_errors(
        operation=operation,
        error_type=DataAccessError,
        catch=catch,
        log_level="error"
    )
