"""Error logging utilities for mock generation."""

from typing import Any, Dict, Optional
from docmock.config.logging import get_logger

logger = get_logger(__name__)


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    operation: Optional[str] = None,
    field_path: Optional[str] = None,
    type_tag: Optional[str] = None,
    depth: Optional[int] = None,
    log_level: str = "error",
) -> None:
    """
    Log an error with its type, message, generation context and traceback.

    Args:
        error: The exception that occurred
        context: Additional context dictionary (e.g., {'provider': 'faker.pyint'})
        operation: Description of the operation being performed
        field_path: Dotted path of the field being generated
        type_tag: Type tag of the field being generated
        depth: Schema nesting depth at the time of the error
        log_level: Logging level ('error', 'warning', 'critical')
    """
    error_type = type(error).__name__

    context_parts = []
    if operation:
        context_parts.append(f"Operation: {operation}")
    if field_path:
        context_parts.append(f"Field: {field_path}")
    if type_tag:
        context_parts.append(f"Type: {type_tag}")
    if depth is not None:
        context_parts.append(f"Depth: {depth}")
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        context_parts.append(f"Context: {context_str}")

    error_msg = f"[{error_type}] {error}"
    if context_parts:
        error_msg += " | " + " | ".join(context_parts)

    if log_level.lower() == "critical":
        logger.critical(error_msg, exc_info=error)
    elif log_level.lower() == "warning":
        logger.warning(error_msg, exc_info=error)
    else:
        logger.error(error_msg, exc_info=error)

    if isinstance(error, ValueError):
        logger.debug(f"ValueError details: Invalid value or argument - {error}")
    elif isinstance(error, TypeError):
        logger.debug(f"TypeError details: Type mismatch - {error}")
    elif isinstance(error, AttributeError):
        logger.debug(f"AttributeError details: Missing attribute - {error}")
