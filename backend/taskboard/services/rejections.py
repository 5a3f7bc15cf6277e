"""Rejections — uniform logging for expected failures before they become Err values."""

import logging

from taskboard.core.errors import TaskboardError
from taskboard.core.result import Err

logger = logging.getLogger(__name__)


def reject(error: TaskboardError, operation: str, caller: str | None = None) -> Err:
    """Log a rejected operation and wrap its error in Err."""
    logger.warning(
        f"{operation} rejected: {error.message}",
        extra={"error_code": error.code, "operation": operation, "caller": caller},
    )
    return Err(error)
