"""Centralized error mapping - DRY principle"""
import logging
from typing import Tuple
from student_marks.exceptions.exceptions import (
    ValidationError, StudentNotFoundError, StudentAlreadyExistsError
)

logger = logging.getLogger(__name__)


def handle_service_error(e: Exception) -> Tuple[dict, int]:
    """Map a service exception to a (payload, status) pair for the calling layer"""

    if isinstance(e, ValidationError):
        return {"success": False, "message": str(e)}, 400

    elif isinstance(e, StudentNotFoundError):
        return {"success": False, "message": str(e)}, 404

    elif isinstance(e, StudentAlreadyExistsError):
        return {"success": False, "message": str(e)}, 409

    elif isinstance(e, ValueError):
        return {"success": False, "message": str(e)}, 400

    else:
        sanitized_error = str(e).replace('\n', ' ').replace('\r', ' ')[:500]
        logger.error(f"Unexpected error: {sanitized_error}")
        return {"success": False, "message": "Server error"}, 500
