"""
Core plumbing: exceptions, error handlers, logging and request dependencies.
"""

from .exceptions import (
    ErrorCode,
    TripPlannerException,
    NotFoundError,
    ValidationFailedError,
)
from .logging import configure_logging

__all__ = [
    "ErrorCode",
    "TripPlannerException",
    "NotFoundError",
    "ValidationFailedError",
    "configure_logging",
]
