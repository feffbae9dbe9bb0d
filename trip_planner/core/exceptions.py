"""
Custom exceptions for the trip planner backend.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Lookup errors
    NOT_FOUND = "NOT_FOUND"
    LOCATION_NOT_FOUND = "LOCATION_NOT_FOUND"
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    TRIP_CHILD_NOT_FOUND = "TRIP_CHILD_NOT_FOUND"
    CATALOG_ENTRY_NOT_FOUND = "CATALOG_ENTRY_NOT_FOUND"

    # Request errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_PARAMETER = "MISSING_PARAMETER"

    # Wizard errors
    WIZARD_VALIDATION_FAILED = "WIZARD_VALIDATION_FAILED"
    WIZARD_STEP_INCOMPLETE = "WIZARD_STEP_INCOMPLETE"
    TRIP_SUBMISSION_FAILED = "TRIP_SUBMISSION_FAILED"

    # Generic errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class TripPlannerException(Exception):
    """Base exception for the trip planner backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class NotFoundError(TripPlannerException):
    """Raised when a referenced record does not exist."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.NOT_FOUND,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=404
        )


class LocationNotFoundError(NotFoundError):
    """Raised when a location id is unknown."""

    def __init__(self, location_id: int):
        super().__init__(
            message="Location not found",
            error_code=ErrorCode.LOCATION_NOT_FOUND,
            details={"location_id": location_id}
        )


class TripNotFoundError(NotFoundError):
    """Raised when a trip id is unknown."""

    def __init__(self, trip_id: int):
        super().__init__(
            message="Trip not found",
            error_code=ErrorCode.TRIP_NOT_FOUND,
            details={"trip_id": trip_id}
        )


class TripChildNotFoundError(NotFoundError):
    """Raised when a trip association row is unknown or belongs to another trip."""

    def __init__(self, kind: str, child_id: int, trip_id: int):
        super().__init__(
            message=f"Trip {kind} not found",
            error_code=ErrorCode.TRIP_CHILD_NOT_FOUND,
            details={"kind": kind, "id": child_id, "trip_id": trip_id}
        )


class CatalogEntryNotFoundError(NotFoundError):
    """Raised when a trip references a catalog entry that does not exist."""

    def __init__(self, kind: str, entry_id: int):
        super().__init__(
            message=f"{kind.replace('_', ' ').capitalize()} not found",
            error_code=ErrorCode.CATALOG_ENTRY_NOT_FOUND,
            details={"kind": kind, "id": entry_id}
        )


class ValidationFailedError(TripPlannerException):
    """Raised when a request is syntactically valid but semantically rejected."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            status_code=400
        )


class MissingParameterError(ValidationFailedError):
    """Raised when a required query parameter is absent."""

    def __init__(self, message: str, parameters: list):
        super().__init__(
            message=message,
            error_code=ErrorCode.MISSING_PARAMETER,
            details={"parameters": parameters}
        )


class WizardValidationError(TripPlannerException):
    """Raised when input collected by a wizard step is rejected."""

    def __init__(self, message: str, step: int, field: Optional[str] = None):
        details = {"step": step}
        if field:
            details["field"] = field
        super().__init__(
            message=message,
            error_code=ErrorCode.WIZARD_VALIDATION_FAILED,
            details=details,
            status_code=400
        )
        self.step = step
        self.field = field


class WizardStateError(TripPlannerException):
    """Raised when the wizard is asked to act out of order."""

    def __init__(self, message: str, current_step: int):
        super().__init__(
            message=message,
            error_code=ErrorCode.WIZARD_STEP_INCOMPLETE,
            details={"current_step": current_step},
            status_code=409
        )
        self.current_step = current_step


class TripSubmissionError(TripPlannerException):
    """Raised when the API rejects part of a wizard submission."""

    def __init__(self, message: str, status_code: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.TRIP_SUBMISSION_FAILED,
            details=details,
            status_code=status_code
        )
