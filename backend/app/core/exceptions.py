"""
Custom exceptions for the parcel persistence layer.

Provides standardized error codes so callers can tell a missing parcel
apart from a rejected mutation. Database failures are not wrapped here;
SQLAlchemy exceptions reach the caller unchanged.
"""

from typing import Any, Dict


class AppException(Exception):
    """Base application exception."""
    
    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""
    
    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            details={"resource": resource, "id": resource_id}
        )


class ParcelNotFoundError(ResourceNotFoundError):
    """Raised when no parcel row exists for the requested number."""
    
    def __init__(self, number: int):
        self.number = number
        super().__init__(resource="Parcel", resource_id=number)


class ParcelStatusError(AppException):
    """Raised when a mutation requires a status the parcel is not in."""
    
    def __init__(self, number: int, status: str, required: str = "registered"):
        self.number = number
        self.status = status
        self.required = required
        super().__init__(
            message=f"Parcel {number} has status '{status}': status must be {required}",
            error_code="ERR_PARCEL_STATUS_001",
            details={"number": number, "status": status, "required": required}
        )
