"""
HRMS Employee API — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the two error tiers the API knows:
       client errors (fixable input) and server/storage errors.
How:   Each exception carries a message, an optional context dict and a stable
       `error_code`. Global exception handlers (registered in main.py) turn
       them into JSON responses with the matching HTTP status.
Who:   Raised by repositories and services; caught by global handlers.

Exception Hierarchy:
    HRMSError (base)
    ├── ValidationError              → 400 Bad Request
    │   └── InvalidIdentifierError   → 400 Bad Request ("Invalid ID")
    ├── NotFoundError                → 404 Not Found
    └── DatabaseError                → 500 Internal Server Error

The `error_code` values form the machine-readable contract; `message` stays
human-readable and may change wording between releases.
"""

from typing import Any, Dict, Optional


class HRMSError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Error description returned in the API response
        context:  Additional debug info (logged but NOT returned to client)
    """

    error_code = "internal_server_error"
    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(HRMSError):
    """
    Raised when client input cannot be parsed into the expected shape.

    When:    Malformed JSON body, wrong field types.
    HTTP:    400 Bad Request
    """

    error_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidIdentifierError(ValidationError):
    """
    Raised when a path identifier does not match the storage engine's id format.

    The message is fixed to "Invalid ID" regardless of engine so that clients
    never see engine-specific parsing details.
    """

    error_code = "invalid_id"

    def __init__(self, raw_id: str = "", context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["raw_id"] = raw_id
        super().__init__(message="Invalid ID", field="id", context=ctx)


class NotFoundError(HRMSError):
    """
    Raised when a requested resource does not exist.

    When:    PUT /employee/{id} with a well-formed id that matches no document.
    HTTP:    404 Not Found
    """

    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(HRMSError):
    """
    Raised when a storage operation fails.

    When:    Server unreachable, write rejected, stored document undecodable.
    HTTP:    500 Internal Server Error

    The driver's error text is used as the message as-is; clients have always
    received it verbatim. The driver exception type goes into `context`.
    """

    error_code = "database_error"
    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
