"""
HikeLog Backend - Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the error scenarios of the gateway.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": ...}` JSON responses with the matching status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    HikeLogError (base)
    ├── ValidationError          → 400 Bad Request (malformed id or body)
    └── StoreError               → 500 Internal Server Error
        └── NotFoundError        → 404 Not Found

NotFoundError subclasses StoreError: code that treats every failed point
read as a store failure keeps working, while the HTTP layer can still
answer 404 for a missing document.
"""

from typing import Any, Dict, Optional


class HikeLogError(Exception):
    """
    Base exception for all HikeLog application errors.

    Attributes:
        message:  Error description returned in the API response
        context:  Additional debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(HikeLogError):
    """
    Raised when client input fails validation.

    When:    Path identifier is not a valid ObjectId, or the request body
             is not well-formed JSON matching the record's field types.
    HTTP:    400 Bad Request
    """

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


class StoreError(HikeLogError):
    """
    Raised when a database operation fails or exceeds its timeout.

    HTTP:    500 Internal Server Error

    The message is the driver's own error text and is returned to the
    client unchanged.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(StoreError):
    """
    Raised when a point read finds no document for a well-formed identifier.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "document",
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
