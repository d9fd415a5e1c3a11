"""
RecipeHub Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the recipe and user endpoints.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    RecipeHubError (base)
    ├── ValidationError              → 400 Bad Request (client can fix)
    │   └── InvalidIdentifierError   → 400 Bad Request (malformed ObjectId)
    ├── NotFoundError                → 404 Not Found
    └── DatabaseError                → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class RecipeHubError(Exception):
    """
    Base exception for all RecipeHub application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned for server errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RecipeHubError):
    """
    Raised when client input fails validation.

    When:    A required field (ownerEmail on recipe creation) is missing or empty.
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


class InvalidIdentifierError(ValidationError):
    """
    Raised when a path identifier is not a valid ObjectId.

    HTTP:    400 Bad Request

    The delete route also raises this for storage failures, so a failed
    delete always reads as "Invalid recipe ID" to the caller.
    """

    def __init__(
        self,
        identifier: Optional[str] = None,
        resource: str = "recipe",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if identifier is not None:
            ctx["identifier"] = identifier
        super().__init__(message=f"Invalid {resource} ID", field="id", context=ctx)
        self.identifier = identifier


class NotFoundError(RecipeHubError):
    """
    Raised when a requested document does not exist.

    When:    GET /recipes/{id} finds nothing, or a like increments nothing.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(RecipeHubError):
    """
    Raised when a MongoDB operation fails unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Driver errors
    are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
