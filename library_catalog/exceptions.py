"""
Library Catalog — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the three failure classes of the API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": "<message>"}` with the matching HTTP status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    LibraryCatalogError (base)   → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error (driver message)
"""

from typing import Any, Dict, Optional


class LibraryCatalogError(Exception):
    """
    Base exception for all Library Catalog application errors.

    Attributes:
        message:  Error description returned in the API response
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(LibraryCatalogError):
    """
    Raised when client input fails validation.

    When:    Missing or falsy book fields, out-of-range paging parameters,
             unparsable request bodies.
    HTTP:    400 Bad Request
    """

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


class NotFoundError(LibraryCatalogError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /books/{id} with an id that matches no row
             (or, for reads, a row whose author or genre does not resolve).
    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(LibraryCatalogError):
    """
    Raised when a database statement fails.

    When:    Constraint violation (e.g. FOREIGN KEY constraint failed),
             locked or missing database file, driver-level faults.
    HTTP:    500 Internal Server Error

    The message is the driver's own message, passed through unchanged.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

    @classmethod
    def from_exception(cls, exc: Exception, **context: Any) -> "DatabaseError":
        """Builds a DatabaseError carrying the DBAPI message of a SQLAlchemy error."""
        original = getattr(exc, "orig", None)
        message = str(original) if original is not None else str(exc)
        context.setdefault("error_type", type(exc).__name__)
        return cls(message=message, context=context)
