"""
ProjectBoard Backend: Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the board's failure modes.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) map them to JSON
       error responses with the right HTTP status code.
Who:   Raised by repositories, the search binder and services.

Exception Hierarchy:
    ProjectBoardError (base)     → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    └── NotFoundError            → 404 Not Found

Store failures (sqlalchemy.exc.SQLAlchemyError) are deliberately not part of
this hierarchy: they propagate unchanged and are turned into a generic 500 by
the global handler.
"""

from typing import Any, Dict, Optional


class ProjectBoardError(Exception):
    """
    Base exception for all ProjectBoard application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ProjectBoardError):
    """
    Raised when client input fails a business rule.

    When:    Filtering on a field outside the search allow-list, an unparsable
             created_at filter value, an unknown sort property or direction.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Field 'user_password' is not searchable",
            "details": {"field": "user_password", "allowed": [...]}
        }
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


class NotFoundError(ProjectBoardError):
    """
    Raised when a lookup by identifier finds nothing.

    When:    GET /articles/{id} for a missing article, saving an article for an
             unknown author, or the repository's get_reference_by_id.
    HTTP:    404 Not Found

    The message defaults to "<resource> not found"; callers that need a
    specific wording (e.g. "article not found - articleId: 7") pass it in.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"{resource} not found"
            if resource_id is not None:
                message = f"{resource} not found - id: {resource_id}"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
