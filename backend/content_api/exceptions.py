"""
Content API — Custom Exception Hierarchy
==========================================

What:  Defines application-specific exceptions for the content dispatch layer.
Why:   Custom exceptions map directly onto HTTP status codes, so handlers in
       services never build responses themselves.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the path resolver, the content service and storage backends;
       caught by global handlers.
When:  During request processing, as soon as a request cannot proceed.

Exception Hierarchy:
    ContentApiError (base)
    ├── ValidationError              → 400 Bad Request (client can fix)
    │   ├── MissingPathError         → path token absent from the URL
    │   ├── MissingContentError      → update without a content field
    │   └── UnsupportedTemplateError → create without content for a non-ipynb path
    ├── StorageOperationError        → 500 Internal Server Error (operation-tagged)
    └── FileStorageError             → raised by the local storage backend

Design Decision:
    A failed path resolution raises instead of returning a sentinel. The
    request stops at the raise, so no caller can forget to check and fall
    through into a storage call.
"""

from typing import Any, Dict, Optional


class ContentApiError(Exception):
    """
    Base exception for all Content API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info for logs and the error `details` field
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(ContentApiError):
    """
    Raised when client input fails validation.

    HTTP:    400 Bad Request
    When:    Missing path, missing content, unsupported template extension.
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


class MissingPathError(ValidationError):
    """The request URL carried no content path."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Content 'path' missing from request URL.",
            field="path",
            context=context,
        )


class MissingContentError(ValidationError):
    """An update request body had no (or empty) `content` field."""

    def __init__(self, path: Optional[str] = None):
        ctx = {"path": path} if path else None
        super().__init__(
            message="Missing content field from request body.",
            field="content",
            context=ctx,
        )


class UnsupportedTemplateError(ValidationError):
    """
    Raised when content creation without a body targets a non-notebook path.

    Only `.ipynb` has a default template; every other extension must be
    created with explicit content.
    """

    def __init__(self, path: str, extension: str):
        super().__init__(
            message="Content creation for non-ipynb files requires content specification",
            field="content",
            context={"path": path, "extension": extension},
        )
        self.extension = extension


class StorageOperationError(ContentApiError):
    """
    Raised when the storage backend (or notebook wrapper) fails an operation.

    What:    Wraps whatever the backend raised, tagged with the operation name.
    HTTP:    500 Internal Server Error
    Message: "Content <operation> operation failed."

    The underlying error is kept as `cause` (and chained as `__cause__` by the
    raiser) and its text is returned in `details.cause` for diagnostics.
    """

    def __init__(
        self,
        operation: str,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["operation"] = operation
        if cause is not None:
            ctx["cause"] = str(cause) or type(cause).__name__
        super().__init__(
            message=f"Content {operation} operation failed.",
            context=ctx,
        )
        self.operation = operation
        self.cause = cause


class FileStorageError(ContentApiError):
    """
    Raised when local file system operations fail.

    When:    Path escapes the storage root, file missing, permission denied,
             disk full, any other OSError.
    Seen as: The `cause` of a StorageOperationError once the content service
             wraps it.
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
