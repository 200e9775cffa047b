"""
Content API — Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the wire contract of the /content endpoints.
Why:   Input validation, serialization, and OpenAPI doc generation.
How:   FastAPI validates request bodies against these models and serializes
       responses through them (by alias, so `createdPath` stays camelCase).

Design Decision:
    Resource allows extra fields. The storage backend owns the metadata it
    reports (size, timestamps, ...); this layer passes it through untouched.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Domain Models — What storage backends return
# ══════════════════════════════════════════════════════════════════════════


class ResourceType(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    NOTEBOOK = "notebook"


class Resource(BaseModel):
    """
    What:  Metadata snapshot of a single entry in the content tree.
    Who:   Produced by StorageBackend.list(); echoed by GET /content.

    Fields beyond `path` and `type` are backend-supplied and kept as-is.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    path: str = Field(description="Resource path, always starting with '/'")
    type: ResourceType = Field(description="Kind of entry: file, directory or notebook")


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class ContentRequestBody(BaseModel):
    """
    Body of POST (create) and PUT (update) requests.

    `content` is optional at the schema level: create falls back to a
    notebook template without it, update rejects the request.
    """
    content: Optional[str] = Field(
        default=None,
        description="Raw content to write verbatim at the request path",
    )


class MoveRequestBody(BaseModel):
    """Body of POST /content/<path>:move."""
    path: str = Field(description="Destination path of the move")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class CreateContentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    created_path: str = Field(
        alias="createdPath",
        description="Path of the created resource (with '.ipynb' appended when templated)",
    )


class ListContentResponse(BaseModel):
    """
    What:  Result of listing a path prefix.
    Order: Resources are returned in the order the backend produced them.
    """
    prefix: str = Field(description="Normalized directory prefix that was listed")
    resources: List[Resource] = Field(description="Resources under the prefix")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "storage_error",
            "message": "Content delete operation failed.",
            "details": {"operation": "delete", "cause": "File not found: /a.txt"},
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Storage root status: available, unavailable")
    uptime_seconds: float = Field(description="Seconds since service started")
