"""
Content API — Content Route Handlers
======================================

What:  HTTP surface of the content tree: list, create, update, delete, move.
Why:   Translates REST-style requests into ContentService operations.
How:   Handlers are thin; they read the path token, body and query, call the
       service, and shape the success response. Errors are raised and turned
       into responses by the global exception handlers (main.py).

Route Table (evaluated in order, first match wins):

    GET     /content                 → list (root)
    GET     /content/                → list (root)
    GET     /content/<path>          → list (path as prefix)
    POST    /content/<path>:move     → move
    PUT     /content/<path>          → update
    POST    /content/<path>          → create
    DELETE  /content/<path>          → delete

    <path> never contains ":", so "a.txt:move" cannot be captured by the
    generic POST pattern as a path. Suffix-qualified patterns must still be
    registered before their generic counterparts.
"""

import logging
from typing import Awaitable, Callable, List, Optional, Tuple

from fastapi import APIRouter, Body, Depends, Query, Response
from starlette.convertors import Convertor, register_url_convertor

from content_api.schemas.content import (
    ContentRequestBody,
    CreateContentResponse,
    ErrorResponse,
    ListContentResponse,
    MoveRequestBody,
)
from content_api.services.content_service import ContentService, get_content_service

logger = logging.getLogger(__name__)


class ContentPathConvertor(Convertor):
    """Matches a content path token: any run of characters except ':'."""

    regex = "[^:]*"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


register_url_convertor("contentpath", ContentPathConvertor())

ERROR_RESPONSES = {
    400: {"description": "Malformed request", "model": ErrorResponse},
    500: {"description": "Storage operation failed", "model": ErrorResponse},
}


# ══════════════════════════════════════════════════════════════════════════
# Handlers
# ══════════════════════════════════════════════════════════════════════════


async def list_root(
    recursive: Optional[str] = Query(
        default=None,
        description="Any non-empty value lists recursively",
    ),
    service: ContentService = Depends(get_content_service),
) -> ListContentResponse:
    """List the resources at the root of the content tree."""
    return await service.list(None, recursive)


async def list_content(
    path: str,
    recursive: Optional[str] = Query(
        default=None,
        description="Any non-empty value lists recursively",
    ),
    service: ContentService = Depends(get_content_service),
) -> ListContentResponse:
    """List the resources matching the path prefix."""
    return await service.list(path, recursive)


async def move_content(
    path: str,
    body: MoveRequestBody,
    service: ContentService = Depends(get_content_service),
) -> Response:
    """Move the file at the request path to `body.path`."""
    await service.move(path, body.path)
    return Response(status_code=200)


async def update_content(
    path: str,
    body: Optional[ContentRequestBody] = Body(default=None),
    service: ContentService = Depends(get_content_service),
) -> Response:
    """Overwrite the file at the request path with `body.content`."""
    await service.update(path, body.content if body else None)
    return Response(status_code=200)


async def create_content(
    path: str,
    body: Optional[ContentRequestBody] = Body(default=None),
    service: ContentService = Depends(get_content_service),
) -> CreateContentResponse:
    """
    Create a file at the request path.

    With `content`: written verbatim. Without: a notebook is created from the
    default template, appending ".ipynb" to extension-less paths.
    """
    created_path = await service.create(path, body.content if body else None)
    return CreateContentResponse(created_path=created_path)


async def delete_content(
    path: str,
    service: ContentService = Depends(get_content_service),
) -> Response:
    """Delete the file at the request path."""
    await service.delete(path)
    return Response(status_code=200)


# ══════════════════════════════════════════════════════════════════════════
# Route Registration
# ══════════════════════════════════════════════════════════════════════════

ContentRoute = Tuple[str, str, Callable[..., Awaitable], Optional[type]]

# Order matters: the ":move" pattern precedes the generic POST pattern.
CONTENT_ROUTES: List[ContentRoute] = [
    ("GET", "/content", list_root, ListContentResponse),
    ("GET", "/content/", list_root, ListContentResponse),
    ("GET", "/content/{path:contentpath}", list_content, ListContentResponse),
    ("POST", "/content/{path:contentpath}:move", move_content, None),
    ("PUT", "/content/{path:contentpath}", update_content, None),
    ("POST", "/content/{path:contentpath}", create_content, CreateContentResponse),
    ("DELETE", "/content/{path:contentpath}", delete_content, None),
]

router = APIRouter(tags=["Content"])

for method, pattern, endpoint, response_model in CONTENT_ROUTES:
    router.add_api_route(
        pattern,
        endpoint,
        methods=[method],
        response_model=response_model,
        responses=ERROR_RESPONSES,
    )
