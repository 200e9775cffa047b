"""
Content API — Content Service (Operation Dispatcher)
======================================================

What:  Maps the five content operations onto storage backend calls.
Why:   Keeps template selection, validation and error tagging out of the
       HTTP layer, so every rule can be tested without a server.
How:   Each operation resolves its path first, then makes exactly one awaited
       storage call. Backend failures are re-raised as StorageOperationError
       tagged with the operation name.
Who:   Called by the /content route handlers.

Operation Flow:
    ┌──────────┐    ┌───────────────┐    ┌──────────────────┐
    │  Route   │───▶│ Path Resolver │───▶│ StorageBackend / │
    │ handler  │    │  (→ 400)      │    │ NotebookStorage  │
    └──────────┘    └───────────────┘    └──────────────────┘
                                                  │ raises
                                                  ▼
                                   StorageOperationError (→ 500)

Create without content:
    "/notes"        → notebook template at "/notes.ipynb"
    "/notes.ipynb"  → notebook template at "/notes.ipynb"
    "/notes.txt"    → UnsupportedTemplateError (→ 400), no storage call

Limitations:
    Directory creation, directory deletion and directory renaming are not
    supported; create/delete/move act on files only.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from content_api.exceptions import (
    MissingContentError,
    StorageOperationError,
    UnsupportedTemplateError,
)
from content_api.schemas.content import ListContentResponse
from content_api.services.paths import (
    get_extension,
    has_extension,
    resolve_directory_path,
    resolve_path,
)
from content_api.storage import NotebookStorage, StorageBackend, get_storage

logger = logging.getLogger(__name__)

# The only extension with a declared default template
NOTEBOOK_EXTENSION = ".ipynb"


def coerce_flag(value: Optional[str]) -> bool:
    """
    Truthiness coercion of an optional query flag.

    Any non-empty string is True ("true", "1", even "false" or "0");
    an absent flag or an empty string is False.
    """
    return bool(value)


@contextmanager
def storage_operation(operation: str, path: str) -> Iterator[None]:
    """Re-raise any backend failure as a StorageOperationError for `operation`."""
    try:
        yield
    except Exception as e:
        logger.error("Content %s operation failed for %s: %s", operation, path, e)
        raise StorageOperationError(operation, cause=e, context={"path": path}) from e


class ContentService:
    """
    Dispatcher for content operations.

    Holds only read-only references to the storage backend and the notebook
    wrapper; no state is kept between requests.
    """

    def __init__(
        self,
        storage: StorageBackend,
        notebook_storage: Optional[NotebookStorage] = None,
    ):
        self._storage = storage
        self._notebook_storage = notebook_storage or NotebookStorage(storage)

    async def create(self, token: Optional[str], content: Optional[str]) -> str:
        """
        Create a file at the requested path.

        With content, the content is written verbatim whatever the extension.
        Without content, a notebook is created from the default template.

        Returns:
            The created path, with ".ipynb" appended for extension-less paths.

        Raises:
            MissingPathError: no path in the URL
            UnsupportedTemplateError: no content and a non-ipynb extension
            StorageOperationError: the backend failed
        """
        path = resolve_path(token)

        if content:
            with storage_operation("create", path):
                await self._storage.write(path, content)
            return path

        if not has_extension(path, NOTEBOOK_EXTENSION):
            extension = get_extension(path)
            if extension is not None:
                raise UnsupportedTemplateError(path=path, extension=extension)
            path = path + NOTEBOOK_EXTENSION

        logger.debug('Creating notebook with path "%s"', path)
        with storage_operation("create", path):
            await self._notebook_storage.create(path)
        return path

    async def delete(self, token: Optional[str]) -> None:
        path = resolve_path(token)
        with storage_operation("delete", path):
            await self._storage.delete(path)

    async def list(self, token: Optional[str], recursive: Optional[str]) -> ListContentResponse:
        """
        Enumerate the resources under a path prefix.

        Args:
            token: Raw path token; absent lists the root.
            recursive: Raw `recursive` query value, truthiness-coerced.
        """
        prefix = resolve_directory_path(token)
        is_recursive = coerce_flag(recursive)

        logger.debug("Listing %s (recursive=%s)", prefix, is_recursive)
        with storage_operation("list", prefix):
            resources = await self._storage.list(prefix, is_recursive)

        return ListContentResponse(prefix=prefix, resources=list(resources))

    async def move(self, token: Optional[str], new_path: str) -> None:
        path = resolve_path(token)
        with storage_operation("move", path):
            await self._storage.move(path, new_path)

    async def update(self, token: Optional[str], content: Optional[str]) -> None:
        """Overwrite the content at the requested path. Never falls back to a template."""
        path = resolve_path(token)
        if not content:
            raise MissingContentError(path=path)

        with storage_operation("update", path):
            await self._storage.write(path, content)


# ── Dependency Provider ───────────────────────────────────────────────────
_content_service: Optional[ContentService] = None


def get_content_service() -> ContentService:
    """FastAPI dependency returning the shared ContentService."""
    global _content_service

    if _content_service is None:
        _content_service = ContentService(get_storage())

    return _content_service
