"""
Content API — Local File System Storage Backend
=================================================

What:  StorageBackend implementation over a directory on local disk.
Why:   Gives the service a working content tree without external services.
How:   Resource Paths map onto files beneath `storage_root`; all I/O goes
       through aiofiles so the event loop is never blocked.
Who:   Instantiated once (see storage/__init__.py) and shared by all requests.

Directory layout example:
    storage/                  →  "/"
    ├── notebooks/            →  "/notebooks/"       (directory)
    │   └── intro.ipynb       →  "/notebooks/intro.ipynb" (notebook)
    └── readme.txt            →  "/readme.txt"       (file)

Security:
    Every path is resolved and checked to stay inside storage_root, so
    "/../../etc/passwd" is rejected before any disk access.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import aiofiles
import aiofiles.os

from content_api.config import settings
from content_api.exceptions import FileStorageError
from content_api.schemas.content import Resource, ResourceType
from content_api.storage.base import StorageBackend

logger = logging.getLogger(__name__)

NOTEBOOK_EXTENSION = ".ipynb"


class LocalFileStorage(StorageBackend):
    """
    Stores content as plain UTF-8 files beneath a root directory.

    Listing semantics:
        - list("/a/", False) returns direct children of /a/
        - list("/a/", True) returns every descendant of /a/
        - Directories are reported with a trailing "/" and type "directory"
        - Results are sorted by path
        - A prefix with no directory behind it lists as empty
    """

    def __init__(self, storage_root: Optional[str] = None):
        """
        Args:
            storage_root: Override the default storage path (used in tests).
                          If None, uses settings.storage_root.
        """
        self.storage_root = Path(storage_root or settings.storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True)
        logger.info("LocalFileStorage initialized with storage_root=%s", self.storage_root)

    # ── Path mapping ──────────────────────────────────────────────────────

    def _resolve(self, path: str) -> Path:
        """Map a Resource Path to an absolute path inside storage_root."""
        candidate = (self.storage_root / path.lstrip("/")).resolve()
        if candidate != self.storage_root and self.storage_root not in candidate.parents:
            raise FileStorageError(
                message=f"Path escapes the storage root: {path}",
                context={"path": path},
            )
        return candidate

    def _to_resource_path(self, absolute: Path, is_directory: bool) -> str:
        relative = absolute.relative_to(self.storage_root).as_posix()
        resource_path = "/" + relative
        if is_directory:
            resource_path += "/"
        return resource_path

    # ── StorageBackend operations ─────────────────────────────────────────

    async def read(self, path: str) -> str:
        target = self._resolve(path)
        try:
            async with aiofiles.open(target, "r", encoding="utf-8") as f:
                return await f.read()
        except FileNotFoundError:
            raise FileStorageError(message=f"File not found: {path}", context={"path": path})
        except OSError as e:
            logger.error("Failed to read %s: %s", target, str(e))
            raise FileStorageError(
                message=f"Failed to read {path}",
                context={"path": path, "os_error": str(e)},
            ) from e

    async def write(self, path: str, content: str) -> None:
        target = self._resolve(path)
        try:
            await aiofiles.os.makedirs(target.parent, exist_ok=True)
            async with aiofiles.open(target, "w", encoding="utf-8") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to write %s: %s", target, str(e))
            raise FileStorageError(
                message=f"Failed to write {path}",
                context={"path": path, "os_error": str(e)},
            ) from e

        logger.info("File stored: %s (%d chars)", path, len(content))

    async def delete(self, path: str) -> None:
        target = self._resolve(path)
        try:
            await aiofiles.os.remove(target)
        except FileNotFoundError:
            raise FileStorageError(message=f"File not found: {path}", context={"path": path})
        except OSError as e:
            logger.error("Failed to delete %s: %s", target, str(e))
            raise FileStorageError(
                message=f"Failed to delete {path}",
                context={"path": path, "os_error": str(e)},
            ) from e

        logger.info("File deleted: %s", path)

    async def list(self, path: str, recursive: bool) -> List[Resource]:
        directory = self._resolve(path)
        if not await aiofiles.os.path.isdir(directory):
            logger.debug("List: no directory behind prefix %s", path)
            return []

        resources: List[Resource] = []
        try:
            await self._collect(directory, recursive, resources)
        except OSError as e:
            logger.error("Failed to list %s: %s", directory, str(e))
            raise FileStorageError(
                message=f"Failed to list {path}",
                context={"path": path, "os_error": str(e)},
            ) from e

        resources.sort(key=lambda resource: resource.path)
        return resources

    async def move(self, path: str, new_path: str) -> None:
        source = self._resolve(path)
        target = self._resolve(new_path)
        if not await aiofiles.os.path.isfile(source):
            raise FileStorageError(message=f"File not found: {path}", context={"path": path})

        try:
            await aiofiles.os.makedirs(target.parent, exist_ok=True)
            await aiofiles.os.rename(source, target)
        except OSError as e:
            logger.error("Failed to move %s to %s: %s", source, target, str(e))
            raise FileStorageError(
                message=f"Failed to move {path} to {new_path}",
                context={"path": path, "new_path": new_path, "os_error": str(e)},
            ) from e

        logger.info("File moved: %s -> %s", path, new_path)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _collect(self, directory: Path, recursive: bool, resources: List[Resource]) -> None:
        for name in await aiofiles.os.listdir(directory):
            entry = directory / name
            is_directory = await aiofiles.os.path.isdir(entry)
            resources.append(await self._describe(entry, is_directory))
            if is_directory and recursive:
                await self._collect(entry, recursive, resources)

    async def _describe(self, entry: Path, is_directory: bool) -> Resource:
        stat = await aiofiles.os.stat(entry)
        if is_directory:
            kind = ResourceType.DIRECTORY
        elif entry.suffix == NOTEBOOK_EXTENSION:
            kind = ResourceType.NOTEBOOK
        else:
            kind = ResourceType.FILE

        return Resource(
            path=self._to_resource_path(entry, is_directory),
            type=kind,
            size=0 if is_directory else stat.st_size,
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc).isoformat(),
        )
