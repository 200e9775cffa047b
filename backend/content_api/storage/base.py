from abc import ABC, abstractmethod
from typing import List

from content_api.schemas.content import Resource


class StorageBackend(ABC):
    """
    Abstract storage backend for the content tree.

    Paths are Resource Paths ("/dir/file.txt"). Every method is a coroutine;
    failures are raised, never returned.
    """

    @abstractmethod
    async def read(self, path: str) -> str:
        """Return the content stored at path"""

    @abstractmethod
    async def write(self, path: str, content: str) -> None:
        """Create or overwrite the file at path with content"""

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Delete the file at path"""

    @abstractmethod
    async def list(self, path: str, recursive: bool) -> List[Resource]:
        """List the resources under the directory prefix path"""

    @abstractmethod
    async def move(self, path: str, new_path: str) -> None:
        """Move the file at path to new_path"""
