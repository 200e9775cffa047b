from typing import Optional

from .base import StorageBackend
from .local import LocalFileStorage
from .notebooks import NotebookStorage, default_notebook_template


_storage_backend: Optional[StorageBackend] = None


def get_storage() -> StorageBackend:
    """Get the configured storage backend (singleton)"""
    global _storage_backend

    if _storage_backend is None:
        _storage_backend = LocalFileStorage()

    return _storage_backend


__all__ = [
    "StorageBackend", "LocalFileStorage", "NotebookStorage",
    "default_notebook_template", "get_storage",
]
