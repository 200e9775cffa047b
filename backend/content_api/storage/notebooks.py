import logging

import nbformat

from content_api.storage.base import StorageBackend

logger = logging.getLogger(__name__)


def default_notebook_template() -> str:
    """Serialized empty nbformat v4 notebook used for templated creation."""
    notebook = nbformat.v4.new_notebook()
    return nbformat.writes(notebook)


class NotebookStorage:
    """
    Notebook-specific wrapper around a StorageBackend.

    Creating a notebook writes the default template to the given path through
    the wrapped backend; reads and writes of existing notebooks go straight to
    the backend.
    """

    def __init__(self, storage: StorageBackend):
        self._storage = storage

    async def create(self, path: str) -> str:
        """Write a new notebook from the default template; returns the created path."""
        await self._storage.write(path, default_notebook_template())
        logger.info("Notebook created from template: %s", path)
        return path
