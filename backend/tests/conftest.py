"""
Content API — Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_storage: StorageBackend double with AsyncMock operations
    ├── mock_notebook_storage: NotebookStorage double
    ├── content_service: ContentService wired to the two doubles
    ├── local_storage: LocalFileStorage rooted in a temporary directory
    └── test_client: HTTPX AsyncClient with the service dependency overridden
"""

import os
import tempfile

# Override settings for testing BEFORE any app imports
os.environ["STORAGE_ROOT"] = tempfile.mkdtemp(prefix="content_api_test_")
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from content_api.services.content_service import ContentService, get_content_service  # noqa: E402
from content_api.storage import LocalFileStorage  # noqa: E402


@pytest.fixture
def mock_storage():
    """
    Provides a storage backend double.

    Usage:
        async def test_delete(content_service, mock_storage):
            mock_storage.delete.side_effect = OSError("disk gone")
    """
    storage = MagicMock()
    storage.read = AsyncMock(return_value="")
    storage.write = AsyncMock(return_value=None)
    storage.delete = AsyncMock(return_value=None)
    storage.list = AsyncMock(return_value=[])
    storage.move = AsyncMock(return_value=None)
    return storage


@pytest.fixture
def mock_notebook_storage():
    """Notebook wrapper double; create() echoes the path it was given."""
    notebooks = MagicMock()
    notebooks.create = AsyncMock(side_effect=lambda path: path)
    return notebooks


@pytest.fixture
def content_service(mock_storage, mock_notebook_storage):
    return ContentService(mock_storage, mock_notebook_storage)


@pytest.fixture
def local_storage(tmp_path):
    """LocalFileStorage over a fresh temporary directory (cleaned up by pytest)."""
    storage_dir = tmp_path / "storage"
    storage_dir.mkdir()
    return LocalFileStorage(storage_root=str(storage_dir))


@pytest_asyncio.fixture
async def test_client(content_service):
    """
    Provides an async HTTP test client for endpoint testing.

    The ContentService dependency is replaced by the mock-backed service, so
    assertions can be made on mock_storage / mock_notebook_storage.
    """
    from content_api.main import app

    app.dependency_overrides[get_content_service] = lambda: content_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
