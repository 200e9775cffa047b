"""
Content API — Content Service Unit Tests
==========================================

What:  Tests for the operation dispatcher (create, delete, list, move, update).
How:   Uses AsyncMock storage doubles (no disk, no HTTP).

What we test:
    ✅ Missing path aborts every operation before any storage call
    ✅ Create chooses raw write vs notebook template by content and extension
    ✅ Update never falls back to a template
    ✅ Recursive flag truthiness coercion
    ✅ Backend failures become operation-tagged StorageOperationError
"""

import pytest

from content_api.exceptions import (
    MissingContentError,
    MissingPathError,
    StorageOperationError,
    UnsupportedTemplateError,
)
from content_api.schemas.content import Resource, ResourceType
from content_api.services.content_service import coerce_flag


def assert_no_storage_calls(storage, notebooks):
    storage.write.assert_not_awaited()
    storage.delete.assert_not_awaited()
    storage.list.assert_not_awaited()
    storage.move.assert_not_awaited()
    notebooks.create.assert_not_awaited()


class TestMissingPath:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, ""])
    async def test_every_operation_rejects_missing_path(
        self, content_service, mock_storage, mock_notebook_storage, token
    ):
        with pytest.raises(MissingPathError):
            await content_service.create(token, "data")
        with pytest.raises(MissingPathError):
            await content_service.create(token, None)
        with pytest.raises(MissingPathError):
            await content_service.update(token, "data")
        with pytest.raises(MissingPathError):
            await content_service.delete(token)
        with pytest.raises(MissingPathError):
            await content_service.move(token, "/b")

        assert_no_storage_calls(mock_storage, mock_notebook_storage)


class TestCreate:

    @pytest.mark.asyncio
    async def test_content_is_written_verbatim(self, content_service, mock_storage):
        created = await content_service.create("notes.txt", "hello")

        assert created == "/notes.txt"
        mock_storage.write.assert_awaited_once_with("/notes.txt", "hello")

    @pytest.mark.asyncio
    async def test_content_wins_over_template_for_ipynb(
        self, content_service, mock_storage, mock_notebook_storage
    ):
        """Explicit content is written raw whatever the extension."""
        await content_service.create("nb.ipynb", '{"cells": []}')

        mock_storage.write.assert_awaited_once_with("/nb.ipynb", '{"cells": []}')
        mock_notebook_storage.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_extension_gets_ipynb_appended(
        self, content_service, mock_storage, mock_notebook_storage
    ):
        created = await content_service.create("notes", None)

        assert created == "/notes.ipynb"
        mock_notebook_storage.create.assert_awaited_once_with("/notes.ipynb")
        mock_storage.write.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ipynb_path_unchanged(self, content_service, mock_notebook_storage):
        created = await content_service.create("dir/notes.ipynb", None)

        assert created == "/dir/notes.ipynb"
        mock_notebook_storage.create.assert_awaited_once_with("/dir/notes.ipynb")

    @pytest.mark.asyncio
    async def test_empty_content_counts_as_absent(self, content_service, mock_notebook_storage):
        created = await content_service.create("notes", "")

        assert created == "/notes.ipynb"
        mock_notebook_storage.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_other_extension_without_content_rejected(
        self, content_service, mock_storage, mock_notebook_storage
    ):
        with pytest.raises(UnsupportedTemplateError, match="non-ipynb") as exc_info:
            await content_service.create("notes.txt", None)

        assert exc_info.value.extension == ".txt"
        assert_no_storage_calls(mock_storage, mock_notebook_storage)

    @pytest.mark.asyncio
    async def test_write_failure_tagged_create(self, content_service, mock_storage):
        mock_storage.write.side_effect = OSError("disk full")

        with pytest.raises(StorageOperationError) as exc_info:
            await content_service.create("a.txt", "x")

        assert exc_info.value.operation == "create"
        assert exc_info.value.message == "Content create operation failed."
        assert exc_info.value.context["cause"] == "disk full"

    @pytest.mark.asyncio
    async def test_template_failure_tagged_create(self, content_service, mock_notebook_storage):
        mock_notebook_storage.create.side_effect = RuntimeError("template broken")

        with pytest.raises(StorageOperationError) as exc_info:
            await content_service.create("notes", None)

        assert exc_info.value.operation == "create"
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestUpdate:

    @pytest.mark.asyncio
    async def test_writes_content(self, content_service, mock_storage):
        await content_service.update("a.txt", "new")

        mock_storage.write.assert_awaited_once_with("/a.txt", "new")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [None, ""])
    async def test_missing_content_rejected_even_for_notebooks(
        self, content_service, mock_storage, mock_notebook_storage, content
    ):
        with pytest.raises(MissingContentError):
            await content_service.update("nb.ipynb", content)

        assert_no_storage_calls(mock_storage, mock_notebook_storage)

    @pytest.mark.asyncio
    async def test_failure_tagged_update(self, content_service, mock_storage):
        mock_storage.write.side_effect = OSError("read-only")

        with pytest.raises(StorageOperationError, match="Content update operation failed."):
            await content_service.update("a.txt", "new")


class TestDelete:

    @pytest.mark.asyncio
    async def test_deletes(self, content_service, mock_storage):
        assert await content_service.delete("a.txt") is None
        mock_storage.delete.assert_awaited_once_with("/a.txt")

    @pytest.mark.asyncio
    async def test_failure_tagged_delete(self, content_service, mock_storage):
        mock_storage.delete.side_effect = FileNotFoundError("gone")

        with pytest.raises(StorageOperationError) as exc_info:
            await content_service.delete("a.txt")

        assert exc_info.value.operation == "delete"


class TestMove:

    @pytest.mark.asyncio
    async def test_moves_once(self, content_service, mock_storage):
        await content_service.move("/a", "/b")

        mock_storage.move.assert_awaited_once_with("/a", "/b")

    @pytest.mark.asyncio
    async def test_failure_tagged_move(self, content_service, mock_storage):
        mock_storage.move.side_effect = OSError("busy")

        with pytest.raises(StorageOperationError, match="Content move operation failed."):
            await content_service.move("a", "/b")


class TestList:

    @pytest.mark.asyncio
    async def test_root_listing(self, content_service, mock_storage):
        result = await content_service.list(None, None)

        assert result.prefix == "/"
        assert result.resources == []
        mock_storage.list.assert_awaited_once_with("/", False)

    @pytest.mark.asyncio
    async def test_prefix_normalized_and_echoed(self, content_service, mock_storage):
        result = await content_service.list("docs", None)

        assert result.prefix == "/docs/"
        mock_storage.list.assert_awaited_once_with("/docs/", False)

    @pytest.mark.asyncio
    async def test_backend_order_preserved(self, content_service, mock_storage):
        resources = [
            Resource(path="/z.txt", type=ResourceType.FILE),
            Resource(path="/a/", type=ResourceType.DIRECTORY),
            Resource(path="/m.ipynb", type=ResourceType.NOTEBOOK),
        ]
        mock_storage.list.return_value = resources

        result = await content_service.list(None, None)

        assert [r.path for r in result.resources] == ["/z.txt", "/a/", "/m.ipynb"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("flag", ["1", "true", "false", "anything"])
    async def test_non_empty_flag_is_recursive(self, content_service, mock_storage, flag):
        await content_service.list("docs", flag)

        mock_storage.list.assert_awaited_once_with("/docs/", True)

    @pytest.mark.asyncio
    async def test_empty_flag_is_not_recursive(self, content_service, mock_storage):
        await content_service.list("docs", "")

        mock_storage.list.assert_awaited_once_with("/docs/", False)

    @pytest.mark.asyncio
    async def test_failure_tagged_list(self, content_service, mock_storage):
        mock_storage.list.side_effect = OSError("io error")

        with pytest.raises(StorageOperationError) as exc_info:
            await content_service.list(None, None)

        assert exc_info.value.operation == "list"


class TestCoerceFlag:

    def test_truthy_strings(self):
        assert coerce_flag("true") is True
        assert coerce_flag("1") is True
        assert coerce_flag("0") is True

    def test_falsy_values(self):
        assert coerce_flag(None) is False
        assert coerce_flag("") is False
