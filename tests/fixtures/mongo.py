"""Motor stand-ins for service tests.

Collections are MagicMocks whose coroutine methods are AsyncMocks; cursors
support the ``find().sort().skip().limit()`` chain and ``async for``.
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock


def make_cursor(docs: list[dict[str, Any]] | None = None) -> MagicMock:
    """Create a chainable cursor that yields ``docs``."""
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.__aiter__.return_value = list(docs or [])
    return cursor


def make_collection() -> MagicMock:
    """Create a collection mock with the methods the service awaits."""
    collection = MagicMock()
    collection.count_documents = AsyncMock(return_value=0)
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.find_one_and_update = AsyncMock(return_value=None)
    collection.find_one_and_delete = AsyncMock(return_value=None)
    collection.find.return_value = make_cursor()
    return collection
