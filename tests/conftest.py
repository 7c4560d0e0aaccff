"""Shared fixtures: an in-memory stand-in for the ``employees`` collection
and an HTTPX client wired to the app with the repository overridden."""

import os
from copy import deepcopy
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import AsyncClient, ASGITransport

os.environ.setdefault("LOG_LEVEL", "WARNING")

from app.main import app
from app.repositories.employee import EmployeeRepository, get_employee_repository


class FakeCursor:
    def __init__(self, documents):
        self.documents = documents

    async def to_list(self, length=None):
        return self.documents if length is None else self.documents[:length]


class FakeCollection:
    """Equality-only subset of the Motor collection API used by the repository."""

    def __init__(self):
        self.documents = []

    def _match(self, query):
        return [d for d in self.documents if all(d.get(k) == v for k, v in query.items())]

    def find(self, query=None):
        return FakeCursor([deepcopy(d) for d in self._match(query or {})])

    async def insert_one(self, document):
        oid = ObjectId()
        self.documents.append({"_id": oid, **deepcopy(document)})
        return SimpleNamespace(inserted_id=oid)

    async def find_one(self, query):
        matches = self._match(query)
        return deepcopy(matches[0]) if matches else None

    async def find_one_and_update(self, query, update):
        matches = self._match(query)
        if not matches:
            return None
        before = deepcopy(matches[0])
        matches[0].update(update["$set"])
        return before

    async def delete_one(self, query):
        matches = self._match(query)
        if matches:
            self.documents.remove(matches[0])
        return SimpleNamespace(deleted_count=len(matches[:1]))


@pytest.fixture
def employees_collection():
    return FakeCollection()


@pytest.fixture
def mock_collection():
    """Motor-shaped mock: ``find`` is sync and returns a cursor, the rest are awaitable."""
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.delete_one = AsyncMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find.return_value = cursor
    return collection


def _client_for(collection):
    app.dependency_overrides[get_employee_repository] = lambda: EmployeeRepository(collection)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest_asyncio.fixture
async def client(employees_collection):
    async with _client_for(employees_collection) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def failing_client(mock_collection):
    async with _client_for(mock_collection) as ac:
        yield ac, mock_collection
    app.dependency_overrides.clear()
