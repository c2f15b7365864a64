"""
HikeLog Backend - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_collection: AsyncMock with the Motor collection methods
    ├── fake_database: In-memory stand-in for a Motor database
    ├── sample_hiking_data / sample_observation_data: request payloads
    └── test_client: HTTPX AsyncClient bound to an app using fake_database
"""

import copy
import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

# Must be set before any hikelog import reads settings
os.environ["MONGO_URL"] = "mongodb://localhost:27017"
os.environ["MONGO_DATABASE"] = "hikelog-test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from pymongo.errors import ServerSelectionTimeoutError


# ══════════════════════════════════════════════════════════════════════════
# In-memory store double
# ══════════════════════════════════════════════════════════════════════════

class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        if length is None:
            return list(self._documents)
        return list(self._documents)[:length]


class FakeCollection:
    """
    Implements the subset of AsyncIOMotorCollection used by ResourceService.

    Only `{"_id": ...}` and `{}` filters are supported.
    """

    def __init__(self):
        self.documents = {}

    def _match(self, query):
        if not query:
            return list(self.documents.values())
        doc = self.documents.get(query.get("_id"))
        return [doc] if doc is not None else []

    async def insert_one(self, document):
        self.documents[document["_id"]] = copy.deepcopy(document)
        return SimpleNamespace(inserted_id=document["_id"])

    def find(self, query):
        return FakeCursor([copy.deepcopy(d) for d in self._match(query)])

    async def find_one(self, query):
        matches = self._match(query)
        return copy.deepcopy(matches[0]) if matches else None

    async def update_one(self, query, update):
        matches = self._match(query)
        for doc in matches:
            doc.update(copy.deepcopy(update["$set"]))
        return SimpleNamespace(matched_count=len(matches), modified_count=len(matches))

    async def delete_one(self, query):
        matches = self._match(query)
        for doc in matches:
            del self.documents[doc["_id"]]
        return SimpleNamespace(deleted_count=len(matches))


class FakeDatabase:
    """Dict of FakeCollections plus a `command` coroutine for pings."""

    def __init__(self):
        self.collections = {}
        self.reachable = True

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())

    async def command(self, name):
        if not self.reachable:
            raise ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")
        return {"ok": 1.0}


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_collection():
    """
    Provides a mock Motor collection.

    Usage:
        mock_collection.find_one.return_value = {"_id": oid, "name": "x"}
    """
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.update_one = AsyncMock(
        return_value=SimpleNamespace(matched_count=1, modified_count=1)
    )
    collection.delete_one = AsyncMock(return_value=SimpleNamespace(deleted_count=1))
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find = MagicMock(return_value=cursor)
    return collection


@pytest.fixture
def fake_database():
    return FakeDatabase()


@pytest.fixture
def sample_hiking_data():
    return {
        "name": "Ridge Trail",
        "location": "North Valley",
        "date": "2024-05-01",
        "parking": True,
        "length": "5km",
        "difficulty": 3,
        "description": "Scenic",
    }


@pytest.fixture
def sample_observation_data():
    return {
        "hiking_id": "6650f1c2a9b8e4d3c2b1a098",
        "name": "Red kite",
        "comment": "Circling above the ridge",
        "time": "10:42",
    }


@pytest_asyncio.fixture
async def test_client(fake_database):
    """
    Provides an async HTTP test client bound to an app that uses fake_database.

    ASGITransport does not run the lifespan, so no MongoDB client is created.
    """
    from hikelog.main import create_app
    app = create_app(database=fake_database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
