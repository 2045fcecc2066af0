"""
ActivityHive Backend — Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the test suite.
How:   An in-memory stand-in for the motor collection API (find/to_list,
       insert_one, update_one) behind a MongoStore subclass, so the real
       dependency and service code runs without a MongoDB server.

Fixtures:
    ├── fake_store: FakeStore pre-connected to an empty FakeDatabase
    ├── mock_store: MagicMock store for service-level unit tests
    ├── sample_order: A valid order body
    └── test_client: HTTPX AsyncClient bound to create_app(store=fake_store)
"""

import copy
import os
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.errors import InvalidName

# Settings are read at import time; keep tests off any real deployment
os.environ["MONGO_HOST"] = "localhost:27017"
os.environ["MONGO_DB_NAME"] = "activityhive_test"
os.environ["LOG_LEVEL"] = "WARNING"

from activityhive.config import Settings  # noqa: E402
from activityhive.database import MongoStore  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# In-memory store
# ══════════════════════════════════════════════════════════════════════════

class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        docs = [copy.deepcopy(d) for d in self._documents]
        return docs if length is None else docs[:length]


class FakeCollection:
    """Subset of AsyncIOMotorCollection used by the services."""

    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []

    def _matches(self, document: Dict[str, Any], filter: Dict[str, Any]) -> bool:
        return all(k in document and document[k] == v for k, v in filter.items())

    def find(self, filter: Optional[Dict[str, Any]] = None) -> FakeCursor:
        filter = filter or {}
        return FakeCursor([d for d in self.documents if self._matches(d, filter)])

    async def insert_one(self, document: Dict[str, Any]) -> SimpleNamespace:
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"], acknowledged=True)

    async def update_one(self, filter: Dict[str, Any], update: Dict[str, Any]) -> SimpleNamespace:
        for document in self.documents:
            if self._matches(document, filter):
                document.update(copy.deepcopy(update.get("$set", {})))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)


class FakeDatabase:
    """Hands out one persistent FakeCollection per name."""

    def __init__(self, name: str = "activityhive_test"):
        self.name = name
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        # Same rules pymongo applies when a Collection is constructed
        if not name or ".." in name or "$" in name or "\x00" in name:
            raise InvalidName(f"collection names must not be empty or contain '$': {name!r}")
        if name.startswith(".") or name.endswith("."):
            raise InvalidName(f"collection names must not start or end with '.': {name!r}")
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


class FakeStore(MongoStore):
    def __init__(self):
        super().__init__(Settings())
        self._database = FakeDatabase()
        self.reachable = True

    async def connect(self) -> None:
        return None

    async def ping(self) -> bool:
        return self.reachable

    async def close(self) -> None:
        return None


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def mock_store():
    """
    MagicMock store whose collection() returns the same MagicMock collection
    every time; tests set AsyncMock results on it.
    """
    store = MagicMock(spec=MongoStore)
    collection = MagicMock()
    store.collection.return_value = collection
    return store


@pytest.fixture
def sample_order() -> Dict[str, Any]:
    return {
        "customerName": "Ada Lovelace",
        "customerPhone": "+44 20 7946 0018",
        "items": [{"productId": 3, "quantity": 2}],
        "note": "Leave at reception",
    }


@pytest_asyncio.fixture
async def test_client(fake_store):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    ASGITransport does not run the lifespan, so the FakeStore is used as
    constructed (already "connected").
    """
    from activityhive.main import create_app

    app = create_app(store=fake_store, app_settings=Settings(cors_origins="http://localhost:5173"))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
