"""
ActivityHive Backend — Document Store Connector
================================================

What:  Owns the single MongoDB client for the process and hands out
       collection handles.
How:   MongoStore wraps an AsyncIOMotorClient. The app factory constructs
       one instance and stores it on `app.state.store`; the lifespan calls
       connect() at startup and close() at shutdown. Route dependencies
       reach it through get_store().
When:  connect() runs once before the server accepts requests. Every
       request reuses the same client; nothing reconfigures or replaces it.

Collection lookup:
    lookup(name) never checks that a collection exists or is on any
    allow-list. MongoDB returns an empty cursor for a collection that was
    never written, so on the generic read route an unknown name behaves
    like an empty collection. The only names refused are the ones the
    driver itself rejects (empty, containing '$' or NUL, leading or
    trailing '.'), and the refusal is reported through CollectionLookup
    rather than an exception.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import InvalidName, PyMongoError

from activityhive.config import Settings
from activityhive.exceptions import StoreConnectionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectionLookup:
    """
    Outcome of resolving a collection name to a handle.

    Exactly one of `collection` / `error` is set.
    """

    name: str
    collection: Optional[AsyncIOMotorCollection] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.collection is not None


class MongoStore:
    """
    Process-wide MongoDB connection.

    Lifecycle:
        1. Constructed by create_app() (no I/O)
        2. connect(): builds the motor client and pings the server
        3. Shared read-only by every request
        4. close(): releases pooled connections at shutdown
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self._database is not None

    async def connect(self) -> None:
        """
        Create the client and verify the server is reachable.

        Raises:
            StoreConnectionError: if the client cannot be built or the ping
                fails. There is no retry.
        """
        if self._client is not None:
            return

        logger.info(
            "Connecting to MongoDB at %s (database=%s)",
            self._settings.redacted_connection_string,
            self._settings.mongo_db_name,
        )
        try:
            client = AsyncIOMotorClient(
                self._settings.connection_string,
                serverSelectionTimeoutMS=self._settings.mongo_server_selection_timeout_ms,
            )
            await client.admin.command("ping")
        except (PyMongoError, ValueError) as e:
            logger.error("MongoDB connection failed: %s", str(e))
            raise StoreConnectionError(
                context={"error_type": type(e).__name__, "detail": str(e)}
            ) from e

        self._client = client
        self._database = client[self._settings.mongo_db_name]
        logger.info("Connected to MongoDB database '%s'", self._settings.mongo_db_name)

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise RuntimeError("MongoStore.connect() has not been called")
        return self._database

    def lookup(self, name: str) -> CollectionLookup:
        """
        Resolve a collection name taken verbatim from a URL.

        Returns:
            CollectionLookup with the handle, or with the driver's reason for
            rejecting the name.
        """
        try:
            handle = self.database[name]
        except InvalidName as e:
            return CollectionLookup(name=name, error=str(e))
        return CollectionLookup(name=name, collection=handle)

    def collection(self, name: str) -> AsyncIOMotorCollection:
        """Handle for a fixed, known-good collection name (orders, products)."""
        return self.database[name]

    async def ping(self) -> bool:
        """Lightweight reachability check for the health route."""
        try:
            await self.database.command("ping")
        except (PyMongoError, RuntimeError) as e:
            logger.warning("MongoDB ping failed: %s", str(e))
            return False
        return True

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB client closed")


def get_store(request: Request) -> MongoStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
