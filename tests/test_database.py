"""
ActivityHive Backend — Store Connector Tests
=============================================

What:  MongoStore lookup, fail-fast connect and the lifespan behaviour.
How:   Lookup runs against a real motor client created with connect=False
       (name validation happens client-side, no server needed). Connect
       failures are injected by patching AsyncIOMotorClient.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import ServerSelectionTimeoutError

from activityhive.config import Settings
from activityhive.database import MongoStore
from activityhive.exceptions import StoreConnectionError


@pytest.fixture
def settings():
    return Settings(
        mongo_prefix="mongodb://",
        mongo_host="localhost:27017",
        mongo_db_name="activityhive_test",
        mongo_server_selection_timeout_ms=100,
    )


class TestLookup:

    @pytest.mark.asyncio
    async def test_valid_and_invalid_names(self, settings):
        client = AsyncIOMotorClient(settings.connection_string, connect=False)
        store = MongoStore(settings)
        store._client = client
        store._database = client[settings.mongo_db_name]
        try:
            found = store.lookup("activities")
            assert found.ok
            assert found.collection.name == "activities"
            assert found.error is None

            for bad in ("", "bad$name", ".hidden", "trailing."):
                rejected = store.lookup(bad)
                assert not rejected.ok
                assert rejected.collection is None
                assert rejected.error
        finally:
            client.close()

    def test_lookup_before_connect_is_an_error(self, settings):
        with pytest.raises(RuntimeError):
            MongoStore(settings).lookup("activities")


class TestConnect:

    @pytest.mark.asyncio
    async def test_ping_failure_raises(self, settings):
        client = MagicMock()
        client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))

        with patch("activityhive.database.AsyncIOMotorClient", return_value=client):
            store = MongoStore(settings)
            with pytest.raises(StoreConnectionError) as exc_info:
                await store.connect()

        assert exc_info.value.context["error_type"] == "ServerSelectionTimeoutError"
        assert not store.is_connected

    @pytest.mark.asyncio
    async def test_successful_connect_and_close(self, settings):
        client = MagicMock()
        client.admin.command = AsyncMock(return_value={"ok": 1.0})

        with patch("activityhive.database.AsyncIOMotorClient", return_value=client) as factory:
            store = MongoStore(settings)
            await store.connect()

        factory.assert_called_once_with(
            settings.connection_string,
            serverSelectionTimeoutMS=100,
        )
        client.admin.command.assert_awaited_once_with("ping")
        assert store.is_connected

        await store.close()
        client.close.assert_called_once()
        assert not store.is_connected


class TestLifespan:

    @pytest.mark.asyncio
    async def test_startup_aborts_when_store_unreachable(self, settings):
        from activityhive.main import create_app

        store = MongoStore(settings)
        store.connect = AsyncMock(side_effect=StoreConnectionError())
        store.close = AsyncMock()
        app = create_app(store=store, app_settings=settings)

        with pytest.raises(StoreConnectionError):
            async with app.router.lifespan_context(app):
                pass

        store.close.assert_not_called()

    @pytest.mark.asyncio
    async def test_startup_and_shutdown_use_the_store(self, settings):
        from activityhive.main import create_app

        store = MongoStore(settings)
        store.connect = AsyncMock()
        store.close = AsyncMock()
        app = create_app(store=store, app_settings=settings)

        async with app.router.lifespan_context(app):
            store.connect.assert_awaited_once()
            assert app.state.store is store

        store.close.assert_awaited_once()
