"""
Module: test_memory.py
Description: Unit tests for the in-memory registries.
"""

import pytest

from catalog_api.errors import Conflict
from catalog_api.models.user import User
from catalog_api.storage.memory import InMemoryProductStore, InMemoryUserStore


def _user(username, api_key):
    return User(username=username, password_hash="hash", api_key=api_key)


class TestInMemoryUserStore:
    """Test cases for InMemoryUserStore."""

    @pytest.mark.asyncio
    async def test_put_and_find(self):
        store = InMemoryUserStore()
        await store.put_user(_user("alice", "k1"))

        assert (await store.get_user_by_username("alice")).api_key == "k1"
        assert (await store.get_user_by_api_key("k1")).username == "alice"
        assert await store.get_user_by_username("bob") is None
        assert await store.get_user_by_api_key("k2") is None

    @pytest.mark.asyncio
    async def test_duplicate_username(self):
        store = InMemoryUserStore()
        await store.put_user(_user("alice", "k1"))

        with pytest.raises(Conflict):
            await store.put_user(_user("alice", "k2"))

        assert await store.count_users() == 1
        assert await store.get_user_by_api_key("k2") is None

    @pytest.mark.asyncio
    async def test_empty_username_is_allowed(self):
        store = InMemoryUserStore()
        await store.put_user(_user("", "k1"))

        assert (await store.get_user_by_username("")).api_key == "k1"


class TestInMemoryProductStore:
    """Test cases for InMemoryProductStore."""

    @pytest.mark.asyncio
    async def test_create_assigns_sequential_ids(self):
        store = InMemoryProductStore()

        widget = await store.create_product("Widget", 10)
        gadget = await store.create_product("Gadget", 20)

        assert (widget.id, gadget.id) == (1, 2)
        assert [p.name for p in await store.list_products()] == ["Widget", "Gadget"]

    @pytest.mark.asyncio
    async def test_id_follows_registry_length_after_delete(self):
        store = InMemoryProductStore()
        await store.create_product("Widget", 10)
        await store.create_product("Gadget", 20)

        assert await store.delete_product(1) is True
        third = await store.create_product("Gizmo", 30)

        assert third.id == 2
        assert [(p.id, p.name) for p in await store.list_products()] == [(2, "Gadget"), (2, "Gizmo")]
        assert (await store.get_product(2)).name == "Gadget"

    @pytest.mark.asyncio
    async def test_get_missing(self):
        store = InMemoryProductStore()
        await store.create_product("Widget", 10)

        assert await store.get_product(2) is None
        assert await store.get_product(-1) is None

    @pytest.mark.asyncio
    async def test_update_fields(self):
        store = InMemoryProductStore()
        await store.create_product("Widget", 10)

        updated = await store.update_product(1, {"price": 12.5})
        assert (updated.name, updated.price) == ("Widget", 12.5)

        updated = await store.update_product(1, {"name": "X"})
        assert (updated.name, updated.price) == ("X", 12.5)

        assert await store.update_product(1, {}) == updated
        assert await store.get_product(1) == updated

    @pytest.mark.asyncio
    async def test_update_missing(self):
        store = InMemoryProductStore()

        assert await store.update_product(1, {"name": "X"}) is None

    @pytest.mark.asyncio
    async def test_returned_products_are_copies(self):
        store = InMemoryProductStore()
        product = await store.create_product("Widget", 10)

        product.name = "Changed"

        assert (await store.get_product(1)).name == "Widget"

    @pytest.mark.asyncio
    async def test_delete_missing(self):
        store = InMemoryProductStore()
        await store.create_product("Widget", 10)

        assert await store.delete_product(5) is False
        assert len(await store.list_products()) == 1
