"""
Module: test_registration.py
Description: Unit tests for the user registration service.
"""

from unittest.mock import AsyncMock, patch

import pytest

from catalog_api.auth.passwords import verify_password
from catalog_api.auth.registration import register_user
from catalog_api.errors import Conflict
from catalog_api.storage.memory import InMemoryUserStore


class TestRegisterUser:
    """Test cases for register_user()."""

    @pytest.mark.asyncio
    async def test_register_success(self, test_settings):
        store = InMemoryUserStore()

        api_key = await register_user(store, "alice", "pw1", test_settings)

        assert api_key.startswith(test_settings.api_key_prefix)
        user = await store.get_user_by_username("alice")
        assert user.api_key == api_key
        assert user.password_hash != "pw1"
        assert verify_password("pw1", user.password_hash) is True
        assert await store.get_user_by_api_key(api_key) == user

    @pytest.mark.asyncio
    async def test_duplicate_username(self, test_settings):
        store = InMemoryUserStore()
        await register_user(store, "alice", "pw1", test_settings)

        for password in ["pw1", "other"]:
            with pytest.raises(Conflict):
                await register_user(store, "alice", password, test_settings)

        assert await store.count_users() == 1

    @pytest.mark.asyncio
    async def test_duplicate_skips_hashing(self, test_settings):
        store = InMemoryUserStore()
        await register_user(store, "alice", "pw1", test_settings)

        with patch("catalog_api.auth.registration.hash_password") as mock_hash:
            with pytest.raises(Conflict):
                await register_user(store, "alice", "pw1", test_settings)

        mock_hash.assert_not_called()

    @pytest.mark.asyncio
    async def test_lost_race_is_conflict(self, test_settings):
        """The store's insert check catches a concurrent winner."""
        store = InMemoryUserStore()
        await register_user(store, "alice", "pw1", test_settings)

        with patch.object(store, "get_user_by_username", new_callable=AsyncMock, return_value=None):
            with pytest.raises(Conflict):
                await register_user(store, "alice", "pw2", test_settings)

        assert await store.count_users() == 1

    @pytest.mark.asyncio
    async def test_usernames_are_case_sensitive(self, test_settings):
        store = InMemoryUserStore()

        key1 = await register_user(store, "alice", "pw1", test_settings)
        key2 = await register_user(store, "Alice", "pw1", test_settings)

        assert key1 != key2
        assert await store.count_users() == 2

    @pytest.mark.asyncio
    async def test_uses_configured_work_factor(self, test_settings):
        store = InMemoryUserStore()

        await register_user(store, "alice", "pw1", test_settings)

        user = await store.get_user_by_username("alice")
        assert user.password_hash.split("$")[1] == str(test_settings.password_hash_iterations)
