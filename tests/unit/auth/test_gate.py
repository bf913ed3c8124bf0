"""
Module: test_gate.py
Description: Unit tests for the credential gate.
"""

import pytest

from catalog_api.auth.gate import authenticate
from catalog_api.errors import Forbidden
from catalog_api.models.user import User
from catalog_api.storage.memory import InMemoryUserStore


@pytest.fixture
def registered_store():
    store = InMemoryUserStore()
    store._users.append(User(username="alice", password_hash="x", api_key="api-key-alice"))
    return store


class TestAuthenticate:
    """Test cases for authenticate()."""

    @pytest.mark.asyncio
    async def test_known_key(self, registered_store):
        user = await authenticate(registered_store, "api-key-alice")

        assert user.username == "alice"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("credential", [None, ""])
    async def test_missing_key(self, registered_store, credential):
        with pytest.raises(Forbidden, match="API key is required"):
            await authenticate(registered_store, credential)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("credential", ["garbage", "api-key-ALICE", "api-key-alice "])
    async def test_unknown_key(self, registered_store, credential):
        with pytest.raises(Forbidden, match="Invalid API key"):
            await authenticate(registered_store, credential)
