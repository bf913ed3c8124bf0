"""
Module: registration.py
Description: User registration service.

Rejects duplicate usernames, hashes the password off the event loop,
mints an API key and appends the user record. The plaintext password
is never stored, returned or logged.

Dependencies: FastAPI (threadpool helper)
Author: Catalog API Team
"""

from fastapi.concurrency import run_in_threadpool

from catalog_api.auth.api_key import generate_api_key
from catalog_api.auth.passwords import hash_password
from catalog_api.config.settings import Settings
from catalog_api.errors import Conflict
from catalog_api.models.user import User
from catalog_api.storage.base import UserStore
from catalog_api.utils.logger import get_logger

logger = get_logger(__name__)


async def register_user(
    user_store: UserStore,
    username: str,
    password: str,
    settings: Settings
) -> str:
    """
    Register a new user and return their API key.

    Args:
        user_store: User registry
        username: Requested username (exact-match uniqueness)
        password: Plaintext password
        settings: Supplies the hashing work factor and key prefix

    Returns:
        The newly minted API key

    Raises:
        Conflict: If the username is already registered, including when a
            concurrent registration wins the race after the first check
    """
    if await user_store.get_user_by_username(username) is not None:
        logger.warning("Registration rejected: username taken", username=username)
        raise Conflict()

    password_hash = await run_in_threadpool(
        hash_password, password, settings.password_hash_iterations
    )
    api_key = generate_api_key(settings.api_key_prefix)

    await user_store.put_user(
        User(username=username, password_hash=password_hash, api_key=api_key)
    )

    logger.info("User registered", username=username)
    return api_key
