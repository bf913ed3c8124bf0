"""
Module: gate.py
Description: Credential gate for product routes.

Looks the request's API key up in the user registry and halts the
request with 403 when it is missing or unknown. The matched user is
not exposed to handlers: all authenticated users share one catalog.

Key Components:
- authenticate(): Map a credential to a user or raise Forbidden
- require_api_key(): FastAPI dependency used on the products router

Dependencies: FastAPI, typing
Author: Catalog API Team
"""

from typing import Optional

from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader, APIKeyQuery

from catalog_api.auth.api_key import API_KEY_HEADER, API_KEY_QUERY_PARAM, extract_api_key
from catalog_api.dependencies import get_user_store
from catalog_api.errors import Forbidden
from catalog_api.models.user import User
from catalog_api.storage.base import UserStore
from catalog_api.utils.logger import get_logger

logger = get_logger(__name__)

api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)
api_key_query = APIKeyQuery(name=API_KEY_QUERY_PARAM, auto_error=False)


async def authenticate(user_store: UserStore, credential: Optional[str]) -> User:
    """
    Resolve a credential to its owner.

    Args:
        user_store: User registry
        credential: API key sent with the request, or None

    Returns:
        The user owning the key

    Raises:
        Forbidden: If the credential is missing or matches no user
    """
    if not credential:
        raise Forbidden("API key is required")

    user = await user_store.get_user_by_api_key(credential)
    if user is None:
        raise Forbidden("Invalid API key")

    return user


async def require_api_key(
    request: Request,
    header_key: Optional[str] = Security(api_key_header),
    query_key: Optional[str] = Security(api_key_query),
    user_store: UserStore = Depends(get_user_store),
) -> None:
    """Gate dependency: proceed only for a registered API key."""
    await authenticate(user_store, extract_api_key(header_key, query_key))
    logger.debug("API key accepted", path=request.url.path, method=request.method)
