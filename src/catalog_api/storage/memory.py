"""
Module: memory.py
Description: In-memory user and product registries.

Reference implementation of the store interfaces. Data lives only as
long as the process and is not shared across instances.

Key Components:
- InMemoryUserStore: ordered list of users, unique usernames
- InMemoryProductStore: ordered list of products, ids from the list length

Dependencies: threading, typing
Author: Catalog API Team
"""

import threading
from typing import Any, Dict, List, Optional

from catalog_api.errors import Conflict
from catalog_api.models.product import Price, Product
from catalog_api.models.user import User
from catalog_api.storage.base import ProductStore, UserStore
from catalog_api.utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryUserStore(UserStore):
    """Thread-safe in-memory user registry."""

    def __init__(self):
        self._lock = threading.Lock()
        self._users: List[User] = []

    async def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            for user in self._users:
                if user.username == username:
                    return user
        return None

    async def get_user_by_api_key(self, api_key: str) -> Optional[User]:
        with self._lock:
            for user in self._users:
                if user.api_key == api_key:
                    return user
        return None

    async def put_user(self, user: User) -> None:
        with self._lock:
            if any(u.username == user.username for u in self._users):
                raise Conflict()
            self._users.append(user)

        logger.debug("User stored in memory", username=user.username)

    async def count_users(self) -> int:
        with self._lock:
            return len(self._users)


class InMemoryProductStore(ProductStore):
    """
    Thread-safe in-memory product registry.

    A new product takes id len(products) + 1. Ids are not reclaimed, so
    after a delete a new product can share an id with an existing one;
    lookups then resolve to the earliest record with that id.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._products: List[Product] = []

    def _index_of(self, product_id: int) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return -1

    async def list_products(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products]

    async def get_product(self, product_id: int) -> Optional[Product]:
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return None
            return self._products[index].model_copy()

    async def create_product(self, name: str, price: Price) -> Product:
        with self._lock:
            product = Product(id=len(self._products) + 1, name=name, price=price)
            self._products.append(product)

        logger.debug("Product stored in memory", product_id=product.id)
        return product.model_copy()

    async def update_product(self, product_id: int, changes: Dict[str, Any]) -> Optional[Product]:
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return None
            updated = Product.model_validate({**self._products[index].model_dump(), **changes})
            self._products[index] = updated
            return updated.model_copy()

    async def delete_product(self, product_id: int) -> bool:
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return False
            del self._products[index]
        return True
