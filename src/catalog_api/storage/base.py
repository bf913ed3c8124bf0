"""
Module: base.py
Description: Store interfaces for the user and product registries.

Handlers depend only on these interfaces, so the in-memory reference
stores and the DynamoDB stores are interchangeable.

Key Components:
- UserStore: find-by-username, find-by-key, insert
- ProductStore: list, get, create, update, delete

Dependencies: abc, typing
Author: Catalog API Team
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from catalog_api.models.product import Price, Product
from catalog_api.models.user import User


class UserStore(ABC):
    """Registry of registered users."""

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Return the user with exactly this username, or None."""

    @abstractmethod
    async def get_user_by_api_key(self, api_key: str) -> Optional[User]:
        """Return the user owning exactly this API key, or None."""

    @abstractmethod
    async def put_user(self, user: User) -> None:
        """
        Append a user record.

        Raises:
            Conflict: If the username is already taken
        """

    @abstractmethod
    async def count_users(self) -> int:
        """Return the number of registered users."""


class ProductStore(ABC):
    """Registry of catalog products."""

    @abstractmethod
    async def list_products(self) -> List[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    async def get_product(self, product_id: int) -> Optional[Product]:
        """Return the product with this id, or None."""

    @abstractmethod
    async def create_product(self, name: str, price: Price) -> Product:
        """Assign the next id, store the product and return it."""

    @abstractmethod
    async def update_product(self, product_id: int, changes: Dict[str, Any]) -> Optional[Product]:
        """
        Apply field changes to a product.

        Args:
            product_id: Target product id
            changes: Field name to new value; only supplied fields

        Returns:
            The updated product, or None if no product has this id
        """

    @abstractmethod
    async def delete_product(self, product_id: int) -> bool:
        """Remove a product. Returns False if no product has this id."""
