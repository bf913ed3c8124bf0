"""
Module: storage
Description: Package initialization for the registry layer.

This package contains the store interfaces and their implementations:
- base: UserStore and ProductStore interfaces
- memory: in-memory reference stores (default)
- dynamodb: DynamoDB stores for persistent deployments

build_stores() picks the implementation named by settings.
"""

from typing import Tuple

from catalog_api.config.settings import Settings
from catalog_api.storage.base import ProductStore, UserStore
from catalog_api.storage.memory import InMemoryProductStore, InMemoryUserStore


def build_stores(settings: Settings) -> Tuple[UserStore, ProductStore]:
    """
    Construct the user and product stores for the configured backend.

    Args:
        settings: Application settings

    Returns:
        (user_store, product_store)
    """
    if settings.storage_backend == "dynamodb":
        from catalog_api.storage.dynamodb import DynamoDBProductStore, DynamoDBUserStore

        return (
            DynamoDBUserStore(
                table_name=settings.users_table_name,
                region_name=settings.aws_region,
                endpoint_url=settings.database_url
            ),
            DynamoDBProductStore(
                table_name=settings.products_table_name,
                region_name=settings.aws_region,
                endpoint_url=settings.database_url
            ),
        )

    return InMemoryUserStore(), InMemoryProductStore()


__all__ = ["ProductStore", "UserStore", "build_stores"]
