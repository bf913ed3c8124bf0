"""
Module: dependencies.py
Description: FastAPI dependencies resolving per-application state.

create_app() stores settings and the two registries on app.state;
these helpers hand them to handlers. Tests override them through
app.dependency_overrides or by passing stores to create_app().

Dependencies: FastAPI
Author: Catalog API Team
"""

from fastapi import Request

from catalog_api.config.settings import Settings
from catalog_api.storage.base import ProductStore, UserStore


def get_settings(request: Request) -> Settings:
    """Dependency returning the application's settings."""
    return request.app.state.settings


def get_user_store(request: Request) -> UserStore:
    """Dependency returning the user registry."""
    return request.app.state.user_store


def get_product_store(request: Request) -> ProductStore:
    """Dependency returning the product registry."""
    return request.app.state.product_store
