"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains all data models used by the Catalog API:
- Product, User: Registry records
- Request models: registration and product payloads
- Response models: registration result and error body

All models are exported here for convenient importing.
"""

from .product import Product
from .user import User
from .request import CreateProductRequest, RegisterUserRequest, UpdateProductRequest
from .response import ErrorResponse, RegisterUserResponse

__all__ = [
    "Product",
    "User",
    "CreateProductRequest",
    "RegisterUserRequest",
    "UpdateProductRequest",
    "ErrorResponse",
    "RegisterUserResponse",
]
