"""
Module: request.py
Description: API request models for the Catalog API.

Defines request models for incoming API calls. Product payloads keep
every field optional; a falsy value (empty string, zero) counts the
same as an absent one.

Key Components:
- RegisterUserRequest: POST /api/users/register
- CreateProductRequest: POST /api/products
- UpdateProductRequest: PUT /api/products/{id}

Dependencies: pydantic, typing
Author: Catalog API Team
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from catalog_api.models.product import Price


class RegisterUserRequest(BaseModel):
    """
    Request model for user registration.

    No format or strength rules apply; both fields only have to be strings.
    """

    username: str = Field(..., description="Desired username")
    password: str = Field(..., description="Plaintext password, hashed before storage")


class CreateProductRequest(BaseModel):
    """
    Request model for creating products.

    Attributes:
        name: Product name (required by the handler, must be non-empty)
        price: Product price (required by the handler, must be non-zero)
    """

    name: Optional[str] = Field(default=None, description="Product name")
    price: Optional[Price] = Field(default=None, description="Product price")

    def is_complete(self) -> bool:
        """True when both name and price carry a usable (truthy) value."""
        return bool(self.name) and bool(self.price)


class UpdateProductRequest(BaseModel):
    """
    Request model for partial product updates.

    Only truthy fields are applied. Absent, null, empty or zero values
    leave the stored field unchanged.
    """

    name: Optional[str] = Field(default=None, description="New product name")
    price: Optional[Price] = Field(default=None, description="New product price")

    def changes(self) -> Dict[str, Any]:
        """Return the fields that carry a truthy value."""
        return {field: value for field, value in self.model_dump().items() if value}
