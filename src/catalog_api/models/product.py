"""
Module: product.py
Description: Product record model for the Catalog API.

Key Components:
- Product: id, name and price of a catalog entry
- Price: int-or-float number, integers stay integers on the wire

Dependencies: pydantic, typing
Author: Catalog API Team
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

Price = Union[int, float]


class Product(BaseModel):
    """
    Product record held by the product registry.

    Attributes:
        id: Positive identifier, registry length + 1 at creation
        name: Display name (non-empty)
        price: Numeric price
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., ge=1, description="Product identifier")
    name: str = Field(..., min_length=1, description="Product name")
    price: Price = Field(..., description="Product price")
