"""
Module: products.py
Description: Product CRUD handlers.

Implements the product endpoints of the Catalog API. Every route sits
behind the credential gate, declared once on the router.

- GET    /api/products         list all products
- GET    /api/products/{id}    fetch one product
- POST   /api/products         create a product
- PUT    /api/products/{id}    partially update a product
- DELETE /api/products/{id}    delete a product

Path ids are parsed leniently (leading integer, e.g. "12abc" -> 12);
anything without a leading integer matches no product and yields 404.

Dependencies: FastAPI, re, typing
Author: Catalog API Team
"""

import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from fastapi import status as status_codes

from catalog_api.auth.gate import require_api_key
from catalog_api.dependencies import get_product_store
from catalog_api.errors import InvalidInput, NotFound
from catalog_api.models.product import Product
from catalog_api.models.request import CreateProductRequest, UpdateProductRequest
from catalog_api.models.response import ErrorResponse
from catalog_api.storage.base import ProductStore
from catalog_api.utils.logger import get_logger

router = APIRouter(
    prefix="/api/products",
    tags=["products"],
    dependencies=[Depends(require_api_key)],
    responses={403: {"model": ErrorResponse}}
)
logger = get_logger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_product_id(raw: str) -> Optional[int]:
    """
    Parse a path id the lenient way.

    Args:
        raw: Path segment as received

    Returns:
        The leading integer, or None when the segment has none

    Example:
        >>> parse_product_id("7")
        7
        >>> parse_product_id("12abc")
        12
        >>> parse_product_id("abc") is None
        True
    """
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


async def _require_product(product_store: ProductStore, raw_id: str) -> Product:
    product_id = parse_product_id(raw_id)
    product = await product_store.get_product(product_id) if product_id is not None else None
    if product is None:
        raise NotFound()
    return product


@router.get("", response_model=List[Product])
async def list_products(
    product_store: ProductStore = Depends(get_product_store)
) -> List[Product]:
    """Return every product in insertion order, unfiltered."""
    return await product_store.list_products()


@router.get("/{product_id}", response_model=Product, responses={404: {"model": ErrorResponse}})
async def get_product(
    product_id: str,
    product_store: ProductStore = Depends(get_product_store)
) -> Product:
    """Return one product by id."""
    return await _require_product(product_store, product_id)


@router.post(
    "",
    status_code=status_codes.HTTP_201_CREATED,
    response_model=Product,
    responses={400: {"model": ErrorResponse}}
)
async def create_product(
    request: CreateProductRequest,
    product_store: ProductStore = Depends(get_product_store)
) -> Product:
    """
    Create a product.

    Both name and price are required; an empty name or a zero price
    counts as missing.

    Example:
        POST /api/products
        {"name": "Widget", "price": 10}

        Response (201 Created):
        {"id": 1, "name": "Widget", "price": 10}
    """
    if not request.is_complete():
        raise InvalidInput("Product name and price are required")

    product = await product_store.create_product(name=request.name, price=request.price)

    logger.info("Product created", product_id=product.id)
    return product


@router.put(
    "/{product_id}",
    response_model=Product,
    responses={404: {"model": ErrorResponse}}
)
async def update_product(
    product_id: str,
    request: UpdateProductRequest,
    product_store: ProductStore = Depends(get_product_store)
) -> Product:
    """
    Partially update a product.

    Only truthy fields are applied; an empty name or a zero price is
    ignored, so {"price": 0} leaves the price unchanged.
    """
    product = await _require_product(product_store, product_id)

    changes = request.changes()
    updated = await product_store.update_product(product.id, changes)
    if updated is None:
        raise NotFound()

    logger.info("Product updated", product_id=product.id, fields=sorted(changes))
    return updated


@router.delete(
    "/{product_id}",
    status_code=status_codes.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}}
)
async def delete_product(
    product_id: str,
    product_store: ProductStore = Depends(get_product_store)
) -> Response:
    """Delete a product; 204 with an empty body on success."""
    parsed_id = parse_product_id(product_id)
    if parsed_id is None or not await product_store.delete_product(parsed_id):
        raise NotFound()

    logger.info("Product deleted", product_id=parsed_id)
    return Response(status_code=status_codes.HTTP_204_NO_CONTENT)
