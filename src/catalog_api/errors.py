"""
Module: errors.py
Description: Domain error taxonomy for the Catalog API.

Every error carries the HTTP status it maps to and a human-readable
message. The application renders them as JSON {"message": ...}.

Key Components:
- CatalogError: Base class with status_code and message
- Conflict: Duplicate registration (400)
- InvalidInput: Missing or invalid product fields (400)
- Forbidden: Missing or invalid API key (403)
- NotFound: Unknown product id (404)

Author: Catalog API Team
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for errors that map onto a fixed HTTP status."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Conflict(CatalogError):
    """A user with the same username already exists."""

    status_code = 400
    default_message = "User already exists"


class InvalidInput(CatalogError):
    """Required fields are missing or carry unusable values."""

    status_code = 400
    default_message = "Product name and price are required"


class Forbidden(CatalogError):
    """The request carries no API key, or one nobody owns."""

    status_code = 403
    default_message = "Invalid API key"


class NotFound(CatalogError):
    status_code = 404
    default_message = "Product not found"
