"""
Package: catalog_api
Description: Product catalog API with API-key authentication.

Exposes user registration and key-gated CRUD over a product catalog.
The FastAPI application lives in catalog_api.main.
"""

__version__ = "0.1.0"
