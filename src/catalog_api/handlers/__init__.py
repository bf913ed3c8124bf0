"""
Module: handlers
Description: Package initialization for API endpoint handlers.

This package contains FastAPI route handlers for the Catalog API:
- info: welcome text, HTML info page and health check
- users: user registration
- products: key-gated product CRUD

All handlers use dependency injection for settings and stores.
"""

__all__ = []
