"""
Module: auth
Description: Package initialization for authentication.

This package contains authentication components:
- passwords: PBKDF2 password hashing and verification
- api_key: API key minting and request extraction
- gate: FastAPI dependency guarding product routes
- registration: user registration service

All authentication logic is centralized here for security and maintainability.
"""

__all__ = []
