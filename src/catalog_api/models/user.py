"""
Module: user.py
Description: User record model for the Catalog API.

User records are internal: they are never serialized into a response,
and neither the password hash nor the API key is ever logged.

Dependencies: pydantic
Author: Catalog API Team
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    Registered user.

    Attributes:
        username: Unique key within the user registry
        password_hash: PBKDF2 hash string (see auth.passwords)
        api_key: Opaque credential minted at registration
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., description="Unique username")
    password_hash: str = Field(..., description="One-way password hash")
    api_key: str = Field(..., description="Opaque API key")
