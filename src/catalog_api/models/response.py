"""
Module: response.py
Description: API response models for the Catalog API.

Dependencies: pydantic
Author: Catalog API Team
"""

from pydantic import BaseModel, ConfigDict, Field


class RegisterUserResponse(BaseModel):
    """
    Response returned after a successful registration.

    The key is serialized under the hyphenated name "api-key".
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., description="Human-readable status message")
    api_key: str = Field(..., alias="api-key", description="Newly minted API key")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    message: str = Field(..., description="Human-readable error description")
