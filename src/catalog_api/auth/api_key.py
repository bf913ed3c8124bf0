"""
Module: api_key.py
Description: API key minting and extraction.

Key Components:
- generate_api_key(): Mint a cryptographically random key
- extract_api_key(): Pick the credential out of header or query value

Dependencies: secrets, typing
Author: Catalog API Team
"""

import secrets
from typing import Optional

API_KEY_HEADER = "api-key"
API_KEY_QUERY_PARAM = "apikey"
API_KEY_TOKEN_BYTES = 32


def generate_api_key(prefix: str = "api-key-") -> str:
    """
    Generate a secure random API key.

    Args:
        prefix: Fixed prefix identifying the token as an API key

    Returns:
        API key in format: {prefix}{url-safe base64 token}

    Example:
        >>> generate_api_key()
        'api-key-Hq3...'
    """
    return f"{prefix}{secrets.token_urlsafe(API_KEY_TOKEN_BYTES)}"


def extract_api_key(header_value: Optional[str], query_value: Optional[str]) -> Optional[str]:
    """
    Choose the credential sent with a request.

    The header wins; an absent or empty header falls back to the query
    parameter. Empty values count as missing.

    Args:
        header_value: Value of the api-key header, if any
        query_value: Value of the apikey query parameter, if any

    Returns:
        The credential, or None when the request carries none
    """
    return header_value or query_value or None
