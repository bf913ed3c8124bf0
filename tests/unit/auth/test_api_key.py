"""
Module: test_api_key.py
Description: Unit tests for API key minting and extraction.
"""

from catalog_api.auth.api_key import extract_api_key, generate_api_key


class TestGenerateApiKey:
    """Test cases for API key minting."""

    def test_default_prefix(self):
        key = generate_api_key()

        assert key.startswith("api-key-")
        assert len(key) > len("api-key-") + 32

    def test_custom_prefix(self):
        assert generate_api_key("sk_").startswith("sk_")

    def test_keys_are_unique(self):
        keys = {generate_api_key() for _ in range(200)}

        assert len(keys) == 200


class TestExtractApiKey:
    """Test cases for choosing the request credential."""

    def test_header_wins(self):
        assert extract_api_key("from-header", "from-query") == "from-header"

    def test_query_fallback(self):
        assert extract_api_key(None, "from-query") == "from-query"

    def test_empty_header_falls_back_to_query(self):
        assert extract_api_key("", "from-query") == "from-query"

    def test_missing(self):
        assert extract_api_key(None, None) is None
        assert extract_api_key("", "") is None
