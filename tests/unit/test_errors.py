"""
Module: test_errors.py
Description: Unit tests for the domain error taxonomy.
"""

import pytest

from catalog_api.errors import CatalogError, Conflict, Forbidden, InvalidInput, NotFound


@pytest.mark.parametrize("error_class,status_code,message", [
    (Conflict, 400, "User already exists"),
    (InvalidInput, 400, "Product name and price are required"),
    (Forbidden, 403, "Invalid API key"),
    (NotFound, 404, "Product not found"),
])
def test_default_message_when_none_given(error_class, status_code, message):
    for error in (error_class(), error_class(None)):
        assert error.status_code == status_code
        assert error.message == message
        assert str(error) == message


def test_custom_message():
    error = Forbidden("API key is required")

    assert isinstance(error, CatalogError)
    assert error.message == "API key is required"
