"""
Module: conftest.py
Description: Shared pytest fixtures for Catalog API tests.

Provides test settings, in-memory and moto-backed DynamoDB stores,
a fresh application and TestClient per test, and a registered API key.
"""

import pytest
from fastapi.testclient import TestClient
from moto import mock_aws
from pydantic_settings import SettingsConfigDict

from catalog_api.config.settings import Settings
from catalog_api.main import create_app
from catalog_api.storage.dynamodb import DynamoDBProductStore, DynamoDBUserStore, create_tables
from catalog_api.storage.memory import InMemoryProductStore, InMemoryUserStore


class TestSettings(Settings):
    """Test settings that ignore .env files and hash cheaply."""

    __test__ = False

    model_config = SettingsConfigDict(
        env_file=None,  # Disable .env file loading for tests
        case_sensitive=False,
        extra="ignore"
    )


@pytest.fixture
def test_settings():
    """
    Provide test configuration settings.

    Uses a low PBKDF2 work factor so registration stays fast.
    """
    return TestSettings(
        app_name="Catalog API Test",
        app_version="0.1.0-test",
        log_level="WARNING",
        stage="test",
        storage_backend="memory",
        database_url=None,
        aws_region="us-east-1",
        users_table_name="test-users-table",
        products_table_name="test-products-table",
        password_hash_iterations=1000,
        api_key_prefix="api-key-",
    )


@pytest.fixture
def user_store():
    return InMemoryUserStore()


@pytest.fixture
def product_store():
    return InMemoryProductStore()


@pytest.fixture
def app(test_settings, user_store, product_store):
    """Fresh application wired to the in-memory stores of this test."""
    return create_app(settings=test_settings, user_store=user_store, product_store=product_store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def api_key(client):
    """Register alice/pw1 and return the minted API key."""
    response = client.post("/api/users/register", json={"username": "alice", "password": "pw1"})
    assert response.status_code == 201
    return response.json()["api-key"]


@pytest.fixture
def auth_headers(api_key):
    return {"api-key": api_key}


@pytest.fixture
def sample_products():
    return [
        {"name": "Widget", "price": 10},
        {"name": "Gadget", "price": 20},
    ]


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake AWS credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def mock_dynamodb(aws_credentials, test_settings):
    """
    Create mock DynamoDB tables for users and products.

    Uses moto to mock AWS DynamoDB with the same schema as production.
    """
    with mock_aws():
        create_tables(
            users_table_name=test_settings.users_table_name,
            products_table_name=test_settings.products_table_name,
            region_name=test_settings.aws_region
        )
        yield


@pytest.fixture
def dynamodb_user_store(mock_dynamodb, test_settings):
    return DynamoDBUserStore(
        table_name=test_settings.users_table_name,
        region_name=test_settings.aws_region
    )


@pytest.fixture
def dynamodb_product_store(mock_dynamodb, test_settings):
    return DynamoDBProductStore(
        table_name=test_settings.products_table_name,
        region_name=test_settings.aws_region
    )
