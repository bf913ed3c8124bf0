"""
Module: settings.py
Description: Application configuration using pydantic-settings.

Configures all application settings from environment variables with
validation and defaults. Supports .env files for local development.

Dependencies: pydantic, pydantic-settings
Author: Catalog API Team
"""

import re
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_BACKENDS = ("memory", "dynamodb")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="Catalog API", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    log_level: str = Field(default="INFO", description="Logging level")
    stage: str = Field(default="dev", description="Deployment stage")

    # Storage settings
    storage_backend: str = Field(
        default="memory",
        description="Registry backend: 'memory' (process lifetime) or 'dynamodb'"
    )
    database_url: Optional[str] = Field(
        default=None,
        description="Database connection string (DynamoDB endpoint URL)"
    )
    aws_region: str = Field(default="us-east-1", description="AWS region")
    users_table_name: str = Field(
        default="catalog-users",
        description="Name of the DynamoDB users table"
    )
    products_table_name: str = Field(
        default="catalog-products",
        description="Name of the DynamoDB products table"
    )

    # Security settings
    password_hash_iterations: int = Field(
        default=100000,
        ge=1000,
        le=1000000,
        description="PBKDF2 work factor for password hashing"
    )
    api_key_prefix: str = Field(
        default="api-key-",
        min_length=1,
        description="Prefix prepended to minted API keys"
    )

    @field_validator('users_table_name', 'products_table_name')
    @classmethod
    def validate_table_names(cls, v: str) -> str:
        """Validate DynamoDB table names."""
        if not v or not isinstance(v, str):
            raise ValueError("Table name must be a non-empty string")

        if not re.match(r'^[a-zA-Z0-9_.-]{3,255}$', v):
            raise ValueError(
                "Table name must be 3-255 letters, numbers, dots, hyphens, or underscores"
            )

        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @field_validator('storage_backend')
    @classmethod
    def validate_storage_backend(cls, v: str) -> str:
        """Validate the storage backend name."""
        backend = v.strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(f"storage_backend must be one of: {', '.join(STORAGE_BACKENDS)}")
        return backend

    @field_validator('database_url')
    @classmethod
    def validate_database_url(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank connection string as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()


# Global settings instance
settings = Settings()
