#!/usr/bin/env python3
"""
Script: create_tables.py
Description: Provision the DynamoDB tables used by the Catalog API.

Creates the users table (with its ApiKeyIndex GSI) and the products
table named in settings. Point DATABASE_URL at DynamoDB Local to
provision a local copy.

Usage:
    python scripts/create_tables.py
    python scripts/create_tables.py --endpoint-url http://localhost:8001
"""

import argparse
import sys

from botocore.exceptions import ClientError

from catalog_api.config.settings import settings
from catalog_api.storage.dynamodb import create_tables
from catalog_api.utils.logger import get_logger

logger = get_logger(__name__)


def main():
    """Main script execution."""
    parser = argparse.ArgumentParser(
        description="Create the DynamoDB tables for the Catalog API"
    )
    parser.add_argument(
        '--endpoint-url',
        type=str,
        default=settings.database_url,
        help='DynamoDB endpoint (default: DATABASE_URL)'
    )
    parser.add_argument(
        '--region',
        type=str,
        default=settings.aws_region,
        help='AWS region (default: AWS_REGION)'
    )
    args = parser.parse_args()

    try:
        create_tables(
            users_table_name=settings.users_table_name,
            products_table_name=settings.products_table_name,
            region_name=args.region,
            endpoint_url=args.endpoint_url
        )
    except ClientError as e:
        logger.error(
            "Failed to create tables",
            error_code=e.response['Error']['Code'],
            error_message=e.response['Error']['Message']
        )
        sys.exit(1)

    print(f"Created tables: {settings.users_table_name}, {settings.products_table_name}")


if __name__ == "__main__":
    main()
