"""
Module: dynamodb.py
Description: DynamoDB-backed user and product registries.

Persistent implementations of the store interfaces. Users are keyed by
username with an ApiKeyIndex GSI for key lookups. Products are keyed by
numeric id. A new product takes id item count + 1; ids are not
reclaimed, so after a delete a new product can land on an existing id
and replace that item.

Key Components:
- DynamoDBUserStore: conditional puts keep usernames unique
- DynamoDBProductStore: CRUD with conditional updates/deletes
- USERS_TABLE_SCHEMA / PRODUCTS_TABLE_SCHEMA: create_table() arguments
- create_tables(): provision both tables (local development, tests)

Dependencies: boto3, botocore, decimal, typing
Author: Catalog API Team
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import ClientError

from catalog_api.errors import Conflict, InvalidInput
from catalog_api.models.product import Price, Product
from catalog_api.models.user import User
from catalog_api.storage.base import ProductStore, UserStore
from catalog_api.utils.logger import get_logger

logger = get_logger(__name__)

API_KEY_INDEX = 'ApiKeyIndex'

USERS_TABLE_SCHEMA: Dict[str, Any] = {
    'KeySchema': [
        {'AttributeName': 'username', 'KeyType': 'HASH'}
    ],
    'AttributeDefinitions': [
        {'AttributeName': 'username', 'AttributeType': 'S'},
        {'AttributeName': 'api_key', 'AttributeType': 'S'}
    ],
    'GlobalSecondaryIndexes': [
        {
            'IndexName': API_KEY_INDEX,
            'KeySchema': [
                {'AttributeName': 'api_key', 'KeyType': 'HASH'}
            ],
            'Projection': {'ProjectionType': 'ALL'}
        }
    ],
    'BillingMode': 'PAY_PER_REQUEST'
}

PRODUCTS_TABLE_SCHEMA: Dict[str, Any] = {
    'KeySchema': [
        {'AttributeName': 'id', 'KeyType': 'HASH'}
    ],
    'AttributeDefinitions': [
        {'AttributeName': 'id', 'AttributeType': 'N'}
    ],
    'BillingMode': 'PAY_PER_REQUEST'
}


def _dynamodb_resource(region_name: Optional[str], endpoint_url: Optional[str]):
    return boto3.resource('dynamodb', region_name=region_name, endpoint_url=endpoint_url)


def _to_decimal(value: Price) -> Decimal:
    # str() first so floats keep their short repr instead of binary noise
    return Decimal(str(value))


def _from_decimal(value: Decimal) -> Price:
    if value.as_tuple().exponent >= 0:
        return int(value)
    return float(value)


def _item_to_product(item: Dict[str, Any]) -> Product:
    return Product(
        id=int(item['id']),
        name=item['name'],
        price=_from_decimal(item['price'])
    )


def _is_conditional_failure(error: ClientError) -> bool:
    return error.response['Error']['Code'] == 'ConditionalCheckFailedException'


def _count_items(table) -> int:
    kwargs: Dict[str, Any] = {'Select': 'COUNT'}
    total = 0
    while True:
        response = table.scan(**kwargs)
        total += response.get('Count', 0)
        if not response.get('LastEvaluatedKey'):
            return total
        kwargs['ExclusiveStartKey'] = response['LastEvaluatedKey']


def create_tables(
    users_table_name: str,
    products_table_name: str,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None
) -> None:
    """
    Create the users and products tables and wait until they are active.

    Args:
        users_table_name: Name for the users table
        products_table_name: Name for the products table
        region_name: AWS region
        endpoint_url: Optional endpoint (DynamoDB Local)

    Raises:
        ClientError: If a table already exists or creation fails
    """
    dynamodb = _dynamodb_resource(region_name, endpoint_url)
    for table_name, schema in (
        (users_table_name, USERS_TABLE_SCHEMA),
        (products_table_name, PRODUCTS_TABLE_SCHEMA),
    ):
        table = dynamodb.create_table(TableName=table_name, **schema)
        table.wait_until_exists()
        logger.info("DynamoDB table created", table_name=table_name)


class DynamoDBUserStore(UserStore):
    """
    DynamoDB user registry.

    Attributes:
        table_name: Name of the DynamoDB users table
        dynamodb: boto3 DynamoDB resource
        table: boto3 DynamoDB table resource
    """

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None
    ):
        """
        Initialize DynamoDB user store.

        Args:
            table_name: Name of the DynamoDB users table
            region_name: AWS region
            endpoint_url: Optional endpoint override (connection string)

        Raises:
            ValueError: If table_name is empty or invalid
        """
        if not table_name or not isinstance(table_name, str):
            raise ValueError("table_name must be a non-empty string")

        self.table_name = table_name
        self.dynamodb = _dynamodb_resource(region_name, endpoint_url)
        self.table = self.dynamodb.Table(table_name)

        logger.info("DynamoDB user store initialized", table_name=table_name)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        # Key attributes cannot be empty strings in DynamoDB
        if not username:
            return None

        try:
            response = self.table.get_item(Key={'username': username})
        except ClientError as e:
            logger.error(
                "Failed to retrieve user from DynamoDB",
                username=username,
                table_name=self.table_name,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        item = response.get('Item')
        return User(**item) if item else None

    async def get_user_by_api_key(self, api_key: str) -> Optional[User]:
        if not api_key:
            return None

        try:
            response = self.table.query(
                IndexName=API_KEY_INDEX,
                KeyConditionExpression='#api_key = :api_key',
                ExpressionAttributeNames={'#api_key': 'api_key'},
                ExpressionAttributeValues={':api_key': api_key},
                Limit=1
            )
        except ClientError as e:
            logger.error(
                "Failed to query user by API key",
                table_name=self.table_name,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        items = response.get('Items', [])
        return User(**items[0]) if items else None

    async def put_user(self, user: User) -> None:
        if not user.username:
            raise InvalidInput("Username is required")

        try:
            self.table.put_item(
                Item=user.model_dump(),
                ConditionExpression='attribute_not_exists(#username)',
                ExpressionAttributeNames={'#username': 'username'}
            )
        except ClientError as e:
            if _is_conditional_failure(e):
                raise Conflict() from e
            logger.error(
                "Failed to store user in DynamoDB",
                username=user.username,
                table_name=self.table_name,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        logger.info("User stored in DynamoDB", username=user.username, table_name=self.table_name)

    async def count_users(self) -> int:
        return _count_items(self.table)


class DynamoDBProductStore(ProductStore):
    """
    DynamoDB product registry.

    Attributes:
        table_name: Name of the DynamoDB products table
        dynamodb: boto3 DynamoDB resource
        table: boto3 DynamoDB table resource
    """

    def __init__(
        self,
        table_name: str,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None
    ):
        """
        Initialize DynamoDB product store.

        Args:
            table_name: Name of the DynamoDB products table
            region_name: AWS region
            endpoint_url: Optional endpoint override (connection string)

        Raises:
            ValueError: If table_name is empty or invalid
        """
        if not table_name or not isinstance(table_name, str):
            raise ValueError("table_name must be a non-empty string")

        self.table_name = table_name
        self.dynamodb = _dynamodb_resource(region_name, endpoint_url)
        self.table = self.dynamodb.Table(table_name)

        logger.info("DynamoDB product store initialized", table_name=table_name)

    def _log_client_error(self, message: str, error: ClientError, **context) -> None:
        logger.error(
            message,
            table_name=self.table_name,
            error_code=error.response['Error']['Code'],
            error_message=error.response['Error']['Message'],
            **context
        )

    def _next_id(self) -> int:
        return _count_items(self.table) + 1

    async def list_products(self) -> List[Product]:
        """
        Return every product ordered by id.

        Scans the whole table and sorts, since ids are assigned in
        insertion order.
        """
        kwargs: Dict[str, Any] = {}
        products: List[Product] = []

        try:
            while True:
                response = self.table.scan(**kwargs)
                products.extend(_item_to_product(item) for item in response.get('Items', []))
                if not response.get('LastEvaluatedKey'):
                    break
                kwargs['ExclusiveStartKey'] = response['LastEvaluatedKey']
        except ClientError as e:
            self._log_client_error("Failed to scan products", e)
            raise

        products.sort(key=lambda p: p.id)
        return products

    async def get_product(self, product_id: int) -> Optional[Product]:
        if product_id < 1:
            return None

        try:
            response = self.table.get_item(Key={'id': product_id})
        except ClientError as e:
            self._log_client_error("Failed to retrieve product", e, product_id=product_id)
            raise

        item = response.get('Item')
        return _item_to_product(item) if item else None

    async def create_product(self, name: str, price: Price) -> Product:
        try:
            product = Product(id=self._next_id(), name=name, price=price)
            self.table.put_item(
                Item={'id': product.id, 'name': product.name, 'price': _to_decimal(product.price)}
            )
        except ClientError as e:
            self._log_client_error("Failed to store product", e)
            raise

        logger.info("Product stored in DynamoDB", product_id=product.id, table_name=self.table_name)
        return product

    async def update_product(self, product_id: int, changes: Dict[str, Any]) -> Optional[Product]:
        if product_id < 1:
            return None
        if not changes:
            return await self.get_product(product_id)

        names = {'#id': 'id'}
        values: Dict[str, Any] = {}
        assignments = []
        for field, value in changes.items():
            names[f'#{field}'] = field
            values[f':{field}'] = _to_decimal(value) if field == 'price' else value
            assignments.append(f'#{field} = :{field}')

        try:
            response = self.table.update_item(
                Key={'id': product_id},
                UpdateExpression='SET ' + ', '.join(assignments),
                ConditionExpression='attribute_exists(#id)',
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ReturnValues='ALL_NEW'
            )
        except ClientError as e:
            if _is_conditional_failure(e):
                return None
            self._log_client_error("Failed to update product", e, product_id=product_id)
            raise

        return _item_to_product(response['Attributes'])

    async def delete_product(self, product_id: int) -> bool:
        if product_id < 1:
            return False

        try:
            self.table.delete_item(
                Key={'id': product_id},
                ConditionExpression='attribute_exists(#id)',
                ExpressionAttributeNames={'#id': 'id'}
            )
        except ClientError as e:
            if _is_conditional_failure(e):
                return False
            self._log_client_error("Failed to delete product", e, product_id=product_id)
            raise

        logger.info("Product deleted from DynamoDB", product_id=product_id, table_name=self.table_name)
        return True
