"""Environment-driven settings shared by the API and the seed script."""

import logging
import os
from typing import Any

import boto3

logger = logging.getLogger(__name__)

DEFAULT_TABLES = {
    "products": "rural-connect-products",
    "services": "rural-connect-services",
    "news": "rural-connect-news",
    "bookings": "rural-connect-bookings",
    "users": "rural-connect-users",
    "contacts": "rural-connect-contacts",
}


def get_dynamodb_resource() -> Any:
    """Create DynamoDB resource with appropriate configuration.

    DYNAMODB_ENDPOINT selects a local DynamoDB; otherwise boto3's default
    credential chain is used against AWS_REGION.

    Returns:
        Boto3 DynamoDB resource configured for environment
    """
    endpoint_url = os.getenv("DYNAMODB_ENDPOINT")
    region = os.getenv("AWS_REGION", "us-east-1")

    if endpoint_url:
        # Local DynamoDB accepts any credentials
        logger.info(f"Using local DynamoDB at {endpoint_url}")
        return boto3.resource(
            "dynamodb",
            endpoint_url=endpoint_url,
            region_name=region,
            aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID", "dummy"),
            aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY", "dummy"),
        )

    logger.info(f"Using AWS DynamoDB in region {region}")
    return boto3.resource("dynamodb", region_name=region)


def get_table_name(collection: str) -> str:
    """Table name for a collection, overridable with DYNAMODB_<COLLECTION>_TABLE."""
    return os.getenv(f"DYNAMODB_{collection.upper()}_TABLE", DEFAULT_TABLES[collection])
