"""Seed script replacing the services, products, and news tables.

Run with ``python src/seed.py``. Exits with status 1 on any failure; tables
replaced before the failure keep their new contents.
"""

import logging
import os
import sys

from botocore.exceptions import BotoCoreError, ClientError

from rural_connect.observability import configure_logging
from rural_connect.repositories.catalog_repositories import (
    NewsRepository,
    ProductRepository,
    ServiceRepository,
)
from rural_connect.services.seed_service import SeedError, SeedService
from rural_connect.settings import get_dynamodb_resource, get_table_name

logger = logging.getLogger(__name__)


def create_seed_service() -> SeedService:
    """Wire a SeedService against the configured DynamoDB tables."""
    dynamodb_resource = get_dynamodb_resource()

    return SeedService(
        service_repository=ServiceRepository(dynamodb_resource, get_table_name("services")),
        product_repository=ProductRepository(dynamodb_resource, get_table_name("products")),
        news_repository=NewsRepository(dynamodb_resource, get_table_name("news")),
    )


def main() -> int:
    """Seed the database.

    Returns:
        Process exit status
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    try:
        result = create_seed_service().seed_all()
    except (SeedError, ClientError, BotoCoreError) as e:
        logger.error(f"Seeding error: {e}")
        return 1

    logger.info(
        f"Seeded {result.services} services, {result.products} products, {result.news} news items"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
