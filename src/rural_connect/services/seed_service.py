"""Seed service for replacing catalog collections with the literal seed data."""

import logging
import uuid
from dataclasses import dataclass
from typing import Any

from rural_connect.data.seed_data import SEED_NEWS, SEED_PRODUCTS, SEED_SERVICES
from rural_connect.models.catalog_models import NewsItem, Product, Service
from rural_connect.observability.decorators import traced
from rural_connect.observability.metrics import record_seeded_records
from rural_connect.repositories.catalog_repositories import (
    NewsRepository,
    ProductRepository,
    ServiceRepository,
)

logger = logging.getLogger(__name__)


class SeedError(Exception):
    """Raised when a collection could not be replaced."""

    def __init__(self, collection: str) -> None:
        super().__init__(f"Failed to seed {collection}")
        self.collection = collection


@dataclass
class SeedResult:
    """Number of records written per collection."""

    services: int
    products: int
    news: int


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def build_services(records: list[dict[str, Any]] = SEED_SERVICES) -> list[Service]:
    """Build Service models with fresh ids in list order."""
    return [
        Service(id=_new_id("svc"), sort_order=position, **record)
        for position, record in enumerate(records)
    ]


def build_products(records: list[dict[str, Any]] = SEED_PRODUCTS) -> list[Product]:
    """Build Product models with fresh ids in list order."""
    return [
        Product(id=_new_id("prod"), sort_order=position, **record)
        for position, record in enumerate(records)
    ]


def build_news(records: list[dict[str, Any]] = SEED_NEWS) -> list[NewsItem]:
    """Build NewsItem models with fresh ids in list order."""
    return [
        NewsItem(id=_new_id("news"), sort_order=position, **record)
        for position, record in enumerate(records)
    ]


class SeedService:
    """Replaces the services, products, and news collections.

    Collections are replaced one after another. There is no rollback: when a
    later collection fails, the earlier ones keep their new contents and the
    remaining ones keep their old contents.
    """

    def __init__(
        self,
        service_repository: ServiceRepository,
        product_repository: ProductRepository,
        news_repository: NewsRepository,
    ) -> None:
        """Initialize the SeedService.

        Args:
            service_repository: Repository for the services table
            product_repository: Repository for the products table
            news_repository: Repository for the news table
        """
        self.service_repository = service_repository
        self.product_repository = product_repository
        self.news_repository = news_repository

    def seed_services(self) -> int:
        """Replace all services with the seed list.

        Returns:
            Number of services inserted

        Raises:
            SeedError: If the table could not be replaced
        """
        services = build_services()
        if not self.service_repository.replace_all(services):
            raise SeedError("services")

        record_seeded_records("services", len(services))
        logger.info(f"Services seeded successfully ({len(services)} records)")
        return len(services)

    def seed_products(self) -> int:
        """Replace all products with the seed list.

        Returns:
            Number of products inserted

        Raises:
            SeedError: If the table could not be replaced
        """
        products = build_products()
        if not self.product_repository.replace_all(products):
            raise SeedError("products")

        record_seeded_records("products", len(products))
        logger.info(f"Products seeded successfully ({len(products)} records)")
        return len(products)

    def seed_news(self) -> int:
        """Replace all news items with the seed list.

        Returns:
            Number of news items inserted

        Raises:
            SeedError: If the table could not be replaced
        """
        news = build_news()
        if not self.news_repository.replace_all(news):
            raise SeedError("news")

        record_seeded_records("news", len(news))
        logger.info(f"News seeded successfully ({len(news)} records)")
        return len(news)

    @traced("seed_database", service_name="rural-connect")
    def seed_all(self) -> SeedResult:
        """Seed services, then products, then news.

        Returns:
            SeedResult with per-collection counts

        Raises:
            SeedError: On the first collection that fails
        """
        logger.info("Starting database seeding...")

        result = SeedResult(
            services=self.seed_services(),
            products=self.seed_products(),
            news=self.seed_news(),
        )

        logger.info("Database seeding completed successfully")
        return result
