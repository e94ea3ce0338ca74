"""DynamoDB repository classes for catalog models.

Each catalog collection (products, services, news) lives in its own table with
``id`` as partition key. Following the rest of the service, expected failures
are logged and reported with simple return values (None/False/empty list)
rather than exceptions.
"""

import logging
from typing import Any, Generic, TypeVar

from botocore.exceptions import ClientError

from rural_connect.models.catalog_models import NewsItem, Product, Service
from rural_connect.repositories.base_repository import TableRepository

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", Product, Service, NewsItem)


class CatalogRepository(TableRepository, Generic[ModelT]):
    """Base repository for a catalog table keyed by ``id``.

    Subclasses set ``model_class`` and ``collection_name``.
    """

    model_class: Any
    collection_name: str = "catalog"

    def _scan_items(self, **scan_kwargs: Any) -> list[dict[str, Any]]:
        """Scan the whole table, following pagination.

        Raises:
            ClientError: Propagated to callers, which decide how to report it
        """
        items: list[dict[str, Any]] = []
        response = self.table.scan(**scan_kwargs)
        items.extend(response.get("Items", []))

        while "LastEvaluatedKey" in response:
            response = self.table.scan(ExclusiveStartKey=response["LastEvaluatedKey"], **scan_kwargs)
            items.extend(response.get("Items", []))

        return items

    def list_all(self) -> list[ModelT]:
        """List every record in display order.

        Returns:
            list: Records sorted by sort_order (empty list on error)
        """
        try:
            items = self._scan_items()
        except ClientError as e:
            logger.error(f"Failed to list {self.collection_name}: {e}")  # pragma: no cover
            return []

        records = [self.model_class.from_dynamodb_item(item) for item in items]
        return sorted(records, key=lambda record: record.sort_order)

    def get(self, record_id: str) -> ModelT | None:
        """Retrieve a single record by ID.

        Args:
            record_id: Record identifier

        Returns:
            The record if found, None otherwise
        """
        try:
            response = self.table.get_item(Key={"id": record_id})
        except ClientError as e:
            logger.error(f"Failed to get {self.collection_name} record {record_id}: {e}")  # pragma: no cover
            return None

        if "Item" not in response:
            return None

        return self.model_class.from_dynamodb_item(response["Item"])

    def delete_all(self) -> int | None:
        """Delete every record in the table.

        Returns:
            Number of deleted records, or None if the delete failed
        """
        try:
            keys = self._scan_items(ProjectionExpression="id")
            with self.table.batch_writer() as batch:
                for key in keys:
                    batch.delete_item(Key={"id": key["id"]})
        except ClientError as e:
            logger.error(f"Failed to clear {self.collection_name}: {e}")  # pragma: no cover
            return None

        return len(keys)

    def insert_many(self, records: list[ModelT]) -> bool:
        """Insert records in a batch.

        Args:
            records: Records to insert

        Returns:
            bool: True if all writes succeeded, False otherwise
        """
        try:
            with self.table.batch_writer() as batch:
                for record in records:
                    batch.put_item(Item=record.to_dynamodb_item())
            return True

        except ClientError as e:
            logger.error(f"Failed to insert {self.collection_name}: {e}")  # pragma: no cover
            return False

    def replace_all(self, records: list[ModelT]) -> bool:
        """Replace the table contents with the given records.

        The delete and the insert are separate batches; a failed insert leaves
        the table empty or partially filled.

        Args:
            records: Records that should make up the table afterwards

        Returns:
            bool: True if both the delete and the insert succeeded
        """
        deleted = self.delete_all()
        if deleted is None:
            return False

        logger.info(f"Removed {deleted} existing {self.collection_name} records")
        return self.insert_many(records)


class ProductRepository(CatalogRepository[Product]):
    """Repository for product records."""

    model_class = Product
    collection_name = "products"


class ServiceRepository(CatalogRepository[Service]):
    """Repository for service listing records."""

    model_class = Service
    collection_name = "services"


class NewsRepository(CatalogRepository[NewsItem]):
    """Repository for news records."""

    model_class = NewsItem
    collection_name = "news"
