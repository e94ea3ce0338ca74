"""Shared table binding for the DynamoDB repositories."""

from mypy_boto3_dynamodb.service_resource import DynamoDBServiceResource, Table


class TableRepository:
    """Binds a repository to one DynamoDB table keyed by ``id``."""

    def __init__(self, dynamodb_resource: DynamoDBServiceResource, table_name: str) -> None:
        """Bind to ``table_name``.

        Args:
            dynamodb_resource: Boto3 DynamoDB resource
            table_name: Name of the DynamoDB table
        """
        self.dynamodb = dynamodb_resource
        self.table_name = table_name
        self.table: Table = dynamodb_resource.Table(table_name)
