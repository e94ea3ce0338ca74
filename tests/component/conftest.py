"""Shared fixtures for component tests."""

import pytest

from tests.component.fake_dynamodb import FakeDynamoDBResource


@pytest.fixture
def dynamodb() -> FakeDynamoDBResource:
    """Fresh in-memory DynamoDB resource."""
    return FakeDynamoDBResource()
