"""Unit tests for booking, user, and contact repositories."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from rural_connect.models.booking_models import Booking, StoredContactMessage
from rural_connect.repositories.booking_repositories import (
    BookingRepository,
    ContactRepository,
    UserRepository,
)


def _client_error(operation: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "InternalServerError", "Message": "Server error"}}, operation
    )


@pytest.mark.unit
class TestBookingRepository:
    """Test suite for BookingRepository."""

    @pytest.fixture
    def mock_dynamodb(self) -> MagicMock:
        """Create a mock DynamoDB resource."""
        return MagicMock()

    @pytest.fixture
    def repository(self, mock_dynamodb: MagicMock) -> BookingRepository:
        """Create a BookingRepository with mocked DynamoDB."""
        return BookingRepository(dynamodb_resource=mock_dynamodb, table_name="test-bookings")

    def test_save_booking_success(
        self, repository: BookingRepository, mock_dynamodb: MagicMock, sample_booking: Booking
    ) -> None:
        """Test successfully saving a booking."""
        result = repository.save_booking(sample_booking)

        assert result is True
        mock_dynamodb.Table.return_value.put_item.assert_called_once_with(
            Item=sample_booking.to_dynamodb_item()
        )

    def test_save_booking_dynamodb_error(
        self, repository: BookingRepository, mock_dynamodb: MagicMock, sample_booking: Booking
    ) -> None:
        """Test that save returns False on DynamoDB error."""
        mock_dynamodb.Table.return_value.put_item.side_effect = _client_error("PutItem")

        assert repository.save_booking(sample_booking) is False

    def test_list_bookings_for_user(
        self, repository: BookingRepository, mock_dynamodb: MagicMock, sample_booking: Booking
    ) -> None:
        """Test listing bookings through the user_id GSI, newest first."""
        mock_dynamodb.Table.return_value.query.return_value = {
            "Items": [sample_booking.to_dynamodb_item()]
        }

        bookings = repository.list_bookings_for_user("user_123456")

        assert bookings == [sample_booking]
        call_kwargs = mock_dynamodb.Table.return_value.query.call_args.kwargs
        assert call_kwargs["IndexName"] == "user_id-index"
        assert call_kwargs["ExpressionAttributeValues"] == {":uid": "user_123456"}
        assert call_kwargs["ScanIndexForward"] is False

    def test_list_bookings_dynamodb_error(
        self, repository: BookingRepository, mock_dynamodb: MagicMock
    ) -> None:
        """Test that query errors return an empty list."""
        mock_dynamodb.Table.return_value.query.side_effect = _client_error("Query")

        assert repository.list_bookings_for_user("user_123456") == []


@pytest.mark.unit
class TestUserRepository:
    """Test suite for UserRepository."""

    def test_update_profile_returns_new_values(self) -> None:
        """Test that update_profile returns the updated attributes."""
        mock_dynamodb = MagicMock()
        mock_dynamodb.Table.return_value.update_item.return_value = {
            "Attributes": {"id": "user_1", "name": "Asha", "phone": "99999"}
        }
        repo = UserRepository(mock_dynamodb, "test-users")

        profile = repo.update_profile("user_1", "Asha", "99999")

        assert profile is not None
        assert profile.name == "Asha"
        assert profile.phone == "99999"
        call_kwargs = mock_dynamodb.Table.return_value.update_item.call_args.kwargs
        assert call_kwargs["Key"] == {"id": "user_1"}
        assert call_kwargs["ReturnValues"] == "ALL_NEW"

    def test_update_profile_dynamodb_error(self) -> None:
        """Test that update errors return None."""
        mock_dynamodb = MagicMock()
        mock_dynamodb.Table.return_value.update_item.side_effect = _client_error("UpdateItem")

        assert UserRepository(mock_dynamodb, "test-users").update_profile("u", "n", "p") is None


@pytest.mark.unit
class TestContactRepository:
    """Test suite for ContactRepository."""

    @pytest.fixture
    def message(self) -> StoredContactMessage:
        """A stored contact message."""
        return StoredContactMessage(
            id="msg_1",
            name="Ravi",
            message="When do you deliver to my village?",
            created_at=datetime(2024, 12, 1, tzinfo=UTC),
        )

    def test_save_message_success(self, message: StoredContactMessage) -> None:
        """Test successfully saving a contact message."""
        mock_dynamodb = MagicMock()

        result = ContactRepository(mock_dynamodb, "test-contacts").save_message(message)

        assert result is True
        item = mock_dynamodb.Table.return_value.put_item.call_args.kwargs["Item"]
        assert item["name"] == "Ravi"
        assert item["created_at"] == "2024-12-01T00:00:00+00:00"

    def test_save_message_dynamodb_error(self, message: StoredContactMessage) -> None:
        """Test that save returns False on DynamoDB error."""
        mock_dynamodb = MagicMock()
        mock_dynamodb.Table.return_value.put_item.side_effect = _client_error("PutItem")

        assert ContactRepository(mock_dynamodb, "test-contacts").save_message(message) is False
