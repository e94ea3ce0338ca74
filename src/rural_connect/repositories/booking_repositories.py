"""DynamoDB repository classes for bookings, user profiles, and contact messages."""

import logging

from botocore.exceptions import ClientError

from rural_connect.models.booking_models import Booking, StoredContactMessage, UserProfile
from rural_connect.repositories.base_repository import TableRepository

logger = logging.getLogger(__name__)


class BookingRepository(TableRepository):
    """Repository for booking CRUD operations.

    Manages booking records in DynamoDB with id as partition key and a
    user_id-index GSI (range key created_at) for per-customer listings.
    """

    def save_booking(self, booking: Booking) -> bool:
        """Save or update a booking.

        Args:
            booking: Booking to save

        Returns:
            bool: True if save succeeded, False otherwise
        """
        try:
            self.table.put_item(Item=booking.to_dynamodb_item())
            return True

        except ClientError as e:
            logger.error(f"Failed to save booking: {e}")  # pragma: no cover
            return False

    def list_bookings_for_user(self, user_id: str) -> list[Booking]:
        """List a customer's bookings, most recent first.

        Uses a Global Secondary Index on user_id.

        Args:
            user_id: Customer identifier

        Returns:
            list: List of Booking objects (empty list if none found)
        """
        try:
            response = self.table.query(
                IndexName="user_id-index",
                KeyConditionExpression="user_id = :uid",
                ExpressionAttributeValues={":uid": user_id},
                ScanIndexForward=False,  # Most recent first
            )

            return [Booking.from_dynamodb_item(item) for item in response.get("Items", [])]

        except ClientError as e:
            logger.error(f"Failed to list bookings: {e}")  # pragma: no cover
            return []


class UserRepository(TableRepository):
    """Repository for customer profiles keyed by user id."""

    def update_profile(self, user_id: str, name: str, phone: str) -> UserProfile | None:
        """Set name and phone for a customer, creating the profile if needed.

        Args:
            user_id: Customer identifier
            name: New display name
            phone: New phone number

        Returns:
            The updated profile, or None if the update failed
        """
        try:
            response = self.table.update_item(
                Key={"id": user_id},
                UpdateExpression="SET #name = :name, phone = :phone",
                ExpressionAttributeNames={"#name": "name"},
                ExpressionAttributeValues={":name": name, ":phone": phone},
                ReturnValues="ALL_NEW",
            )

            return UserProfile.from_dynamodb_item(response.get("Attributes", {"id": user_id}))

        except ClientError as e:
            logger.error(f"Failed to update profile: {e}")  # pragma: no cover
            return None


class ContactRepository(TableRepository):
    """Repository for contact form submissions."""

    def save_message(self, message: StoredContactMessage) -> bool:
        """Save a contact message.

        Args:
            message: Message to save

        Returns:
            bool: True if save succeeded, False otherwise
        """
        try:
            self.table.put_item(Item=message.to_dynamodb_item())
            return True

        except ClientError as e:
            logger.error(f"Failed to save contact message: {e}")  # pragma: no cover
            return False
