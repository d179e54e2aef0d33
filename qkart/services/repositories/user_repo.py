"""User Repository - user lookups plus the two fields the cart service writes.

All methods use async/await with supabase-py v2.
"""

from decimal import Decimal

from qkart.errors import ERROR_USER_STALE, StaleRecordError
from qkart.logging import get_logger, sanitize_id_for_logging
from qkart.services.models import User
from qkart.services.money import to_storage

from .base import BaseRepository

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """User database operations."""

    table_name = "users"

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email."""
        result = await self.table().select("*").eq("email", email).execute()
        return User(**result.data[0]) if result.data else None

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user by internal ID."""
        result = await self.table().select("*").eq("id", user_id).execute()
        return User(**result.data[0]) if result.data else None

    async def update_wallet(self, user: User, expected_wallet_money: Decimal) -> User:
        """Write user.wallet_money if the stored balance is still expected_wallet_money."""
        result = await (
            self.table()
            .update({"wallet_money": to_storage(user.wallet_money)})
            .eq("id", user.id)
            .eq("wallet_money", to_storage(expected_wallet_money))
            .execute()
        )
        if not result.data:
            logger.warning(
                f"Wallet update for user {sanitize_id_for_logging(user.id)} matched no row"
            )
            raise StaleRecordError(ERROR_USER_STALE)
        return user

    async def update_address(self, user_id: str, address: str) -> None:
        """Replace the user's delivery address."""
        await self.table().update({"address": address}).eq("id", user_id).execute()
