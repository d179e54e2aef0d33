"""User domain service wrapping UserRepository."""

from decimal import Decimal

from qkart.config import DEFAULT_ADDRESS
from qkart.errors import ERROR_INVALID_ADDRESS, InvalidRequestError
from qkart.logging import get_logger, sanitize_id_for_logging
from qkart.services.models import User
from qkart.services.repositories import UserRepository

logger = get_logger(__name__)

MIN_ADDRESS_LENGTH = 20


class UsersDomain:
    """User operations needed by the cart service and the address endpoint."""

    def __init__(self, repo: UserRepository, default_address: str = DEFAULT_ADDRESS) -> None:
        self.repo = repo
        self.default_address = default_address

    async def get_user_by_email(self, email: str) -> User | None:
        return await self.repo.get_by_email(email)

    async def get_user_by_id(self, user_id: str) -> User | None:
        return await self.repo.get_by_id(user_id)

    async def has_set_non_default_address(self, user: User) -> bool:
        """True when the user has replaced the placeholder address."""
        return user.has_non_default_address(self.default_address)

    async def save_wallet(self, user: User, expected_wallet_money: Decimal) -> User:
        """Persist user.wallet_money; StaleRecordError if the stored balance moved."""
        return await self.repo.update_wallet(user, expected_wallet_money)

    async def set_address(self, user: User, address: str) -> str:
        """Store a new delivery address and return it."""
        address = (address or "").strip()
        if len(address) < MIN_ADDRESS_LENGTH or address == self.default_address:
            raise InvalidRequestError(ERROR_INVALID_ADDRESS)

        await self.repo.update_address(user.id, address)
        user.address = address
        logger.info(f"Address updated for user {sanitize_id_for_logging(user.id)}")
        return address
