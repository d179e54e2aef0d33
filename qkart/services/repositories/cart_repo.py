"""Cart Repository - one cart document per user email.

Saves are compare-and-set on the ``version`` column so that two requests
mutating the same cart cannot silently overwrite each other. Creation keeps
at most one cart per email: the unique index in ``sql/schema.sql`` rejects a
second insert, and where that index is missing the insert is re-checked and
backed out.
"""

from qkart.cart.models import Cart, CartItems
from qkart.errors import ERROR_CART_STALE, StaleRecordError
from qkart.logging import get_logger, sanitize_string_for_logging

from .base import BaseRepository

logger = get_logger(__name__)

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


def _is_duplicate_key_error(exception: Exception) -> bool:
    """True for a PostgREST unique-constraint violation."""
    if str(getattr(exception, "code", "")) == UNIQUE_VIOLATION:
        return True
    return "duplicate key" in str(exception).lower()


class CartRepository(BaseRepository):
    """Cart database operations."""

    table_name = "carts"

    def __init__(self, client, default_payment_option: str | None = None) -> None:
        super().__init__(client)
        self.default_payment_option = default_payment_option

    async def find_by_email(self, email: str) -> Cart | None:
        """Get the cart owned by email."""
        result = await self.table().select("*").eq("email", email).execute()
        return Cart.from_dict(result.data[0]) if result.data else None

    async def create(self, email: str, items: CartItems) -> Cart | None:
        """Insert a new cart; None if storage returned no record.

        Raises StaleRecordError when another request created a cart for the
        same email first.
        """
        cart = Cart(email=email, cart_items=items)
        if self.default_payment_option:
            cart.payment_option = self.default_payment_option

        try:
            result = await self.table().insert(cart.to_dict()).execute()
        except Exception as e:
            if not _is_duplicate_key_error(e):
                raise
            logger.warning(f"Cart already exists for {sanitize_string_for_logging(email)}")
            raise StaleRecordError(ERROR_CART_STALE) from e

        if not result.data:
            return None
        created = Cart.from_dict(result.data[0])

        siblings = await self.table().select("id").eq("email", email).execute()
        if len(siblings.data) > 1:
            await self.table().delete().eq("id", created.id).execute()
            logger.warning(
                f"Concurrent cart creation for {sanitize_string_for_logging(email)}, "
                f"backed out {created.id}"
            )
            raise StaleRecordError(ERROR_CART_STALE)

        return created

    async def save(self, cart: Cart) -> Cart:
        """Persist items and payment option, bumping the version."""
        expected_version = cart.version
        result = await (
            self.table()
            .update(
                {
                    "cart_items": cart.cart_items.to_list(),
                    "payment_option": cart.payment_option,
                    "version": expected_version + 1,
                }
            )
            .eq("email", cart.email)
            .eq("version", expected_version)
            .execute()
        )
        if not result.data:
            logger.warning(
                f"Stale cart save for {sanitize_string_for_logging(cart.email)} "
                f"at version {expected_version}"
            )
            raise StaleRecordError(ERROR_CART_STALE)

        cart.version = expected_version + 1
        return cart
