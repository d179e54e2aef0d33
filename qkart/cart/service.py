"""Cart manager: per-user cart lifecycle and checkout over the document store."""
from typing import TYPE_CHECKING

from qkart.errors import (
    ERROR_ADDRESS_NOT_SET,
    ERROR_CART_CREATE_FAILED,
    ERROR_CART_NOT_FOUND,
    ERROR_CART_NOT_FOUND_FOR_UPDATE,
    ERROR_EMPTY_CART,
    ERROR_INSUFFICIENT_BALANCE,
    ERROR_INVALID_QUANTITY,
    ERROR_PRODUCT_ALREADY_IN_CART,
    ERROR_PRODUCT_NOT_IN_CART,
    ERROR_PRODUCT_NOT_IN_DATABASE,
    ConflictError,
    InternalFailureError,
    InvalidRequestError,
    NotFoundError,
)
from qkart.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from qkart.services.models import Product, User
from qkart.services.money import subtract

from .models import Cart, CartItem, CartItems

if TYPE_CHECKING:
    from qkart.services.domains import ProductsDomain, UsersDomain
    from qkart.services.repositories import CartRepository

logger = get_logger(__name__)


class CartManager:
    """
    Owns every read-modify-write cycle on a user's cart.

    State per user: no cart -> cart with items -> ... -> cart with no items.
    Checkout empties the cart; nothing here deletes one.

    Each operation raises at the first failed precondition and performs no
    further steps.
    """

    def __init__(
        self,
        carts: "CartRepository",
        products: "ProductsDomain",
        users: "UsersDomain",
    ):
        self.carts = carts
        self.products = products
        self.users = users

    async def get_cart_by_user(self, user: User) -> Cart:
        """Fetch the user's cart or raise NotFoundError."""
        cart = await self.carts.find_by_email(user.email)
        if cart is None:
            raise NotFoundError(ERROR_CART_NOT_FOUND)
        return cart

    async def add_product_to_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        """Add a product not yet in the cart, creating the cart on first use."""
        _validate_quantity(quantity)

        product = await self._require_product(product_id)

        cart = await self.carts.find_by_email(user.email)
        if cart is None:
            cart = await self.carts.create(
                user.email, CartItems([CartItem(product=product, quantity=quantity)])
            )
            if cart is None:
                logger.error(f"Cart creation returned no record for {_who(user)}")
                raise InternalFailureError(ERROR_CART_CREATE_FAILED)
            logger.info(f"Created cart for {_who(user)} with product {_pid(product_id)}")
            return cart

        if cart.cart_items.contains(product_id):
            logger.warning(f"Duplicate add of product {_pid(product_id)} for {_who(user)}")
            raise ConflictError(ERROR_PRODUCT_ALREADY_IN_CART)

        cart.cart_items.append(CartItem(product=product, quantity=quantity))
        await self.carts.save(cart)
        logger.info(f"Added product {_pid(product_id)} x{quantity} for {_who(user)}")
        return cart

    async def update_product_in_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        """Overwrite the quantity of a product already in the cart."""
        cart = await self.carts.find_by_email(user.email)
        if cart is None:
            raise InvalidRequestError(ERROR_CART_NOT_FOUND_FOR_UPDATE)

        _validate_quantity(quantity)

        await self._require_product(product_id)

        index = cart.cart_items.index_of(product_id)
        if index < 0:
            raise InvalidRequestError(ERROR_PRODUCT_NOT_IN_CART)

        cart.cart_items.replace_quantity(index, quantity)
        await self.carts.save(cart)
        logger.info(f"Set product {_pid(product_id)} to x{quantity} for {_who(user)}")
        return cart

    async def delete_product_from_cart(self, user: User, product_id: str) -> None:
        """Remove exactly one product from the cart."""
        cart = await self.carts.find_by_email(user.email)
        if cart is None:
            raise InvalidRequestError(ERROR_CART_NOT_FOUND)

        index = cart.cart_items.index_of(product_id)
        if index < 0:
            raise InvalidRequestError(ERROR_PRODUCT_NOT_IN_CART)

        cart.cart_items.remove_at(index)
        await self.carts.save(cart)
        logger.info(f"Removed product {_pid(product_id)} for {_who(user)}")

    async def checkout(self, user: User) -> None:
        """
        Debit the wallet by the cart value and empty the cart.

        The user is saved before the cart. The two writes are not one
        transaction: if the cart save fails after the debit, the error is
        logged and re-raised and the debit stays in place.
        """
        cart = await self.carts.find_by_email(user.email)
        if cart is None:
            raise NotFoundError(ERROR_CART_NOT_FOUND)

        if cart.is_empty:
            raise InvalidRequestError(ERROR_EMPTY_CART)

        if not await self.users.has_set_non_default_address(user):
            raise InvalidRequestError(ERROR_ADDRESS_NOT_SET)

        if user.wallet_money == 0:
            raise InvalidRequestError(ERROR_INSUFFICIENT_BALANCE)

        cart_value = cart.total_cost
        if user.wallet_money < cart_value:
            logger.warning(
                f"Insufficient balance for {_who(user)}: "
                f"wallet {user.wallet_money}, cart {cart_value}"
            )
            raise InvalidRequestError(ERROR_INSUFFICIENT_BALANCE)

        balance_before = user.wallet_money
        user.wallet_money = subtract(balance_before, cart_value)
        try:
            await self.users.save_wallet(user, balance_before)
        except Exception:
            user.wallet_money = balance_before
            raise

        cart.cart_items.clear()
        try:
            await self.carts.save(cart)
        except Exception:
            logger.error(
                f"Checkout debited {cart_value} from {_who(user)} but clearing "
                f"the cart failed",
                exc_info=True,
            )
            raise

        logger.info(f"Checkout for {_who(user)}: charged {cart_value}, balance {user.wallet_money}")

    async def _require_product(self, product_id: str) -> Product:
        product = await self.products.get_product_by_id(product_id)
        if product is None:
            raise InvalidRequestError(ERROR_PRODUCT_NOT_IN_DATABASE)
        return product


def _validate_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidRequestError(ERROR_INVALID_QUANTITY)


def _who(user: User) -> str:
    return sanitize_string_for_logging(user.email)


def _pid(product_id: str) -> str:
    return sanitize_id_for_logging(product_id)
