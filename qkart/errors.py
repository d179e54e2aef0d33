"""
Cart Service Errors

Fixed user-facing messages and the exception taxonomy raised by the cart core.
HTTP status mapping lives in qkart.routers, not here.
"""

# Cart errors
ERROR_CART_NOT_FOUND = "User does not have a cart"
ERROR_CART_NOT_FOUND_FOR_UPDATE = "User does not have a cart. Use POST to create cart and add a product"
ERROR_CART_CREATE_FAILED = "Failed to create cart"
ERROR_CART_STALE = "Cart was modified by another request, please retry"

# Product errors
ERROR_PRODUCT_NOT_IN_DATABASE = "Product doesn't exist in database"
ERROR_PRODUCT_ALREADY_IN_CART = (
    "Product already in cart. Use the cart sidebar to update or remove product from cart"
)
ERROR_PRODUCT_NOT_IN_CART = "Product not in cart"
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_INVALID_QUANTITY = "Quantity must be a positive integer"

# Checkout errors
ERROR_EMPTY_CART = "User has not added any products"
ERROR_ADDRESS_NOT_SET = "User has not set address"
ERROR_INSUFFICIENT_BALANCE = "User does not have sufficient balance"

# User errors
ERROR_UNAUTHENTICATED = "Please authenticate"
ERROR_INVALID_ADDRESS = "Address must be at least 20 characters long"
ERROR_USER_STALE = "User was modified by another request, please retry"


class QKartError(Exception):
    """Base class for cart service errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(QKartError):
    """A record assumed to exist (the user's cart) is missing."""


class InvalidRequestError(QKartError):
    """A business-rule precondition failed."""


class ConflictError(QKartError):
    """The request collides with existing state (product already in cart)."""


class StaleRecordError(ConflictError):
    """A compare-and-set save matched no row: the record changed since it was read."""


class InternalFailureError(QKartError):
    """Storage accepted the request but produced no record."""


__all__ = [
    "QKartError",
    "NotFoundError",
    "InvalidRequestError",
    "ConflictError",
    "StaleRecordError",
    "InternalFailureError",
]
