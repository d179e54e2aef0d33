"""Cart package: models and the cart lifecycle manager."""
from .models import Cart, CartItem, CartItems
from .service import CartManager

__all__ = [
    "Cart",
    "CartItem",
    "CartItems",
    "CartManager",
]
