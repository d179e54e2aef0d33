"""Domain services wrapping repositories."""
from .products import ProductsDomain
from .users import UsersDomain

__all__ = [
    "ProductsDomain",
    "UsersDomain",
]
