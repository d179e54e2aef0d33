"""
Repository Pattern for Database Operations

- UserRepository: user lookup, wallet and address writes
- ProductRepository: product catalog reads
- CartRepository: per-user cart documents with versioned saves
"""
from .cart_repo import CartRepository
from .product_repo import ProductRepository
from .user_repo import UserRepository

__all__ = [
    "CartRepository",
    "ProductRepository",
    "UserRepository",
]
