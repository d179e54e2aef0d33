"""
QKart Cart Service

This package contains:
- config: environment-driven settings
- db: async Supabase client factory
- services: models, money helpers, repositories, catalog and user domains
- cart: cart models and the CartManager lifecycle/checkout service
- routers: FastAPI boundary mapping service errors to HTTP responses
"""

__all__ = [
    "Settings",
    "Database",
    "CartManager",
]


def __getattr__(name):
    """Lazy attribute access so importing qkart does not pull in supabase."""
    if name == "Settings":
        from qkart.config import Settings
        return Settings
    elif name == "Database":
        from qkart.services.database import Database
        return Database
    elif name == "CartManager":
        from qkart.cart import CartManager
        return CartManager
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
