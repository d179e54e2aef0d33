"""
Supabase Database Service

Composes repositories, domain services and the cart manager around a single
async client handle.

Usage:
    from qkart.config import Settings
    from qkart.services.database import Database

    db = await Database.create(Settings.from_env())
    cart = await db.cart_manager.get_cart_by_user(user)
"""

from supabase._async.client import AsyncClient

from qkart.cart import CartManager
from qkart.config import Settings
from qkart.db import create_supabase
from qkart.services.domains import ProductsDomain, UsersDomain
from qkart.services.repositories import CartRepository, ProductRepository, UserRepository


class Database:
    """
    Repositories and services bound to one Supabase client.

    Build with Database.create(settings) in async code, or pass an existing
    client (tests use an in-memory fake).
    """

    def __init__(self, client: AsyncClient, settings: Settings | None = None):
        self.client = client
        self.settings = settings or Settings()

        self._users_repo = UserRepository(self.client)
        self._products_repo = ProductRepository(self.client)
        self._carts_repo = CartRepository(
            self.client, default_payment_option=self.settings.default_payment_option
        )

        self.users_domain = UsersDomain(self._users_repo, self.settings.default_address)
        self.products_domain = ProductsDomain(self._products_repo)
        self.cart_manager = CartManager(
            carts=self._carts_repo,
            products=self.products_domain,
            users=self.users_domain,
        )

    @classmethod
    async def create(cls, settings: Settings) -> "Database":
        """Async factory: create the client and wire everything to it."""
        client = await create_supabase(settings)
        return cls(client, settings)
