"""Product Repository - read-only catalog lookups."""

from qkart.services.models import Product

from .base import BaseRepository


class ProductRepository(BaseRepository):
    """Product database operations."""

    table_name = "products"

    async def get_all(self) -> list[Product]:
        """Get every product in storage order."""
        result = await self.table().select("*").execute()
        return [Product(**p) for p in result.data]

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID."""
        result = await self.table().select("*").eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None
