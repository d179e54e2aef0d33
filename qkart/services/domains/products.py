"""Product catalog accessor wrapping ProductRepository."""
from typing import List, Optional

from qkart.services.models import Product
from qkart.services.repositories import ProductRepository


class ProductsDomain:
    """Read-only product lookups.

    Absence is a normal outcome (None); storage errors propagate untouched.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    async def get_product_by_id(self, product_id: str) -> Optional[Product]:
        return await self.repo.get_by_id(product_id)

    async def get_products(self) -> List[Product]:
        return await self.repo.get_all()
