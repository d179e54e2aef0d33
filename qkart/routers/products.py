"""Products Router - public catalog endpoints."""
from fastapi import APIRouter, Depends, HTTPException

from qkart.errors import ERROR_PRODUCT_NOT_FOUND
from qkart.services.domains import ProductsDomain

from .deps import get_products_domain
from .models import product_response

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
async def list_products(products: ProductsDomain = Depends(get_products_domain)):
    return [product_response(p) for p in await products.get_products()]


@router.get("/{product_id}")
async def get_product(product_id: str, products: ProductsDomain = Depends(get_products_domain)):
    product = await products.get_product_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return product_response(product)
