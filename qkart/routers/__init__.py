"""HTTP routers for the cart service."""
from fastapi import APIRouter

from .cart import router as cart_router
from .products import router as products_router
from .users import router as users_router

api_router = APIRouter(prefix="/v1")
api_router.include_router(products_router)
api_router.include_router(cart_router)
api_router.include_router(users_router)

__all__ = ["api_router", "cart_router", "products_router", "users_router"]
