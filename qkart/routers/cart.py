"""
Cart Router

Thin HTTP layer over CartManager. Service errors become HTTPExceptions via
deps.to_http_exception; storage errors are left for FastAPI's 500 handling.
"""
from fastapi import APIRouter, Depends, Response

from qkart.cart import CartManager
from qkart.errors import QKartError
from qkart.services.models import User

from .deps import get_cart_manager, get_current_user, to_http_exception
from .models import AddToCartRequest, UpdateCartItemRequest, cart_response

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("")
async def get_cart(
    user: User = Depends(get_current_user),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Get the authenticated user's cart."""
    try:
        cart = await cart_manager.get_cart_by_user(user)
    except QKartError as e:
        raise to_http_exception(e)
    return cart_response(cart)


@router.post("", status_code=201)
async def add_to_cart(
    request: AddToCartRequest,
    user: User = Depends(get_current_user),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Add a product to the cart, creating the cart if needed."""
    try:
        cart = await cart_manager.add_product_to_cart(user, request.productId, request.quantity)
    except QKartError as e:
        raise to_http_exception(e)
    return cart_response(cart)


@router.put("/checkout", status_code=204)
async def checkout(
    user: User = Depends(get_current_user),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Pay for the cart from the wallet and empty it."""
    try:
        await cart_manager.checkout(user)
    except QKartError as e:
        raise to_http_exception(e)
    return Response(status_code=204)


@router.put("")
async def update_cart_item(
    request: UpdateCartItemRequest,
    user: User = Depends(get_current_user),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Change a product's quantity; quantity 0 removes it."""
    try:
        if request.quantity == 0:
            await cart_manager.delete_product_from_cart(user, request.productId)
            return Response(status_code=204)
        cart = await cart_manager.update_product_in_cart(user, request.productId, request.quantity)
    except QKartError as e:
        raise to_http_exception(e)
    return cart_response(cart)


@router.delete("/{product_id}", status_code=204)
async def delete_cart_item(
    product_id: str,
    user: User = Depends(get_current_user),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    """Remove a product from the cart."""
    try:
        await cart_manager.delete_product_from_cart(user, product_id)
    except QKartError as e:
        raise to_http_exception(e)
    return Response(status_code=204)
