"""
Cart API Pydantic Models

Request and response schemas for the HTTP boundary.
"""
from pydantic import BaseModel

from qkart.cart.models import Cart
from qkart.services.models import Product
from qkart.services.money import to_float


# ==================== REQUEST MODELS ====================

class AddToCartRequest(BaseModel):
    productId: str
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    productId: str
    quantity: int  # 0 removes the product


class SetAddressRequest(BaseModel):
    address: str


# ==================== RESPONSE HELPERS ====================

def product_response(product: Product) -> dict:
    return {
        "_id": product.id,
        "name": product.name,
        "category": product.category,
        "cost": to_float(product.cost),
        "rating": product.rating,
        "image": product.image,
    }


def cart_response(cart: Cart) -> dict:
    return {
        "email": cart.email,
        "cartItems": [
            {"product": product_response(item.product), "quantity": item.quantity}
            for item in cart.cart_items
        ],
        "paymentOption": cart.payment_option,
        "totalCost": to_float(cart.total_cost),
    }
