"""Cart models: embedded product snapshots and the ordered item collection."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator, List, Optional

from qkart.config import DEFAULT_PAYMENT_OPTION
from qkart.services.models import Product
from qkart.services.money import multiply


@dataclass
class CartItem:
    """Single product entry in a cart."""
    product: Product
    quantity: int

    @property
    def product_id(self) -> str:
        return str(self.product.id)

    @property
    def total_cost(self) -> Decimal:
        """Snapshot cost times quantity, unrounded."""
        return multiply(self.product.cost, self.quantity)

    def to_dict(self) -> dict:
        return {
            "product": self.product.to_document(),
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        return cls(
            product=Product(**data["product"]),
            quantity=int(data["quantity"]),
        )


class CartItems:
    """
    Ordered collection of cart items keyed by product id.

    Lookups compare product ids as strings, so a snapshot loaded from storage
    matches an id taken from a request path.
    """

    def __init__(self, items: Optional[List[CartItem]] = None):
        self._items: List[CartItem] = list(items or [])

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> CartItem:
        return self._items[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, CartItems):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"CartItems({self._items!r})"

    def index_of(self, product_id: str) -> int:
        """Index of the item for product_id, or -1."""
        product_id = str(product_id)
        for index, item in enumerate(self._items):
            if item.product_id == product_id:
                return index
        return -1

    def contains(self, product_id: str) -> bool:
        return self.index_of(product_id) >= 0

    def append(self, item: CartItem) -> None:
        self._items.append(item)

    def replace_quantity(self, index: int, quantity: int) -> None:
        self._items[index].quantity = quantity

    def remove_at(self, index: int) -> CartItem:
        return self._items.pop(index)

    def clear(self) -> None:
        self._items = []

    def to_list(self) -> List[dict]:
        return [item.to_dict() for item in self._items]

    @classmethod
    def from_list(cls, data: Optional[List[dict]]) -> "CartItems":
        return cls([CartItem.from_dict(item) for item in data or []])


@dataclass
class Cart:
    """A user's cart, keyed by the owner's email."""
    email: str
    cart_items: CartItems = field(default_factory=CartItems)
    payment_option: str = DEFAULT_PAYMENT_OPTION
    version: int = 0
    id: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return len(self.cart_items) == 0

    @property
    def total_cost(self) -> Decimal:
        """Sum of cost x quantity over the embedded snapshots."""
        return sum((item.total_cost for item in self.cart_items), Decimal("0"))

    def to_dict(self) -> dict:
        """Convert to the stored document shape."""
        data = {
            "email": self.email,
            "cart_items": self.cart_items.to_list(),
            "payment_option": self.payment_option,
            "version": self.version,
        }
        if self.id is not None:
            data["id"] = self.id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Cart":
        return cls(
            email=data["email"],
            cart_items=CartItems.from_list(data.get("cart_items")),
            payment_option=data.get("payment_option") or DEFAULT_PAYMENT_OPTION,
            version=int(data.get("version") or 0),
            id=str(data["id"]) if data.get("id") is not None else None,
        )
