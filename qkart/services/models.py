"""Database Models - Pydantic models for users and catalog products."""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from qkart.config import DEFAULT_ADDRESS
from qkart.services.money import parse_decimal, to_decimal as _to_decimal


class User(BaseModel):
    """User record as owned by the account subsystem.

    The cart core reads ``email`` and ``address`` and debits ``wallet_money``.
    """
    model_config = ConfigDict(extra="ignore")  # Ignore unknown columns from DB

    id: str
    email: str
    name: Optional[str] = None
    wallet_money: Decimal = Decimal("0")
    address: str = DEFAULT_ADDRESS

    @field_validator("id", mode="before")
    @classmethod
    def convert_id_to_str(cls, v):
        return str(v)

    @field_validator("wallet_money", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _to_decimal(v)

    def has_non_default_address(self, default_address: str = DEFAULT_ADDRESS) -> bool:
        return bool(self.address) and self.address != default_address


class Product(BaseModel):
    """Catalog product. Embedded as a snapshot inside cart items."""
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    category: Optional[str] = None
    cost: Decimal = Field(ge=0)
    rating: Optional[int] = None
    image: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def convert_id_to_str(cls, v):
        return str(v)

    @field_validator("cost", mode="before")
    @classmethod
    def convert_cost_to_decimal(cls, v):
        # Reject rather than default to zero
        return parse_decimal(v)

    def to_document(self) -> dict:
        """Serialize for jsonb storage; cost stays a decimal string."""
        return self.model_dump(mode="json")
