# basket_service/db/schemas.py
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, computed_field


class ShoppingCartItem(BaseModel):
    product_id: str
    product_name: str
    price: Decimal
    quantity: int
    image_file: Optional[str] = None


class ShoppingCart(BaseModel):
    user_name: str
    items: List[ShoppingCartItem] = []

    @property
    def total_price(self) -> Decimal:
        return sum((item.price * item.quantity for item in self.items), Decimal("0"))


class ShoppingCartItemResponse(ShoppingCartItem):
    pass


class ShoppingCartResponse(BaseModel):
    user_name: str
    items: List[ShoppingCartItemResponse] = []

    @computed_field
    @property
    def total_price(self) -> Decimal:
        return sum((item.price * item.quantity for item in self.items), Decimal("0"))

    @classmethod
    def from_cart(cls, cart: Optional[ShoppingCart]) -> Optional["ShoppingCartResponse"]:
        if cart is None:
            return None
        return cls.model_validate(cart.model_dump())
