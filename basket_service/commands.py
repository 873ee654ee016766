# basket_service/commands.py
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from basket_service.db.schemas import ShoppingCartItem


class GetBasketByUserNameQuery(BaseModel):
    user_name: str


class CreateShoppingCartCommand(BaseModel):
    user_name: str
    items: List[ShoppingCartItem] = []


class DeleteBasketByUserNameCommand(BaseModel):
    user_name: str


# Тело запроса на оформление заказа
class BasketCheckout(BaseModel):
    user_name: str
    total_price: Decimal = Decimal("0")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_address: Optional[str] = None
    address_line: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    card_name: Optional[str] = None
    card_number: Optional[str] = None
    expiration: Optional[str] = None
    cvv: Optional[str] = None
    payment_method: Optional[int] = None
