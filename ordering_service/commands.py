# ordering_service/commands.py
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class OrderFields(BaseModel):
    user_name: str = Field(..., min_length=1, max_length=70)
    total_price: Decimal = Field(..., gt=0)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_address: str = Field(..., min_length=1)
    address_line: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    card_name: Optional[str] = None
    card_number: Optional[str] = None
    expiration: Optional[str] = None
    cvv: Optional[str] = None
    payment_method: Optional[int] = None


class CheckoutOrderCommand(OrderFields):
    pass


class UpdateOrderCommand(OrderFields):
    id: int


class DeleteOrderCommand(BaseModel):
    id: int


class GetOrderListQuery(BaseModel):
    user_name: str
