# ordering_service/db/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class OrderResponse(BaseModel):
    id: int
    user_name: str
    total_price: Decimal
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
    created_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
