# eventbus/events.py
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Общая часть всех интеграционных событий
class IntegrationBaseEvent(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    creation_date: datetime = Field(default_factory=_utcnow)
    correlation_id: Optional[str] = None


# Снимок корзины и платёжных данных на момент оформления заказа
class BasketCheckoutEvent(IntegrationBaseEvent):
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
