# discount_service/db/schemas.py
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CouponModel(BaseModel):
    id: Optional[int] = None
    product_name: str
    description: Optional[str] = None
    amount: int

    model_config = ConfigDict(from_attributes=True)


class DeleteDiscountResponse(BaseModel):
    success: bool
