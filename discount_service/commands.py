# discount_service/commands.py
from pydantic import BaseModel, Field


class GetDiscountQuery(BaseModel):
    product_name: str


class CreateDiscountCommand(BaseModel):
    product_name: str = Field(..., min_length=1)
    description: str = ""
    amount: int


class UpdateDiscountCommand(BaseModel):
    id: int
    product_name: str = Field(..., min_length=1)
    description: str = ""
    amount: int


class DeleteDiscountCommand(BaseModel):
    product_name: str
