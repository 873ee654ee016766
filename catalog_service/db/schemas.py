# catalog_service/db/schemas.py
from decimal import Decimal
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 70


class BrandResponse(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class TypesResponse(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class ProductResponse(BaseModel):
    id: str
    name: str
    summary: Optional[str] = None
    description: Optional[str] = None
    image_file: Optional[str] = None
    price: Decimal
    brand: Optional[BrandResponse] = None
    type: Optional[TypesResponse] = None

    model_config = ConfigDict(from_attributes=True)


class CatalogSpecParams(BaseModel):
    page_index: int = Field(1, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1)
    brand_id: Optional[str] = None
    type_id: Optional[str] = None
    sort: Optional[str] = None
    search: Optional[str] = None

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, value: int) -> int:
        return min(value, MAX_PAGE_SIZE)


class Pagination(BaseModel, Generic[T]):
    page_index: int
    page_size: int
    count: int
    data: List[T] = []
