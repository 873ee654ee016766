# catalog_service/commands.py
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from catalog_service.db.schemas import CatalogSpecParams


class GetProductByIdQuery(BaseModel):
    id: str


class GetProductByNameQuery(BaseModel):
    name: str


class GetAllProductsQuery(BaseModel):
    catalog_spec_params: CatalogSpecParams


class GetProductsByBrandQuery(BaseModel):
    brand_name: str


class GetAllBrandsQuery(BaseModel):
    pass


class GetAllTypesQuery(BaseModel):
    pass


class CreateProductCommand(BaseModel):
    name: str = Field(..., min_length=1)
    summary: Optional[str] = None
    description: Optional[str] = None
    image_file: Optional[str] = None
    price: Decimal = Field(..., ge=0)
    brand_id: str
    type_id: str


class UpdateProductCommand(CreateProductCommand):
    id: str


class DeleteProductByIdCommand(BaseModel):
    id: str
