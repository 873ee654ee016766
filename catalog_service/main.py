# catalog_service/main.py
import os
from typing import AsyncGenerator, List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession
import uvicorn

from catalog_service.commands import (
    CreateProductCommand,
    DeleteProductByIdCommand,
    GetAllBrandsQuery,
    GetAllProductsQuery,
    GetAllTypesQuery,
    GetProductByIdQuery,
    GetProductByNameQuery,
    GetProductsByBrandQuery,
    UpdateProductCommand,
)
from catalog_service.db.database import get_db
from catalog_service.db.init_db import init_db
from catalog_service.db.repository import ProductRepository
from catalog_service.db.schemas import (
    DEFAULT_PAGE_SIZE,
    BrandResponse,
    CatalogSpecParams,
    Pagination,
    ProductResponse,
    TypesResponse,
)
from catalog_service.handlers import build_mediator
from eshop_common.correlation import CorrelationIdMiddleware
from eshop_common.log_config import configure_logging
from eshop_common.mediator import Mediator
from eshop_common.retry import run_with_retry

configure_logging()


async def lifespan(app: FastAPI) -> AsyncGenerator:
    await run_with_retry(init_db, "CatalogContext")
    yield


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)


def get_repository(db: AsyncSession = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


def get_mediator(repository: ProductRepository = Depends(get_repository)) -> Mediator:
    return build_mediator(repository)


router = APIRouter(prefix="/api/v1/Catalog", tags=["Catalog"])


@router.get("/GetProductById/{id}", response_model=ProductResponse)
async def get_product_by_id(id: str, mediator: Mediator = Depends(get_mediator)):
    product = await mediator.send(GetProductByIdQuery(id=id))
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("/GetProductByProductName/{product_name}", response_model=List[ProductResponse])
async def get_product_by_product_name(product_name: str, mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(GetProductByNameQuery(name=product_name))


@router.get("/GetAllProducts", response_model=Optional[Pagination[ProductResponse]])
async def get_all_products(
    page_index: int = Query(default=1, ge=1),
    page_size: int = Query(default=DEFAULT_PAGE_SIZE, ge=1),
    brand_id: Optional[str] = None,
    type_id: Optional[str] = None,
    sort: Optional[str] = None,
    search: Optional[str] = None,
    mediator: Mediator = Depends(get_mediator),
):
    params = CatalogSpecParams(
        page_index=page_index,
        page_size=page_size,
        brand_id=brand_id,
        type_id=type_id,
        sort=sort,
        search=search,
    )
    return await mediator.send(GetAllProductsQuery(catalog_spec_params=params))


@router.get("/GetAllBrands", response_model=List[BrandResponse])
async def get_all_brands(mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(GetAllBrandsQuery())


@router.get("/GetAllTypes", response_model=List[TypesResponse])
async def get_all_types(mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(GetAllTypesQuery())


@router.get("/GetProductsByBrandName/{brand}", response_model=List[ProductResponse])
async def get_products_by_brand_name(brand: str, mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(GetProductsByBrandQuery(brand_name=brand))


@router.post("/CreateProduct", response_model=ProductResponse)
async def create_product(command: CreateProductCommand, mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(command)


@router.put("/UpdateProduct", response_model=bool)
async def update_product(command: UpdateProductCommand, mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(command)


@router.delete("/{id}", response_model=bool)
async def delete_product(id: str, mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(DeleteProductByIdCommand(id=id))


app.include_router(router)


@app.get("/")
async def health_check():
    """Health check endpoint."""
    return {"status": "catalog_service running"}


def run():
    uvicorn.run(
        "catalog_service.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("CATALOG_PORT", "8000")),
    )


if __name__ == "__main__":
    run()
