# catalog_service/handlers.py
import logging
from typing import List, Optional

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
from catalog_service.db.models import Product
from catalog_service.db.repository import ProductRepository
from catalog_service.db.schemas import BrandResponse, Pagination, ProductResponse, TypesResponse
from eshop_common.mediator import Mediator

logger = logging.getLogger(__name__)


class GetAllProductsHandler:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def handle(self, query: GetAllProductsQuery) -> Optional[Pagination[ProductResponse]]:
        params = query.catalog_spec_params
        count, products = await self.repository.get_products(params)
        if count == 0:
            return None
        return Pagination[ProductResponse](
            page_index=params.page_index,
            page_size=params.page_size,
            count=count,
            data=[ProductResponse.model_validate(product) for product in products],
        )


class GetProductByIdHandler:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def handle(self, query: GetProductByIdQuery) -> Optional[ProductResponse]:
        product = await self.repository.get_product(query.id)
        if product is None:
            return None
        return ProductResponse.model_validate(product)


class GetProductByNameHandler:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def handle(self, query: GetProductByNameQuery) -> List[ProductResponse]:
        products = await self.repository.get_products_by_name(query.name)
        return [ProductResponse.model_validate(product) for product in products]


class GetProductsByBrandHandler:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def handle(self, query: GetProductsByBrandQuery) -> List[ProductResponse]:
        products = await self.repository.get_products_by_brand(query.brand_name)
        return [ProductResponse.model_validate(product) for product in products]


class GetAllBrandsHandler:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def handle(self, query: GetAllBrandsQuery) -> List[BrandResponse]:
        brands = await self.repository.get_all_brands()
        return [BrandResponse.model_validate(brand) for brand in brands]


class GetAllTypesHandler:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def handle(self, query: GetAllTypesQuery) -> List[TypesResponse]:
        types = await self.repository.get_all_types()
        return [TypesResponse.model_validate(product_type) for product_type in types]


class CreateProductCommandHandler:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def handle(self, command: CreateProductCommand) -> ProductResponse:
        new_product = await self.repository.create_product(Product(**command.model_dump()))
        logger.info("Product %s created with id %s", new_product.name, new_product.id)
        return ProductResponse.model_validate(new_product)


class UpdateProductCommandHandler:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def handle(self, command: UpdateProductCommand) -> bool:
        return await self.repository.update_product(Product(**command.model_dump()))


class DeleteProductByIdCommandHandler:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def handle(self, command: DeleteProductByIdCommand) -> bool:
        return await self.repository.delete_product(command.id)


def build_mediator(repository: ProductRepository) -> Mediator:
    return Mediator({
        GetAllProductsQuery: GetAllProductsHandler(repository),
        GetProductByIdQuery: GetProductByIdHandler(repository),
        GetProductByNameQuery: GetProductByNameHandler(repository),
        GetProductsByBrandQuery: GetProductsByBrandHandler(repository),
        GetAllBrandsQuery: GetAllBrandsHandler(repository),
        GetAllTypesQuery: GetAllTypesHandler(repository),
        CreateProductCommand: CreateProductCommandHandler(repository),
        UpdateProductCommand: UpdateProductCommandHandler(repository),
        DeleteProductByIdCommand: DeleteProductByIdCommandHandler(repository),
    })
