# catalog_service/db/repository.py
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import delete, func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from catalog_service.db.models import Product, ProductBrand, ProductType
from catalog_service.db.schemas import CatalogSpecParams


def _with_refs(query):
    return query.options(selectinload(Product.brand), selectinload(Product.type))


class ProductRepository:
    """Products plus their brand and type lookups."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_products(self, params: CatalogSpecParams) -> Tuple[int, Sequence[Product]]:
        """
        Return the filtered total and one page of products.

        The count and the page are two separate queries.
        """
        query = select(Product)
        if params.search:
            query = query.filter(Product.name.ilike(f"%{params.search}%"))
        if params.brand_id:
            query = query.filter(Product.brand_id == params.brand_id)
        if params.type_id:
            query = query.filter(Product.type_id == params.type_id)

        count_result = await self.db.execute(select(func.count()).select_from(query.subquery()))
        count = count_result.scalar_one()

        if params.sort == "priceAsc":
            query = query.order_by(Product.price)
        elif params.sort == "priceDesc":
            query = query.order_by(Product.price.desc())
        else:
            query = query.order_by(Product.name)

        result = await self.db.execute(
            _with_refs(query)
            .offset((params.page_index - 1) * params.page_size)
            .limit(params.page_size)
        )
        return count, result.scalars().all()

    async def get_product(self, product_id: str) -> Optional[Product]:
        result = await self.db.execute(
            _with_refs(select(Product).filter(Product.id == product_id))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_products_by_name(self, name: str) -> Sequence[Product]:
        result = await self.db.execute(
            _with_refs(select(Product).filter(Product.name == name).order_by(Product.name))
        )
        return result.scalars().all()

    async def get_products_by_brand(self, brand_name: str) -> Sequence[Product]:
        result = await self.db.execute(
            _with_refs(
                select(Product)
                .join(Product.brand)
                .filter(ProductBrand.name == brand_name)
                .order_by(Product.name)
            )
        )
        return result.scalars().all()

    async def create_product(self, product: Product) -> Product:
        self.db.add(product)
        await self.db.commit()
        # Перечитываем вместе с брендом и типом
        return await self.get_product(product.id)

    async def update_product(self, product: Product) -> bool:
        result = await self.db.execute(
            update(Product)
            .where(Product.id == product.id)
            .values(
                name=product.name,
                summary=product.summary,
                description=product.description,
                image_file=product.image_file,
                price=product.price,
                brand_id=product.brand_id,
                type_id=product.type_id,
            )
        )
        await self.db.commit()
        return result.rowcount > 0

    async def delete_product(self, product_id: str) -> bool:
        result = await self.db.execute(delete(Product).where(Product.id == product_id))
        await self.db.commit()
        return result.rowcount > 0

    async def get_all_brands(self) -> List[ProductBrand]:
        result = await self.db.execute(select(ProductBrand).order_by(ProductBrand.name))
        return list(result.scalars().all())

    async def get_all_types(self) -> List[ProductType]:
        result = await self.db.execute(select(ProductType).order_by(ProductType.name))
        return list(result.scalars().all())
