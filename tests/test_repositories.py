"""Repository tests against an in-memory SQLite database."""
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog_service.db.database import Base as CatalogBase
from catalog_service.db.models import Product, ProductBrand, ProductType
from catalog_service.db.repository import ProductRepository
from catalog_service.db.schemas import CatalogSpecParams
from ordering_service.commands import CheckoutOrderCommand
from ordering_service.db.audit import AUDIT_USER
from ordering_service.db.database import Base as OrderingBase
from ordering_service.db.models import Order
from ordering_service.db.repository import OrderRepository
from ordering_service.handlers import build_mediator

ADIDAS = "63ca5e40e0aa3968b549af53"
YONEX = "63ca5e6f6c1f6b6a4e73b2a1"
SHOES = "63ca5d4bc3a8a58f47299f97"


async def _sqlite_session_factory(base):
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(base.metadata.create_all)
    return engine, sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def catalog_session():
    engine, session_factory = await _sqlite_session_factory(CatalogBase)
    async with session_factory() as session:
        session.add_all([
            ProductBrand(id=ADIDAS, name="Adidas"),
            ProductBrand(id=YONEX, name="Yonex"),
            ProductType(id=SHOES, name="Shoes"),
        ])
        # P00..P24, цена равна номеру; чётные Adidas, нечётные Yonex
        session.add_all([
            Product(
                id=f"p{i:02d}",
                name=f"P{i:02d}",
                price=Decimal(i),
                brand_id=ADIDAS if i % 2 == 0 else YONEX,
                type_id=SHOES,
            )
            for i in range(25)
        ])
        await session.commit()
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def ordering_session():
    engine, session_factory = await _sqlite_session_factory(OrderingBase)
    async with session_factory() as session:
        yield session
    await engine.dispose()


def _names(products):
    return [product.name for product in products]


class TestProductPaging:
    @pytest.mark.asyncio
    async def test_third_page_by_price_descending(self, catalog_session):
        params = CatalogSpecParams(page_index=3, page_size=10, sort="priceDesc")

        count, products = await ProductRepository(catalog_session).get_products(params)

        assert count == 25
        assert _names(products) == ["P04", "P03", "P02", "P01", "P00"]

    @pytest.mark.asyncio
    async def test_second_page_by_price_ascending(self, catalog_session):
        params = CatalogSpecParams(page_index=2, page_size=10, sort="priceAsc")

        count, products = await ProductRepository(catalog_session).get_products(params)

        assert count == 25
        assert _names(products) == [f"P{i:02d}" for i in range(10, 20)]

    @pytest.mark.asyncio
    async def test_default_order_is_by_name(self, catalog_session):
        count, products = await ProductRepository(catalog_session).get_products(CatalogSpecParams(page_size=3))

        assert count == 25
        assert _names(products) == ["P00", "P01", "P02"]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_and_counts_matches(self, catalog_session):
        params = CatalogSpecParams(search="p0", page_size=5)

        count, products = await ProductRepository(catalog_session).get_products(params)

        assert count == 10
        assert _names(products) == ["P00", "P01", "P02", "P03", "P04"]

    @pytest.mark.asyncio
    async def test_count_is_filtered_total_not_page_length(self, catalog_session):
        params = CatalogSpecParams(brand_id=ADIDAS, page_size=5)

        count, products = await ProductRepository(catalog_session).get_products(params)

        assert count == 13
        assert len(products) == 5
        assert all(product.brand.name == "Adidas" for product in products)

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, catalog_session):
        params = CatalogSpecParams(page_index=4, page_size=10)

        count, products = await ProductRepository(catalog_session).get_products(params)

        assert count == 25
        assert list(products) == []


class TestProductRepository:
    @pytest.mark.asyncio
    async def test_get_product_loads_brand_and_type(self, catalog_session):
        product = await ProductRepository(catalog_session).get_product("p03")

        assert product.name == "P03"
        assert product.brand.name == "Yonex"
        assert product.type.name == "Shoes"

    @pytest.mark.asyncio
    async def test_products_by_brand_name(self, catalog_session):
        products = await ProductRepository(catalog_session).get_products_by_brand("Yonex")

        assert len(products) == 12
        assert _names(products)[:2] == ["P01", "P03"]

    @pytest.mark.asyncio
    async def test_create_product_generates_id(self, catalog_session):
        repository = ProductRepository(catalog_session)

        created = await repository.create_product(
            Product(name="New Racquet", price=Decimal("9.99"), brand_id=YONEX, type_id=SHOES)
        )

        assert len(created.id) == 24
        assert created.brand.name == "Yonex"
        assert (await repository.get_products_by_name("New Racquet"))[0].id == created.id

    @pytest.mark.asyncio
    async def test_update_and_delete_report_whether_a_row_changed(self, catalog_session):
        repository = ProductRepository(catalog_session)
        missing = Product(id="missing", name="X", price=Decimal("1"), brand_id=ADIDAS, type_id=SHOES)

        assert await repository.update_product(missing) is False
        assert await repository.delete_product("p00") is True
        assert await repository.delete_product("p00") is False
        assert await repository.get_product("p00") is None


class TestOrderRepository:
    @pytest.mark.asyncio
    async def test_add_stamps_created_fields(self, ordering_session, order_payload):
        order = await OrderRepository(ordering_session).add(Order(**order_payload))

        assert order.id is not None
        assert order.created_by == AUDIT_USER
        assert order.created_date is not None
        assert order.last_modified_by is None
        assert order.last_modified_date is None

    @pytest.mark.asyncio
    async def test_update_stamps_last_modified_fields(self, ordering_session, order_payload):
        repository = OrderRepository(ordering_session)
        order_id = (await repository.add(Order(**order_payload))).id

        order = await repository.get_by_id(order_id)
        order.first_name = "Jane"
        await repository.update(order)
        await ordering_session.refresh(order)

        assert order.first_name == "Jane"
        assert order.created_by == AUDIT_USER
        assert order.last_modified_by == AUDIT_USER
        assert order.last_modified_date is not None

    @pytest.mark.asyncio
    async def test_same_checkout_twice_creates_two_orders(self, ordering_session, order_payload):
        repository = OrderRepository(ordering_session)
        mediator = build_mediator(repository)

        first = await mediator.send(CheckoutOrderCommand(**order_payload))
        second = await mediator.send(CheckoutOrderCommand(**order_payload))

        assert (first, second) == (1, 2)
        orders = await repository.get_orders_by_user_name(order_payload["user_name"])
        assert [order.id for order in orders] == [1, 2]

    @pytest.mark.asyncio
    async def test_delete_removes_order(self, ordering_session, order_payload):
        repository = OrderRepository(ordering_session)
        order = await repository.add(Order(**order_payload))

        await repository.delete(order)

        assert await repository.get_by_id(order.id) is None
        assert await repository.get_orders_by_user_name(order_payload["user_name"]) == []
