# ordering_service/db/init_db.py
import logging
from decimal import Decimal

from sqlalchemy import func
from sqlalchemy.future import select

from ordering_service.db.audit import save_changes
from ordering_service.db.database import Base, SessionLocal, engine
from ordering_service.db.models import Order

logger = logging.getLogger(__name__)


def get_seed_orders():
    return [
        Order(
            user_name="jdoe",
            first_name="John",
            last_name="Doe",
            email_address="jdoe@eshop.net",
            address_line="Montreal",
            country="Canada",
            state="QC",
            zip_code="H2X 1Y4",
            total_price=Decimal("750.00"),
            card_name="Visa",
            card_number="1234567890123456",
            expiration="12/28",
            cvv="123",
            payment_method=1,
        )
    ]


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        count = (await db.execute(select(func.count()).select_from(Order))).scalar_one()
        if count == 0:
            db.add_all(get_seed_orders())
            await save_changes(db)
            logger.info("Ordering database seeded")
