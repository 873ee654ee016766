# discount_service/db/init_db.py
import logging

from sqlalchemy import func
from sqlalchemy.future import select

from discount_service.db.database import Base, SessionLocal, engine
from discount_service.db.models import Coupon

logger = logging.getLogger(__name__)

SEED_COUPONS = [
    {
        "product_name": "Adidas Quick Force Indoor Badminton Shoes",
        "description": "Shoe Discount",
        "amount": 500,
    },
    {
        "product_name": "Yonex VCORE Pro 100 A Tennis Racquet (270gm, Strung)",
        "description": "Racquet Discount",
        "amount": 700,
    },
]


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        count = (await db.execute(select(func.count()).select_from(Coupon))).scalar_one()
        if count == 0:
            db.add_all([Coupon(**coupon) for coupon in SEED_COUPONS])
            await db.commit()
            logger.info("Seeded %d coupons", len(SEED_COUPONS))
