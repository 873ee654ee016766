# discount_service/db/repository.py
from typing import Optional

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from discount_service.db.models import Coupon


class DiscountRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_discount(self, product_name: str) -> Optional[Coupon]:
        result = await self.db.execute(select(Coupon).filter(Coupon.product_name == product_name))
        return result.scalars().first()

    async def create_discount(self, coupon: Coupon) -> Coupon:
        self.db.add(coupon)
        await self.db.commit()
        await self.db.refresh(coupon)
        return coupon

    async def update_discount(self, coupon: Coupon) -> bool:
        result = await self.db.execute(
            update(Coupon)
            .where(Coupon.id == coupon.id)
            .values(
                product_name=coupon.product_name,
                description=coupon.description,
                amount=coupon.amount,
            )
        )
        await self.db.commit()
        return result.rowcount > 0

    async def delete_discount(self, product_name: str) -> bool:
        result = await self.db.execute(delete(Coupon).where(Coupon.product_name == product_name))
        await self.db.commit()
        return result.rowcount > 0
