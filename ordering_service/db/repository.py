# ordering_service/db/repository.py
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from ordering_service.db.audit import save_changes
from ordering_service.db.models import Order


class OrderRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_orders_by_user_name(self, user_name: str) -> List[Order]:
        result = await self.db.execute(
            select(Order).filter(Order.user_name == user_name).order_by(Order.id)
        )
        return list(result.scalars().all())

    async def get_by_id(self, order_id: int) -> Optional[Order]:
        result = await self.db.execute(select(Order).filter(Order.id == order_id))
        return result.scalar_one_or_none()

    async def add(self, order: Order) -> Order:
        self.db.add(order)
        await save_changes(self.db)
        await self.db.refresh(order)
        return order

    async def update(self, order: Order) -> None:
        await save_changes(self.db)

    async def delete(self, order: Order) -> None:
        await self.db.delete(order)
        await save_changes(self.db)
