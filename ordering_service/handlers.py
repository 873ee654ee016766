# ordering_service/handlers.py
import logging
from typing import List

from fastapi import HTTPException

from eshop_common.mediator import Mediator
from ordering_service.commands import (
    CheckoutOrderCommand,
    DeleteOrderCommand,
    GetOrderListQuery,
    UpdateOrderCommand,
)
from ordering_service.db.models import Order
from ordering_service.db.repository import OrderRepository
from ordering_service.db.schemas import OrderResponse

logger = logging.getLogger(__name__)


class GetOrderListQueryHandler:
    def __init__(self, repository: OrderRepository):
        self.repository = repository

    async def handle(self, query: GetOrderListQuery) -> List[OrderResponse]:
        orders = await self.repository.get_orders_by_user_name(query.user_name)
        return [OrderResponse.model_validate(order) for order in orders]


class CheckoutOrderCommandHandler:
    def __init__(self, repository: OrderRepository):
        self.repository = repository

    async def handle(self, command: CheckoutOrderCommand) -> int:
        # Ключа идемпотентности нет: повторная доставка создаёт ещё один заказ
        generated_order = await self.repository.add(Order(**command.model_dump()))
        logger.info("Order %s successfully created for %s", generated_order.id, generated_order.user_name)
        return generated_order.id


class UpdateOrderCommandHandler:
    def __init__(self, repository: OrderRepository):
        self.repository = repository

    async def handle(self, command: UpdateOrderCommand) -> None:
        order = await self.repository.get_by_id(command.id)
        if order is None:
            raise HTTPException(status_code=404, detail=f"Order {command.id} not found")
        for field, value in command.model_dump(exclude={"id"}).items():
            setattr(order, field, value)
        await self.repository.update(order)
        logger.info("Order %s is successfully updated", order.id)


class DeleteOrderCommandHandler:
    def __init__(self, repository: OrderRepository):
        self.repository = repository

    async def handle(self, command: DeleteOrderCommand) -> None:
        order = await self.repository.get_by_id(command.id)
        if order is None:
            raise HTTPException(status_code=404, detail=f"Order {command.id} not found")
        await self.repository.delete(order)
        logger.info("Order %s is successfully deleted", command.id)


def build_mediator(repository: OrderRepository) -> Mediator:
    return Mediator({
        GetOrderListQuery: GetOrderListQueryHandler(repository),
        CheckoutOrderCommand: CheckoutOrderCommandHandler(repository),
        UpdateOrderCommand: UpdateOrderCommandHandler(repository),
        DeleteOrderCommand: DeleteOrderCommandHandler(repository),
    })
