# basket_service/handlers.py
import logging
from typing import Optional

from basket_service.commands import (
    BasketCheckout,
    CreateShoppingCartCommand,
    DeleteBasketByUserNameCommand,
    GetBasketByUserNameQuery,
)
from basket_service.db.repository import BasketRepository
from basket_service.db.schemas import ShoppingCart, ShoppingCartResponse
from basket_service.discount_client import DiscountClient
from eshop_common.mediator import Mediator
from eventbus.events import BasketCheckoutEvent

logger = logging.getLogger(__name__)


class GetBasketByUserNameHandler:
    def __init__(self, repository: BasketRepository):
        self.repository = repository

    async def handle(self, query: GetBasketByUserNameQuery) -> Optional[ShoppingCartResponse]:
        cart = await self.repository.get_basket(query.user_name)
        return ShoppingCartResponse.from_cart(cart)


class CreateShoppingCartCommandHandler:
    def __init__(self, repository: BasketRepository, discount_client: DiscountClient):
        self.repository = repository
        self.discount_client = discount_client

    async def handle(self, command: CreateShoppingCartCommand) -> Optional[ShoppingCartResponse]:
        # Купон это фиксированная сумма, вычитается из цены без ограничения снизу
        for item in command.items:
            coupon = await self.discount_client.get_discount(item.product_name)
            if coupon is not None:
                item.price -= coupon.amount
        cart = await self.repository.update_basket(
            ShoppingCart(user_name=command.user_name, items=command.items)
        )
        return ShoppingCartResponse.from_cart(cart)


class DeleteBasketByUserNameHandler:
    def __init__(self, repository: BasketRepository):
        self.repository = repository

    async def handle(self, command: DeleteBasketByUserNameCommand) -> None:
        await self.repository.delete_basket(command.user_name)


def to_checkout_event(basket_checkout: BasketCheckout) -> BasketCheckoutEvent:
    return BasketCheckoutEvent(**basket_checkout.model_dump())


def build_mediator(repository: BasketRepository, discount_client: DiscountClient) -> Mediator:
    return Mediator({
        GetBasketByUserNameQuery: GetBasketByUserNameHandler(repository),
        CreateShoppingCartCommand: CreateShoppingCartCommandHandler(repository, discount_client),
        DeleteBasketByUserNameCommand: DeleteBasketByUserNameHandler(repository),
    })
