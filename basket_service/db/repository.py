# basket_service/db/repository.py
import logging
from typing import Optional

from redis.asyncio import Redis

from basket_service.db.schemas import ShoppingCart

logger = logging.getLogger(__name__)


class BasketRepository:
    """Stores one serialized cart per user name; the key's existence is the cart's existence."""

    def __init__(self, redis: Redis):
        self.redis = redis

    async def get_basket(self, user_name: str) -> Optional[ShoppingCart]:
        basket = await self.redis.get(user_name)
        if not basket:
            return None
        return ShoppingCart.model_validate_json(basket)

    async def update_basket(self, cart: ShoppingCart) -> Optional[ShoppingCart]:
        await self.redis.set(cart.user_name, cart.model_dump_json())
        logger.debug("Basket for %s saved with %d items", cart.user_name, len(cart.items))
        return await self.get_basket(cart.user_name)

    async def delete_basket(self, user_name: str) -> None:
        await self.redis.delete(user_name)
