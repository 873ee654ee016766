# ordering_service/consumer.py
import asyncio
import logging

import aio_pika
from pydantic import ValidationError

from eshop_common.correlation import correlation_id_var
from eshop_common.mediator import Mediator
from eventbus.constants import BASKET_CHECKOUT_QUEUE
from eventbus.events import BasketCheckoutEvent
from ordering_service.commands import CheckoutOrderCommand
from ordering_service.db.database import SessionLocal
from ordering_service.db.repository import OrderRepository
from ordering_service.handlers import build_mediator

logger = logging.getLogger(__name__)

RECONNECT_DELAY = 5

EVENT_ONLY_FIELDS = {"id", "creation_date", "correlation_id"}


def to_checkout_order_command(event: BasketCheckoutEvent) -> CheckoutOrderCommand:
    return CheckoutOrderCommand.model_validate(event.model_dump(exclude=EVENT_ONLY_FIELDS))


async def handle_basket_checkout(body: bytes, mediator: Mediator) -> int:
    """Turn one checkout event into a new order and return its id."""
    try:
        event = BasketCheckoutEvent.model_validate_json(body)
    except ValidationError as e:
        logger.error("Malformed Basket Checkout Event rejected: %s", e)
        raise
    token = correlation_id_var.set(event.correlation_id)
    try:
        logger.info("Consuming Basket Checkout Event for %s", event.correlation_id)
        try:
            command = to_checkout_order_command(event)
        except ValidationError as e:
            logger.error(
                "Basket Checkout Event %s (correlation %s) rejected: %s",
                event.id,
                event.correlation_id,
                e,
            )
            raise
        order_id = await mediator.send(command)
        logger.info("Basket Checkout Event completed, order %s", order_id)
        return order_id
    finally:
        correlation_id_var.reset(token)


async def on_message(message: aio_pika.abc.AbstractIncomingMessage) -> None:
    # Ошибка обработки: reject без повторной постановки в очередь
    async with message.process(requeue=False):
        async with SessionLocal() as db:
            await handle_basket_checkout(message.body, build_mediator(OrderRepository(db)))


async def consume_messages(url: str) -> None:
    """
    Consume checkout events from RabbitMQ.
    Reconnects every few seconds while the broker is unavailable.
    """
    while True:
        try:
            connection = await aio_pika.connect_robust(url)
            async with connection:
                channel = await connection.channel()
                await channel.set_qos(prefetch_count=10)
                queue = await channel.declare_queue(BASKET_CHECKOUT_QUEUE, durable=True)
                await queue.consume(on_message)
                logger.info("Listening for messages on %s", BASKET_CHECKOUT_QUEUE)
                await asyncio.Future()
        except aio_pika.exceptions.AMQPConnectionError:
            logger.warning("RabbitMQ not available. Retrying in %s seconds...", RECONNECT_DELAY)
            await asyncio.sleep(RECONNECT_DELAY)
        except Exception:
            logger.exception("Checkout consumer failed. Reconnecting in %s seconds...", RECONNECT_DELAY)
            await asyncio.sleep(RECONNECT_DELAY)
