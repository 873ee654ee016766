# eventbus/publisher.py
import asyncio
import logging
from typing import Optional, Set

import aio_pika

from eventbus.events import IntegrationBaseEvent

logger = logging.getLogger(__name__)


class EventPublisher:
    """Publishes integration events as JSON to durable queues on the default exchange."""

    def __init__(self, url: str):
        self.url = url
        self._connection: Optional[aio_pika.abc.AbstractRobustConnection] = None
        self._channel: Optional[aio_pika.abc.AbstractChannel] = None
        self._declared: Set[str] = set()
        self._lock = asyncio.Lock()

    async def _get_channel(self, routing_key: str) -> aio_pika.abc.AbstractChannel:
        async with self._lock:
            if self._connection is None:
                self._connection = await aio_pika.connect_robust(self.url)
            if self._channel is None or self._channel.is_closed:
                self._channel = await self._connection.channel()
                self._declared.clear()
            if routing_key not in self._declared:
                await self._channel.declare_queue(routing_key, durable=True)
                self._declared.add(routing_key)
            return self._channel

    async def publish(self, event: IntegrationBaseEvent, routing_key: str) -> None:
        channel = await self._get_channel(routing_key)
        await channel.default_exchange.publish(
            aio_pika.Message(
                body=event.model_dump_json().encode(),
                content_type="application/json",
                correlation_id=event.correlation_id,
                message_id=event.id,
                delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
            ),
            routing_key=routing_key,
        )
        logger.info("Published %s %s to %s", type(event).__name__, event.id, routing_key)

    async def close(self) -> None:
        if self._connection is not None:
            await self._connection.close()
        self._connection = None
        self._channel = None
        self._declared.clear()
