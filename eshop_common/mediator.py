# eshop_common/mediator.py
import logging
from typing import Any, Dict, Mapping, Optional, Protocol

logger = logging.getLogger(__name__)


class RequestHandler(Protocol):
    async def handle(self, request: Any) -> Any: ...


class HandlerNotFoundError(LookupError):
    pass


class Mediator:
    """
    Sends a command or query to the one handler registered for its type.

    Handlers are plain objects built with their dependencies at wiring time,
    so a mediator is cheap to assemble per request.
    """

    def __init__(self, handlers: Optional[Mapping[type, RequestHandler]] = None):
        self._handlers: Dict[type, RequestHandler] = {}
        for request_type, handler in (handlers or {}).items():
            self.register(request_type, handler)

    def register(self, request_type: type, handler: RequestHandler) -> None:
        if request_type in self._handlers:
            raise ValueError(f"A handler is already registered for {request_type.__name__}")
        self._handlers[request_type] = handler

    async def send(self, request: Any) -> Any:
        if request is None:
            raise ValueError("Request can not be None")
        handler = self._handlers.get(type(request))
        if handler is None:
            raise HandlerNotFoundError(f"No handler registered for {type(request).__name__}")
        logger.debug("Dispatching %s to %s", type(request).__name__, type(handler).__name__)
        return await handler.handle(request)
