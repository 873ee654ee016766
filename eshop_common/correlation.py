# eshop_common/correlation.py
import logging
import uuid
from contextvars import ContextVar
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

CORRELATION_ID_HEADER = "X-Correlation-Id"

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def new_correlation_id() -> str:
    return str(uuid.uuid4())


def get_correlation_id() -> str:
    """Return the correlation id of the current request or message, creating one if none is bound."""
    correlation_id = correlation_id_var.get()
    if correlation_id is None:
        correlation_id = new_correlation_id()
        correlation_id_var.set(correlation_id)
    return correlation_id


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds the caller's X-Correlation-Id (or a fresh one) for the duration of a request."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or new_correlation_id()
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_var.get() or "-"
        return True
