# eshop_common/retry.py
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRY_COUNT = 5


def _log_retry(retry_state: RetryCallState) -> None:
    logger.error(
        "Retry attempt %s because of: %s",
        retry_state.attempt_number,
        retry_state.outcome.exception(),
    )


async def run_with_retry(
    operation: Callable[[], Awaitable[T]],
    name: str,
    retry_count: int = RETRY_COUNT,
    wait: Optional[wait_base] = None,
) -> T:
    """
    Run a startup database operation, retrying connection failures.

    Waits 2, 4, 8, 16 and 32 seconds between attempts. The last failure is
    logged and re-raised so the service does not start without its schema.
    """
    logger.info("Started Db Migration: %s", name)
    try:
        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type((OSError, SQLAlchemyError)),
            stop=stop_after_attempt(retry_count + 1),
            wait=wait or wait_exponential(multiplier=2, exp_base=2),
            before_sleep=_log_retry,
            reraise=True,
        ):
            with attempt:
                result = await operation()
    except Exception:
        logger.exception("An error occurred while migrating db: %s", name)
        raise
    logger.info("Migration Completed: %s", name)
    return result
