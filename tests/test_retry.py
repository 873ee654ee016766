"""Tests for the startup database retry wrapper."""
import pytest
from sqlalchemy.exc import OperationalError
from tenacity import wait_none

from eshop_common.retry import RETRY_COUNT, run_with_retry


class FlakyOperation:
    def __init__(self, failures, exc):
        self.failures = failures
        self.exc = exc
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.exc
        return "ready"


@pytest.mark.asyncio
async def test_succeeds_after_connection_failures():
    operation = FlakyOperation(2, ConnectionRefusedError("db starting"))

    result = await run_with_retry(operation, "TestContext", wait=wait_none())

    assert result == "ready"
    assert operation.calls == 3


@pytest.mark.asyncio
async def test_retries_sqlalchemy_errors():
    operation = FlakyOperation(1, OperationalError("SELECT 1", {}, Exception("down")))

    assert await run_with_retry(operation, "TestContext", wait=wait_none()) == "ready"
    assert operation.calls == 2


@pytest.mark.asyncio
async def test_reraises_after_last_attempt():
    operation = FlakyOperation(100, ConnectionRefusedError("db down"))

    with pytest.raises(ConnectionRefusedError):
        await run_with_retry(operation, "TestContext", wait=wait_none())

    assert operation.calls == RETRY_COUNT + 1


@pytest.mark.asyncio
async def test_other_errors_are_not_retried():
    operation = FlakyOperation(1, ValueError("bad seed data"))

    with pytest.raises(ValueError):
        await run_with_retry(operation, "TestContext", wait=wait_none())

    assert operation.calls == 1
