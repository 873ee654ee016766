"""Shared pytest fixtures for the service tests."""
from decimal import Decimal

import pytest

from basket_service.db.repository import BasketRepository


class FakeRedis:
    """In-memory stand-in for the few redis.asyncio calls the basket repository makes."""

    def __init__(self):
        self.store = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value):
        self.store[key] = value
        return True

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.store.pop(key, None) is not None:
                removed += 1
        return removed


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def basket_repository(fake_redis) -> BasketRepository:
    return BasketRepository(fake_redis)


@pytest.fixture
def checkout_payload() -> dict:
    return {
        "user_name": "testuser",
        "first_name": "John",
        "last_name": "Doe",
        "email_address": "john.doe@example.com",
        "address_line": "123 Main St",
        "country": "USA",
        "state": "CA",
        "zip_code": "12345",
        "card_name": "John Doe",
        "card_number": "1234567890123456",
        "expiration": "12/25",
        "cvv": "123",
        "payment_method": 1,
        "total_price": "100.00",
    }


@pytest.fixture
def order_payload() -> dict:
    return {
        "user_name": "testuser",
        "total_price": Decimal("125.00"),
        "first_name": "John",
        "last_name": "Doe",
        "email_address": "john.doe@example.com",
        "address_line": "123 Main St",
        "country": "USA",
        "state": "CA",
        "zip_code": "12345",
        "card_name": "John Doe",
        "card_number": "1234567890123456",
        "expiration": "12/25",
        "cvv": "123",
        "payment_method": 1,
    }
