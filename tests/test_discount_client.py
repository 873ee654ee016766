"""Tests for the basket-side discount lookup client."""
import httpx
import pytest

from basket_service.discount_client import DiscountClient


def _client(handler) -> DiscountClient:
    http_client = httpx.AsyncClient(base_url="http://discount", transport=httpx.MockTransport(handler))
    return DiscountClient("http://discount", client=http_client)


@pytest.mark.asyncio
async def test_returns_coupon_for_known_product():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/v1/Discount/Test Product"
        return httpx.Response(
            200,
            json={"id": 3, "product_name": "Test Product", "description": "Promo", "amount": 10},
        )

    client = _client(handler)
    coupon = await client.get_discount("Test Product")
    await client.aclose()

    assert coupon is not None
    assert coupon.id == 3
    assert coupon.amount == 10


@pytest.mark.asyncio
async def test_not_found_means_no_coupon():
    client = _client(lambda request: httpx.Response(404, json={"detail": "not found"}))

    assert await client.get_discount("Unknown") is None
    await client.aclose()


@pytest.mark.asyncio
async def test_escapes_slashes_in_product_name():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.raw_path)
        return httpx.Response(404)

    client = _client(handler)
    await client.get_discount("A/B Racquet")
    await client.aclose()

    assert seen == [b"/api/v1/Discount/A%2FB%20Racquet"]


@pytest.mark.asyncio
async def test_server_error_propagates():
    client = _client(lambda request: httpx.Response(500))

    with pytest.raises(httpx.HTTPStatusError):
        await client.get_discount("Test Product")
    await client.aclose()
