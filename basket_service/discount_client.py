# basket_service/discount_client.py
import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class CouponModel(BaseModel):
    id: Optional[int] = None
    product_name: str
    description: Optional[str] = None
    amount: int


class DiscountClient:
    """Looks up coupons on the discount service by exact product name."""

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None, timeout: float = 5.0):
        self.client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def get_discount(self, product_name: str) -> Optional[CouponModel]:
        response = await self.client.get(f"/api/v1/Discount/{quote(product_name, safe='')}")
        if response.status_code == 404:
            logger.debug("No discount for %s", product_name)
            return None
        response.raise_for_status()
        return CouponModel.model_validate(response.json())

    async def aclose(self) -> None:
        await self.client.aclose()
