# discount_service/handlers.py
import logging

from fastapi import HTTPException

from eshop_common.mediator import Mediator
from discount_service.commands import (
    CreateDiscountCommand,
    DeleteDiscountCommand,
    GetDiscountQuery,
    UpdateDiscountCommand,
)
from discount_service.db.models import Coupon
from discount_service.db.repository import DiscountRepository
from discount_service.db.schemas import CouponModel, DeleteDiscountResponse

logger = logging.getLogger(__name__)


class GetDiscountQueryHandler:
    def __init__(self, repository: DiscountRepository):
        self.repository = repository

    async def handle(self, query: GetDiscountQuery) -> CouponModel:
        coupon = await self.repository.get_discount(query.product_name)
        if coupon is None:
            raise HTTPException(
                status_code=404,
                detail=f"Discount with the product name = {query.product_name} not found",
            )
        logger.info("Coupon for %s retrieved, amount %s", coupon.product_name, coupon.amount)
        return CouponModel.model_validate(coupon)


class CreateDiscountCommandHandler:
    def __init__(self, repository: DiscountRepository):
        self.repository = repository

    async def handle(self, command: CreateDiscountCommand) -> CouponModel:
        coupon = await self.repository.create_discount(
            Coupon(
                product_name=command.product_name,
                description=command.description,
                amount=command.amount,
            )
        )
        logger.info("Coupon for %s created", coupon.product_name)
        return CouponModel.model_validate(coupon)


class UpdateDiscountCommandHandler:
    def __init__(self, repository: DiscountRepository):
        self.repository = repository

    async def handle(self, command: UpdateDiscountCommand) -> CouponModel:
        coupon = Coupon(
            id=command.id,
            product_name=command.product_name,
            description=command.description,
            amount=command.amount,
        )
        updated = await self.repository.update_discount(coupon)
        if not updated:
            raise HTTPException(status_code=404, detail=f"Discount with id = {command.id} not found")
        return CouponModel.model_validate(coupon)


class DeleteDiscountCommandHandler:
    def __init__(self, repository: DiscountRepository):
        self.repository = repository

    async def handle(self, command: DeleteDiscountCommand) -> DeleteDiscountResponse:
        deleted = await self.repository.delete_discount(command.product_name)
        return DeleteDiscountResponse(success=deleted)


def build_mediator(repository: DiscountRepository) -> Mediator:
    return Mediator({
        GetDiscountQuery: GetDiscountQueryHandler(repository),
        CreateDiscountCommand: CreateDiscountCommandHandler(repository),
        UpdateDiscountCommand: UpdateDiscountCommandHandler(repository),
        DeleteDiscountCommand: DeleteDiscountCommandHandler(repository),
    })
