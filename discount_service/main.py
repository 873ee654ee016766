# discount_service/main.py
import os
from typing import AsyncGenerator

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession
import uvicorn

from eshop_common.correlation import CorrelationIdMiddleware
from eshop_common.log_config import configure_logging
from eshop_common.mediator import Mediator
from eshop_common.retry import run_with_retry
from discount_service.commands import (
    CreateDiscountCommand,
    DeleteDiscountCommand,
    GetDiscountQuery,
    UpdateDiscountCommand,
)
from discount_service.db.database import get_db
from discount_service.db.init_db import init_db
from discount_service.db.repository import DiscountRepository
from discount_service.db.schemas import CouponModel, DeleteDiscountResponse
from discount_service.handlers import build_mediator

configure_logging()


async def lifespan(app: FastAPI) -> AsyncGenerator:
    await run_with_retry(init_db, "DiscountContext")
    yield


app = FastAPI(lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)


def get_repository(db: AsyncSession = Depends(get_db)) -> DiscountRepository:
    return DiscountRepository(db)


def get_mediator(repository: DiscountRepository = Depends(get_repository)) -> Mediator:
    return build_mediator(repository)


router = APIRouter(prefix="/api/v1/Discount", tags=["Discount"])


@router.get("/{product_name:path}", response_model=CouponModel)
async def get_discount(product_name: str, mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(GetDiscountQuery(product_name=product_name))


@router.post("/", response_model=CouponModel)
async def create_discount(command: CreateDiscountCommand, mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(command)


@router.put("/", response_model=CouponModel)
async def update_discount(command: UpdateDiscountCommand, mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(command)


@router.delete("/{product_name:path}", response_model=DeleteDiscountResponse)
async def delete_discount(product_name: str, mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(DeleteDiscountCommand(product_name=product_name))


app.include_router(router)


@app.get("/")
async def health_check():
    """Health check endpoint."""
    return {"status": "discount_service running"}


def run():
    uvicorn.run(
        "discount_service.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("DISCOUNT_PORT", "8002")),
    )


if __name__ == "__main__":
    run()
