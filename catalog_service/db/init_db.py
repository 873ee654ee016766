# catalog_service/db/init_db.py
import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from catalog_service.db.database import Base, SessionLocal, engine
from catalog_service.db.models import Product, ProductBrand, ProductType

logger = logging.getLogger(__name__)

SEED_DATA_DIR = Path(__file__).parent / "seed_data"


def load_seed_file(name: str, seed_dir: Path = SEED_DATA_DIR) -> Optional[List[dict]]:
    path = seed_dir / name
    if not path.exists():
        logger.warning("Could not find %s seed file at: %s", name, path)
        return None
    with path.open(encoding="utf-8") as f:
        return json.load(f)


async def seed_table(db: AsyncSession, model, file_name: str, seed_dir: Path = SEED_DATA_DIR) -> int:
    """Insert the fixture rows for ``model`` when its table is empty; returns the number inserted."""
    count = (await db.execute(select(func.count()).select_from(model))).scalar_one()
    if count:
        return 0
    rows = load_seed_file(file_name, seed_dir)
    if not rows:
        return 0
    if model is Product:
        for row in rows:
            row["price"] = Decimal(str(row["price"]))
    db.add_all([model(**row) for row in rows])
    await db.commit()
    logger.info("Successfully seeded %d rows into %s", len(rows), model.__tablename__)
    return len(rows)


async def init_db():
    async with engine.begin() as conn:
        # Создание всех таблиц
        await conn.run_sync(Base.metadata.create_all)

    # Бренды и типы раньше товаров из-за внешних ключей
    async with SessionLocal() as db:
        await seed_table(db, ProductBrand, "brands.json")
        await seed_table(db, ProductType, "types.json")
        await seed_table(db, Product, "products.json")
