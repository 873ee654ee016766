# ordering_service/db/database.py
import os

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

load_dotenv()

DATABASE_URL = (
    f"postgresql+asyncpg://{os.getenv('ORDERING_DB_USER', 'postgres')}:{os.getenv('ORDERING_DB_PASSWORD', 'postgres')}"
    f"@{os.getenv('ORDERING_DB_HOST', 'localhost')}:{os.getenv('ORDERING_DB_PORT', '5432')}"
    f"/{os.getenv('ORDERING_DB_NAME', 'orderdb')}"
)

engine = create_async_engine(DATABASE_URL, echo=os.getenv("DB_ECHO", "false").lower() == "true")

SessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False
)

Base = declarative_base()


async def get_db():
    async with SessionLocal() as session:
        yield session
