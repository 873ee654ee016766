# basket_service/db/cache.py
import os

from dotenv import load_dotenv
from redis.asyncio import Redis

load_dotenv()

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

# Один клиент на процесс, соединения берутся из его пула
redis_client = Redis.from_url(REDIS_URL, decode_responses=True)


async def get_redis() -> Redis:
    return redis_client
