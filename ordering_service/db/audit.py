# ordering_service/db/audit.py
import os
from datetime import datetime
from typing import Iterable, Optional

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession

from ordering_service.db.models import EntityBase

load_dotenv()

AUDIT_USER = os.getenv("ORDERING_AUDIT_USER", "ordering_service")


def apply_audit_fields(
    added: Iterable[object],
    modified: Iterable[object],
    user: str = AUDIT_USER,
    now: Optional[datetime] = None,
) -> None:
    """Stamp created_* on new entities and last_modified_* on changed ones."""
    now = now or datetime.now()
    for entity in added:
        if isinstance(entity, EntityBase):
            entity.created_date = now
            entity.created_by = user
    for entity in modified:
        if isinstance(entity, EntityBase):
            entity.last_modified_date = now
            entity.last_modified_by = user


async def save_changes(db: AsyncSession) -> None:
    """Commit the session; every ordering write goes through here."""
    apply_audit_fields(list(db.new), list(db.dirty))
    await db.commit()
