"""FastAPI 의존성 주입 모듈 — 기록 저장소 선택.

FastAPI dependency injection module — Record store selection.
With ``STORAGE_BACKEND=memory`` every request shares the process-wide
in-memory stores seeded from the fixtures. With ``database`` each request
gets SQLAlchemy repositories bound to its own session.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from avarias.config import settings
from avarias.database import async_session
from avarias.repositories.base import RecordRepository
from avarias.repositories.damage_repository import DamageRecordRepository, InMemoryDamageRecordRepository
from avarias.repositories.sale_repository import InMemorySaleRecordRepository, SaleRecordRepository
from avarias.schemas.damage import DamageRecordResponse
from avarias.schemas.sale import SaleRecordResponse
from avarias.seed import DAMAGE_FIXTURES, SALE_FIXTURES

# 프로세스 단위 메모리 저장소: Process-wide in-memory stores
memory_damage_records: InMemoryDamageRecordRepository = InMemoryDamageRecordRepository(DAMAGE_FIXTURES)
memory_sale_records: InMemorySaleRecordRepository = InMemorySaleRecordRepository(SALE_FIXTURES)


async def get_session() -> AsyncGenerator[AsyncSession | None, None]:
    """요청 단위 DB 세션 — None for the memory backend, so no connection is opened."""
    if settings.STORAGE_BACKEND != "database":
        yield None
        return
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


async def get_damage_repository(
    db: Annotated[AsyncSession | None, Depends(get_session)],
) -> RecordRepository[DamageRecordResponse]:
    if db is None:
        return memory_damage_records
    return DamageRecordRepository(db)


async def get_sale_repository(
    db: Annotated[AsyncSession | None, Depends(get_session)],
) -> RecordRepository[SaleRecordResponse]:
    if db is None:
        return memory_sale_records
    return SaleRecordRepository(db)


DamageRepo = Annotated[RecordRepository[DamageRecordResponse], Depends(get_damage_repository)]
SaleRepo = Annotated[RecordRepository[SaleRecordResponse], Depends(get_sale_repository)]
