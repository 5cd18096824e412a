"""파손 기록 레포지토리.

Damage record repository — damage_records queries.
"""

from collections.abc import Iterable
from typing import Any

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from avarias.models.damage import DamageRecord
from avarias.repositories.base import InMemoryRepository, SqlRepository
from avarias.schemas.damage import DamageRecordResponse


class DamageRecordRepository(SqlRepository[DamageRecordResponse, DamageRecord]):

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, DamageRecord, DamageRecordResponse)

    def _base_query(self) -> Select:
        # 최근 보고 우선: Most recent reports first
        return super()._base_query().order_by(None).order_by(
            DamageRecord.date.desc(), DamageRecord.created_at, DamageRecord.id
        )


class InMemoryDamageRecordRepository(InMemoryRepository[DamageRecordResponse]):

    def __init__(self, seed: Iterable[dict[str, Any]] = ()) -> None:
        super().__init__(DamageRecordResponse, seed)
