"""판매 기록 레포지토리.

Sale record repository — sale_records queries.
"""

from collections.abc import Iterable
from typing import Any

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from avarias.models.sale import SaleRecord
from avarias.repositories.base import InMemoryRepository, SqlRepository
from avarias.schemas.sale import SaleRecordResponse


class SaleRecordRepository(SqlRepository[SaleRecordResponse, SaleRecord]):

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, SaleRecord, SaleRecordResponse)

    def _base_query(self) -> Select:
        return super()._base_query().order_by(None).order_by(
            SaleRecord.date.desc(), SaleRecord.created_at, SaleRecord.id
        )


class InMemorySaleRecordRepository(InMemoryRepository[SaleRecordResponse]):

    def __init__(self, seed: Iterable[dict[str, Any]] = ()) -> None:
        super().__init__(SaleRecordResponse, seed)
