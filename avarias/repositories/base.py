"""기록 저장소 인터페이스 및 어댑터.

Record store interface and adapters.

``RecordRepository`` declares the operations services rely on. Two adapters:

- ``InMemoryRepository``: per-instance copy of a fixture collection.
- ``SqlRepository``: SQLAlchemy async session over one ORM model.

Usage:
    class DamageRecordRepository(SqlRepository[DamageRecordResponse]):
        def __init__(self, db: AsyncSession) -> None:
            super().__init__(db, DamageRecord, DamageRecordResponse)
"""

import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from avarias.database import Base

# 제네릭 타입 변수: 레코드 스키마 / ORM 모델
# Generic type variables for the record schema and the ORM model
SchemaType = TypeVar("SchemaType", bound=BaseModel)
ModelType = TypeVar("ModelType", bound=Base)


class RecordRepository(ABC, Generic[SchemaType]):
    """기록 저장소 인터페이스.

    Storage interface for one record collection. ``get_all`` returns records
    in a stable order; ``create`` assigns an id when the payload has none.
    """

    @abstractmethod
    async def get_all(self) -> list[SchemaType]:
        """전체 기록 조회 (All records, stable order)."""

    @abstractmethod
    async def get_by_id(self, record_id: str) -> SchemaType | None:
        """ID로 단일 기록 조회 (One record or None)."""

    @abstractmethod
    async def create(self, obj_data: dict[str, Any]) -> SchemaType:
        """새 기록 생성 (Insert and return the stored record)."""

    @abstractmethod
    async def update(self, record_id: str, update_data: dict[str, Any]) -> SchemaType | None:
        """기록 부분 업데이트 (Partial update; None when the id is unknown)."""

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """기록 삭제 (True when a record was removed)."""

    async def commit(self) -> None:
        """변경 사항 확정 — 트랜잭션이 없는 어댑터는 아무것도 하지 않음.

        Persist pending changes. Adapters without transactions do nothing.
        """


class InMemoryRepository(RecordRepository[SchemaType]):
    """메모리 기록 저장소 — 픽스처 컬렉션의 인스턴스별 복사본.

    In-memory adapter. Each instance owns its own copy of the seed records,
    so two instances never observe each other's writes.

    Attributes:
        schema: 기록 스키마 클래스 (Record schema class)
    """

    def __init__(self, schema: type[SchemaType], seed: Iterable[dict[str, Any]] = ()) -> None:
        self.schema: type[SchemaType] = schema
        self._records: dict[str, SchemaType] = {}
        for data in seed:
            record: SchemaType = schema.model_validate(data)
            self._records[record.id] = record

    async def get_all(self) -> list[SchemaType]:
        return list(self._records.values())

    async def get_by_id(self, record_id: str) -> SchemaType | None:
        return self._records.get(record_id)

    async def create(self, obj_data: dict[str, Any]) -> SchemaType:
        data: dict[str, Any] = dict(obj_data)
        data.setdefault("id", uuid.uuid4().hex)
        record: SchemaType = self.schema.model_validate(data)
        self._records[record.id] = record
        return record

    async def update(self, record_id: str, update_data: dict[str, Any]) -> SchemaType | None:
        current: SchemaType | None = self._records.get(record_id)
        if current is None:
            return None
        # 재검증하여 enum/Decimal 변환 유지: Re-validate so enums and Decimals stay typed
        record: SchemaType = self.schema.model_validate({**current.model_dump(), **update_data})
        self._records[record_id] = record
        return record

    async def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None


class SqlRepository(RecordRepository[SchemaType], Generic[SchemaType, ModelType]):
    """SQLAlchemy 기록 저장소.

    SQLAlchemy adapter bound to one async session. Writes are flushed, not
    committed; callers finish the unit of work with ``commit()``.

    Attributes:
        db: 비동기 데이터베이스 세션 (Async database session)
        model: SQLAlchemy 모델 클래스 (ORM model class)
        schema: 기록 스키마 클래스 (Record schema class)
    """

    def __init__(self, db: AsyncSession, model: type[ModelType], schema: type[SchemaType]) -> None:
        self.db: AsyncSession = db
        self.model: type[ModelType] = model
        self.schema: type[SchemaType] = schema

    def _base_query(self) -> Select:
        """기본 정렬 쿼리 — 생성 순서 유지 (Creation order, id as tiebreaker)."""
        return select(self.model).order_by(self.model.created_at, self.model.id)

    async def _get_row(self, record_id: str) -> ModelType | None:
        result = await self.db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_all(self) -> list[SchemaType]:
        result = await self.db.execute(self._base_query())
        return [self.schema.model_validate(row) for row in result.scalars().all()]

    async def get_by_id(self, record_id: str) -> SchemaType | None:
        row: ModelType | None = await self._get_row(record_id)
        return self.schema.model_validate(row) if row is not None else None

    async def create(self, obj_data: dict[str, Any]) -> SchemaType:
        db_obj: ModelType = self.model(**obj_data)
        self.db.add(db_obj)
        await self.db.flush()
        await self.db.refresh(db_obj)
        return self.schema.model_validate(db_obj)

    async def update(self, record_id: str, update_data: dict[str, Any]) -> SchemaType | None:
        db_obj: ModelType | None = await self._get_row(record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await self.db.flush()
        await self.db.refresh(db_obj)
        return self.schema.model_validate(db_obj)

    async def delete(self, record_id: str) -> bool:
        db_obj: ModelType | None = await self._get_row(record_id)
        if db_obj is None:
            return False

        await self.db.delete(db_obj)
        await self.db.flush()
        return True

    async def commit(self) -> None:
        await self.db.commit()
