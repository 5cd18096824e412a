"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
``Base.metadata.create_all``.

Modules:
    damage: 파손 상품 기록 (Damaged merchandise records)
    sale: 파손 상품 할인 판매 기록 (Discounted sales of damaged merchandise)
"""

from avarias.models.damage import DamageRecord
from avarias.models.sale import SaleRecord

__all__ = [
    "DamageRecord",
    "SaleRecord",
]
