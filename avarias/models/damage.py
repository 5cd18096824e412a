"""파손 상품 기록 SQLAlchemy ORM 모델 정의.

Damage record ORM model definition.

Tables:
    - damage_records: 파손 상품 기록 (One damaged retail unit and its handling status)
"""

import uuid
import datetime as dt
from decimal import Decimal

from sqlalchemy import JSON, Date, DateTime, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from avarias.database import Base


class DamageRecord(Base):
    """파손 기록 모델 — 매장에서 보고된 파손 상품 한 건.

    Damage record model — One damaged unit reported in a store.
    The status column is guarded by the transition rules in
    ``avarias.services.damage_service``; the table itself accepts any value.

    Attributes:
        id: 고유 식별자 (Unique identifier, string)
        sku: 상품 코드 SKU/EAN (Product identifier, not checksum-validated)
        product: 상품 표시 이름 (Product display name)
        description: 파손 내용 설명 (Free-text damage description)
        status: 처리 상태 (Status: "pending" -> "approved" -> "sold")
        date: 보고 일자 (Calendar date of the report)
        responsible: 승인/처리 담당자 이름 (Employee who authorized/handled it)
        discount_rate: 승인된 할인율 (Authorized discount as a fraction, e.g. 0.1000)
        sector: 매장 섹터 (Store sector, optional)
        photos: 사진 참조 목록 (Photo references, at most MAX_PHOTOS)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "damage_records"

    # 기록 고유 식별자: Record identifier (string; fixtures use short codes like "001")
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: uuid.uuid4().hex)
    # 상품 코드: SKU / EAN barcode
    sku: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    # 상품명: Product display name
    product: Mapped[str] = mapped_column(String(255), nullable=False)
    # 파손 설명: Damage description
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # 처리 상태: "pending" | "approved" | "sold"
    status: Mapped[str] = mapped_column(String(20), default="pending", index=True)
    # 보고 일자: Report date
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    # 담당자: Responsible employee
    responsible: Mapped[str] = mapped_column(String(255), nullable=False)
    # 할인율: Authorized discount fraction (0.0000 ~ 1.0000)
    discount_rate: Mapped[Decimal] = mapped_column(Numeric(5, 4), default=Decimal("0"))
    # 섹터: "alimentar" | "higiene" | "limpeza" (NULL = unassigned)
    sector: Mapped[str | None] = mapped_column(String(30), nullable=True)
    # 사진 참조: [{"filename": ..., "content_type": ...}]
    photos: Mapped[list] = mapped_column(JSON, default=list)
    # 생성 일시: Record creation timestamp (UTC)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=lambda: dt.datetime.now(dt.timezone.utc))
