"""파손 상품 판매 기록 SQLAlchemy ORM 모델 정의.

Sale record ORM model definition.

Tables:
    - sale_records: 파손 상품 할인 판매 (Completed discounted sale of a damaged unit)
"""

import uuid
import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, DateTime, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from avarias.database import Base


class SaleRecord(Base):
    """판매 기록 모델 — 파손 기록을 참조하는 할인 판매 한 건.

    Sale record model — A completed discounted sale tied to a prior damage report.
    ``damage_id`` is a plain column, not a foreign key: sales may reference
    damage codes from systems that never fed this table.

    Attributes:
        id: 고유 식별자 (Unique identifier, string)
        date: 판매 일자 (Sale date)
        product: 상품 표시 이름 (Product display name)
        seller: 판매자 이름 (Seller name)
        approver: 승인자 이름 (Approver name)
        damage_id: 파손 기록 참조 (Referenced damage record, unenforced)
        original_price: 정가 (Original price)
        final_price: 판매가 (Final price after discount)
        discount_rate: 표시용 할인율 (Advertised discount fraction)
        sector: 매장 섹터 (Store sector, optional)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "sale_records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: uuid.uuid4().hex)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    product: Mapped[str] = mapped_column(String(255), nullable=False)
    seller: Mapped[str] = mapped_column(String(255), nullable=False)
    approver: Mapped[str] = mapped_column(String(255), nullable=False)
    # 파손 기록 참조: Damage record reference (no FK constraint)
    damage_id: Mapped[str] = mapped_column(String(36), nullable=False)
    # 금액: Currency amounts, two fractional digits
    original_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    final_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    # 할인율: Advertised discount fraction, not derived from prices
    discount_rate: Mapped[Decimal] = mapped_column(Numeric(5, 4), default=Decimal("0"))
    sector: Mapped[str | None] = mapped_column(String(30), nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=lambda: dt.datetime.now(dt.timezone.utc))
