"""파손 기록 Pydantic 스키마.

Damage record request/response schemas.
``DamageRecordResponse`` doubles as the domain value the filter engine works
on: both record store adapters return it, never ORM rows.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from avarias.utils.formatting import format_percent


class DamageStatus(str, Enum):
    """파손 처리 상태 — pending -> approved -> sold."""

    PENDING = "pending"
    APPROVED = "approved"
    SOLD = "sold"


class Sector(str, Enum):
    """매장 섹터 (Store sector)."""

    ALIMENTAR = "alimentar"
    HIGIENE = "higiene"
    LIMPEZA = "limpeza"


class PhotoRef(BaseModel):
    """첨부 사진 참조 — 바이너리는 외부 스토리지에 보관 (Binary lives in external storage)."""

    filename: str
    content_type: str = "image/jpeg"


class DamageRecordResponse(BaseModel):
    """파손 기록 응답 스키마.

    Damage record as served to clients and consumed by the filter engine.

    Attributes:
        id: 기록 식별자 (Record identifier)
        sku: 상품 코드 (SKU / EAN)
        product: 상품명 (Product display name)
        description: 파손 설명 (Damage description)
        status: 처리 상태 (Handling status)
        date: 보고 일자 (Report date)
        responsible: 담당자 (Responsible employee)
        discount_rate: 할인율 분수 (Discount as a fraction; source of truth)
        sector: 섹터 (Store sector, optional)
        photos: 사진 참조 (Photo references)
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    sku: str
    product: str
    description: str
    status: DamageStatus
    date: dt.date
    responsible: str
    discount_rate: Decimal = Decimal("0")
    sector: Sector | None = None
    photos: list[PhotoRef] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def discount(self) -> str:
        """표시용 할인율 — Display string such as "10%"."""
        return format_percent(self.discount_rate)


class DamageRecordCreate(BaseModel):
    """파손 등록 요청 스키마.

    Registration form payload. Required text fields default to "" so that the
    registration form, not Pydantic, reports every missing field at once.
    The photo limit is enforced by the form as well.
    """

    sku: str = ""
    product_name: str = ""
    damage_description: str = ""
    responsible: str = ""
    authorized_discount: Decimal | None = Field(None, ge=0, le=100)  # 퍼센트 (Percent, e.g. 25)
    sector: Sector | None = None
    photos: list[PhotoRef] = Field(default_factory=list)


class DamageStatusUpdate(BaseModel):
    """상태 변경 요청 스키마 (Status transition request)."""

    status: DamageStatus


class DamageFilter(BaseModel):
    """파손 목록 필터 — Damage list query.

    Attributes:
        text: 상품명/SKU 검색어 (Case-insensitive substring of product or SKU; "" matches all)
        status: 상태 필터 ("all" or one status)
        sector: 섹터 필터 (None or "all" matches every sector)
        date_from: 시작일 포함 (Inclusive lower bound on date)
        date_to: 종료일 포함 (Inclusive upper bound on date)
    """

    text: str = ""
    status: Literal["all"] | DamageStatus = "all"
    sector: Literal["all"] | Sector | None = None
    date_from: dt.date | None = None
    date_to: dt.date | None = None


class DiscountOption(BaseModel):
    """승인 가능한 할인 옵션 (Authorized discount option shown on the form)."""

    value: int  # 퍼센트 (Percent)
    label: str


class DamageListResponse(BaseModel):
    """파손 목록 응답 — 페이지네이션 없음 (Full match list, no pagination)."""

    items: list[DamageRecordResponse]
    total: int
