"""판매 기록 및 리포트 Pydantic 스키마.

Sale record and sales report schemas.
"""

import datetime as dt
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, computed_field

from avarias.config import settings
from avarias.schemas.damage import Sector
from avarias.utils.formatting import format_currency, format_percent


class SaleRecordResponse(BaseModel):
    """판매 기록 응답 스키마.

    Sale record as served to clients and consumed by the filter engine and
    the aggregator. ``discount`` is formatted from ``discount_rate``; it is
    never recomputed from the two prices.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    date: dt.date
    product: str
    seller: str
    approver: str
    damage_id: str
    original_price: Decimal
    final_price: Decimal
    discount_rate: Decimal = Decimal("0")
    sector: Sector | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def discount(self) -> str:
        return format_percent(self.discount_rate)


class SaleFilter(BaseModel):
    """리포트 필터 — Sales report query.

    Attributes:
        date_from: 시작일 포함 (Inclusive lower bound)
        date_to: 종료일 포함 (Inclusive upper bound)
        sector: 섹터 (None or "all" matches every sector)
        seller: 판매자 검색어 (Case-insensitive substring; "" matches all)
    """

    date_from: dt.date | None = None
    date_to: dt.date | None = None
    sector: Literal["all"] | Sector | None = None
    seller: str = ""


class SaleExportQuery(SaleFilter):
    """리포트 내보내기 쿼리 — Report filter plus the export format.

    ``format`` is checked by the report service so that unsupported formats
    such as "pdf" answer 400 instead of a validation error.
    """

    format: str = "csv"


class SalesSummary(BaseModel):
    """판매 요약 통계 — Sales summary figures.

    Amounts are exact Decimals quantized to cents; ``average_discount`` is a
    fraction (0.2833 = 28.33%). The ``*_display`` fields are what the reports
    page renders.
    """

    total_sales: int
    total_revenue: Decimal
    total_discount: Decimal
    average_discount: Decimal

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_revenue_display(self) -> str:
        return format_currency(self.total_revenue, settings.CURRENCY_SYMBOL)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_discount_display(self) -> str:
        return format_currency(self.total_discount, settings.CURRENCY_SYMBOL)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def average_discount_display(self) -> str:
        return format_percent(self.average_discount)


class SalesReportResponse(BaseModel):
    """리포트 응답 — Filtered sales plus summaries.

    ``summary`` always covers the full collection; ``filtered_summary`` covers
    only ``items``.
    """

    items: list[SaleRecordResponse]
    total: int
    summary: SalesSummary
    filtered_summary: SalesSummary


class DashboardStats(BaseModel):
    """대시보드 통계 (Dashboard quick stats)."""

    damaged_today: int
    pending: int
    sold_today: int
