"""판매 집계 및 대시보드 통계 유닛 테스트.

Aggregator tests — exact Decimal sums, average discount, empty collection,
display strings, dashboard counts and report export.
"""

import csv
import datetime as dt
from decimal import Decimal
from io import BytesIO, StringIO

import pytest
from openpyxl import load_workbook

from avarias.schemas.damage import DamageRecordResponse
from avarias.schemas.sale import SaleRecordResponse
from avarias.seed import DAMAGE_FIXTURES, SALE_FIXTURES
from avarias.services.report_service import (
    EXPORT_HEADERS,
    dashboard_stats,
    effective_discount_rate,
    export_report,
    summarize_sales,
)
from avarias.utils.exceptions import BadRequestError


def make_sale(sale_id: str, original: str, final: str, **extra) -> SaleRecordResponse:
    data = {
        "id": sale_id,
        "date": dt.date(2024, 1, 15),
        "product": "Produto",
        "seller": "Ana Costa",
        "approver": "Carlos Lima",
        "damage_id": f"AV{sale_id}",
        "original_price": Decimal(original),
        "final_price": Decimal(final),
    }
    data.update(extra)
    return SaleRecordResponse(**data)


@pytest.fixture
def sales() -> list[SaleRecordResponse]:
    return [SaleRecordResponse.model_validate(data) for data in SALE_FIXTURES]


class TestSummarizeSales:
    """요약 통계 계산."""

    def test_exact_decimal_scenario(self):
        """1999.99/1799.99 + 899.99/674.99 -> 2474.98 / 425.00."""
        summary = summarize_sales([
            make_sale("1", "1999.99", "1799.99"),
            make_sale("2", "899.99", "674.99"),
        ])
        assert summary.total_sales == 2
        assert summary.total_revenue == Decimal("2474.98")
        assert summary.total_discount == Decimal("425.00")
        assert str(summary.total_discount) == "425.00"

    def test_empty_collection(self):
        summary = summarize_sales([])
        assert summary.total_sales == 0
        assert summary.total_revenue == 0
        assert summary.total_discount == 0
        assert summary.average_discount == 0

    def test_revenue_is_sum_of_final_prices(self, sales):
        summary = summarize_sales(sales)
        assert summary.total_revenue == sum((s.final_price for s in sales), Decimal("0"))
        assert summary.total_revenue == Decimal("4124.97")
        assert summary.total_discount == Decimal("2075.00")

    def test_repeated_runs_are_identical(self):
        records = [make_sale(str(i), "0.30", "0.10") for i in range(1000)]
        first = summarize_sales(records)
        assert first.total_revenue == Decimal("100.00")
        assert first.total_discount == Decimal("200.00")
        assert summarize_sales(records) == first

    def test_average_discount_is_computed(self, sales):
        """평균 할인율은 고정값이 아니라 데이터로 계산."""
        summary = summarize_sales(sales)
        assert summary.average_discount == Decimal("0.2833")
        assert summary.average_discount_display == "28.33%"

    def test_average_follows_data(self):
        summary = summarize_sales([make_sale("1", "100.00", "50.00")])
        assert summary.average_discount_display == "50%"

    def test_zero_original_price_counts_as_no_discount(self):
        record = make_sale("1", "0.00", "0.00")
        assert effective_discount_rate(record) == 0
        assert summarize_sales([record, make_sale("2", "10.00", "5.00")]).average_discount == Decimal("0.2500")

    def test_display_strings(self):
        summary = summarize_sales([make_sale("1", "1999.99", "1799.99")])
        assert summary.total_revenue_display == "R$ 1799.99"
        assert summary.total_discount_display == "R$ 200.00"

    def test_discount_string_not_derived_from_prices(self):
        record = make_sale("1", "100.00", "90.00", discount_rate=Decimal("0.50"))
        assert record.discount == "50%"
        assert summarize_sales([record]).average_discount_display == "10%"


class TestDashboardStats:
    """대시보드 통계."""

    def test_counts(self, sales):
        damages = [DamageRecordResponse.model_validate(data) for data in DAMAGE_FIXTURES]
        stats = dashboard_stats(damages, sales, dt.date(2024, 1, 15))
        assert stats.damaged_today == 1
        assert stats.pending == 1
        assert stats.sold_today == 1

    def test_empty(self):
        stats = dashboard_stats([], [], dt.date(2024, 1, 15))
        assert (stats.damaged_today, stats.pending, stats.sold_today) == (0, 0, 0)


class TestExportReport:
    """리포트 내보내기."""

    def test_csv(self, sales):
        content = export_report("csv", sales)
        rows = list(csv.reader(StringIO(content.decode("utf-8-sig"))))
        assert rows[0] == EXPORT_HEADERS
        assert len(rows) == 4
        assert rows[1][1] == 'Televisão Samsung 50"'
        assert rows[1][2:5] == ["1999.99", "10%", "1799.99"]

    def test_csv_empty(self):
        rows = list(csv.reader(StringIO(export_report("CSV", []).decode("utf-8-sig"))))
        assert rows == [EXPORT_HEADERS]

    def test_xlsx(self, sales):
        wb = load_workbook(BytesIO(export_report("xlsx", sales)))
        assert wb.sheetnames == ["Sales", "Summary"]
        ws = wb["Sales"]
        assert [cell.value for cell in ws[1]] == EXPORT_HEADERS
        assert ws.max_row == 4
        assert wb["Summary"]["B1"].value == 3
        assert wb["Summary"]["B4"].value == "28.33%"

    def test_pdf_unsupported(self, sales):
        with pytest.raises(BadRequestError) as exc_info:
            export_report("pdf", sales)
        assert exc_info.value.status_code == 400
