"""리포트 서비스 — 판매 집계, 대시보드 통계, 리포트 내보내기.

Report Service — Sales aggregation, dashboard stats and report export.

All currency arithmetic uses Decimal. Sums are quantized to cents only after
adding, so repeated runs over the same records always give the same figures.
"""

import csv
import datetime as dt
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from io import BytesIO, StringIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

from avarias.repositories.base import RecordRepository
from avarias.schemas.damage import DamageRecordResponse, DamageStatus
from avarias.schemas.sale import DashboardStats, SaleFilter, SaleRecordResponse, SalesReportResponse, SalesSummary
from avarias.services import notification_service as messages
from avarias.services.filter_service import filter_sale_records
from avarias.services.notification_service import notification_service
from avarias.utils.exceptions import BadRequestError
from avarias.utils.formatting import RATE_PLACES, money

EXPORT_HEADERS: list[str] = [
    "Date", "Product", "Original Price", "Discount", "Final Price", "Seller", "Approver", "Damage ID",
]

# 내보내기 형식 -> (미디어 타입, 확장자): Supported export formats
EXPORT_FORMATS: dict[str, tuple[str, str]] = {
    "csv": ("text/csv; charset=utf-8", "csv"),
    "xlsx": ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", "xlsx"),
}


def discount_amount(record: SaleRecordResponse) -> Decimal:
    """할인 금액 (original_price - final_price)."""
    return record.original_price - record.final_price


def effective_discount_rate(record: SaleRecordResponse) -> Decimal:
    """가격에서 계산한 실제 할인율 — 정가가 0이면 0 (Zero when the original price is zero)."""
    if record.original_price == 0:
        return Decimal("0")
    return discount_amount(record) / record.original_price


def summarize_sales(records: Sequence[SaleRecordResponse]) -> SalesSummary:
    """판매 요약 통계를 계산합니다.

    Compute the sales summary:

    - total_sales: number of records
    - total_revenue: sum of final_price
    - total_discount: sum of (original_price - final_price)
    - average_discount: mean of the per-record effective discount rate

    An empty collection yields zeros.
    """
    if not records:
        return SalesSummary(
            total_sales=0,
            total_revenue=money(0),
            total_discount=money(0),
            average_discount=Decimal("0").quantize(RATE_PLACES),
        )

    total_revenue: Decimal = sum((record.final_price for record in records), Decimal("0"))
    total_discount: Decimal = sum((discount_amount(record) for record in records), Decimal("0"))
    rate_sum: Decimal = sum((effective_discount_rate(record) for record in records), Decimal("0"))

    return SalesSummary(
        total_sales=len(records),
        total_revenue=money(total_revenue),
        total_discount=money(total_discount),
        average_discount=(rate_sum / len(records)).quantize(RATE_PLACES, rounding=ROUND_HALF_UP),
    )


def dashboard_stats(
    damage_records: Sequence[DamageRecordResponse],
    sale_records: Sequence[SaleRecordResponse],
    today: dt.date,
) -> DashboardStats:
    """대시보드 통계 — 오늘 보고된 파손, 대기 중, 오늘 판매."""
    return DashboardStats(
        damaged_today=sum(1 for record in damage_records if record.date == today),
        pending=sum(1 for record in damage_records if record.status == DamageStatus.PENDING),
        sold_today=sum(1 for record in sale_records if record.date == today),
    )


def _export_row(record: SaleRecordResponse) -> list[str]:
    return [
        record.date.isoformat(),
        record.product,
        f"{money(record.original_price):f}",
        record.discount,
        f"{money(record.final_price):f}",
        record.seller,
        record.approver,
        record.damage_id,
    ]


def export_csv(records: Sequence[SaleRecordResponse]) -> bytes:
    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(EXPORT_HEADERS)
    for record in records:
        writer.writerow(_export_row(record))
    # 엑셀 호환 BOM: BOM so spreadsheet apps detect UTF-8
    return buffer.getvalue().encode("utf-8-sig")


def export_xlsx(records: Sequence[SaleRecordResponse], summary: SalesSummary) -> bytes:
    wb = Workbook()
    header_font = Font(bold=True, color="FFFFFF", size=11)
    header_fill = PatternFill(start_color="2D3436", end_color="2D3436", fill_type="solid")

    ws = wb.active
    ws.title = "Sales"
    for col_idx, header in enumerate(EXPORT_HEADERS, 1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="center")

    for record in records:
        ws.append([
            record.date.isoformat(),
            record.product,
            money(record.original_price),
            record.discount,
            money(record.final_price),
            record.seller,
            record.approver,
            record.damage_id,
        ])

    for i, width in enumerate([12, 30, 15, 10, 15, 20, 20, 12], 1):
        ws.column_dimensions[ws.cell(row=1, column=i).column_letter].width = width

    # --- Sheet 2: Summary ---
    ws2 = wb.create_sheet("Summary")
    ws2.append(["Total Sales", summary.total_sales])
    ws2.append(["Total Revenue", summary.total_revenue])
    ws2.append(["Total Discount", summary.total_discount])
    ws2.append(["Average Discount", summary.average_discount_display])
    for row in ws2.iter_rows(min_col=1, max_col=1):
        row[0].font = Font(bold=True)
    ws2.column_dimensions["A"].width = 20

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def export_report(export_format: str, records: Sequence[SaleRecordResponse]) -> bytes:
    """리포트 내보내기 — csv 또는 xlsx.

    Raises:
        BadRequestError: 지원하지 않는 형식 (e.g. "pdf")
    """
    export_format = export_format.lower()
    if export_format == "csv":
        return export_csv(records)
    if export_format == "xlsx":
        return export_xlsx(records, summarize_sales(records))
    raise BadRequestError(f"Unsupported export format: {export_format}")


class ReportService:

    async def sales_report(
        self,
        repository: RecordRepository[SaleRecordResponse],
        query: SaleFilter,
    ) -> SalesReportResponse:
        """판매 리포트 — 요약은 항상 전체 컬렉션 기준 (Summary always covers every sale)."""
        records = await repository.get_all()
        items = filter_sale_records(records, query)
        return SalesReportResponse(
            items=items,
            total=len(items),
            summary=summarize_sales(records),
            filtered_summary=summarize_sales(items),
        )

    async def export(
        self,
        repository: RecordRepository[SaleRecordResponse],
        query: SaleFilter,
        export_format: str,
    ) -> tuple[bytes, str, str]:
        """필터된 판매 기록 내보내기 — Returns (content, media type, filename)."""
        export_format = export_format.lower()
        if export_format not in EXPORT_FORMATS:
            raise BadRequestError(f"Unsupported export format: {export_format}")

        items = filter_sale_records(await repository.get_all(), query)
        content: bytes = export_report(export_format, items)
        media_type, extension = EXPORT_FORMATS[export_format]
        notification_service.notify(messages.report_exported(export_format))
        return content, media_type, f"sales_report.{extension}"

    async def dashboard(
        self,
        damage_repository: RecordRepository[DamageRecordResponse],
        sale_repository: RecordRepository[SaleRecordResponse],
        today: dt.date | None = None,
    ) -> DashboardStats:
        return dashboard_stats(
            await damage_repository.get_all(),
            await sale_repository.get_all(),
            today or dt.date.today(),
        )


report_service: ReportService = ReportService()
