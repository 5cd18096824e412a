"""리포트 라우터 — 판매 리포트 및 내보내기 API.

Report Router — Filtered sales report with summary figures, and export.
"""

from io import BytesIO
from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import StreamingResponse

from avarias.api.deps import SaleRepo
from avarias.schemas.sale import SaleExportQuery, SaleFilter, SalesReportResponse
from avarias.services.report_service import report_service

router: APIRouter = APIRouter()


@router.get("/sales", response_model=SalesReportResponse)
async def get_sales_report(
    repository: SaleRepo,
    query: Annotated[SaleFilter, Query()],
) -> SalesReportResponse:
    """판매 리포트 — 요약은 전체 판매 기준, filtered_summary는 필터 결과 기준."""
    return await report_service.sales_report(repository, query)


@router.get("/sales/export")
async def export_sales_report(
    repository: SaleRepo,
    query: Annotated[SaleExportQuery, Query()],
) -> StreamingResponse:
    """판매 리포트를 CSV 또는 Excel 파일로 내보냅니다."""
    content, media_type, filename = await report_service.export(repository, query, query.format)
    return StreamingResponse(
        BytesIO(content),
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
