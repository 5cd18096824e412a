"""대시보드 라우터 — 빠른 통계 API.

Dashboard Router — Quick stats: damages reported today, pending damages,
and sales made today.
"""

from fastapi import APIRouter

from avarias.api.deps import DamageRepo, SaleRepo
from avarias.schemas.sale import DashboardStats
from avarias.services.report_service import report_service

router: APIRouter = APIRouter()


@router.get("", response_model=DashboardStats)
async def get_dashboard(damage_repository: DamageRepo, sale_repository: SaleRepo) -> DashboardStats:
    """대시보드 통계 조회."""
    return await report_service.dashboard(damage_repository, sale_repository)
