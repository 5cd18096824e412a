"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every endpoint into a single router for
inclusion in the FastAPI application.

Included routers:
    - dashboard: 대시보드 통계 (Dashboard quick stats)
    - damage_records: 파손 등록/조회/상태 변경 (Damage registration, listing, transitions)
    - reports: 판매 리포트 및 내보내기 (Sales report and export)
"""

from fastapi import APIRouter

from avarias.api.dashboard import router as dashboard_router
from avarias.api.damage_records import router as damage_records_router
from avarias.api.reports import router as reports_router

api_router: APIRouter = APIRouter()

api_router.include_router(dashboard_router, prefix="/dashboard", tags=["Dashboard"])
api_router.include_router(damage_records_router, prefix="/damage-records", tags=["Damage Records"])
api_router.include_router(reports_router, prefix="/reports", tags=["Reports"])
