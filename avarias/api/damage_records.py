"""파손 기록 라우터 — 파손 등록/조회/상태 변경 API.

Damage Record Router — Registration, filtered listing, status transitions,
removal and label printing.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from avarias.api.deps import DamageRepo
from avarias.schemas.common import ActionResponse
from avarias.schemas.damage import (
    DamageFilter,
    DamageListResponse,
    DamageRecordCreate,
    DamageRecordResponse,
    DamageStatusUpdate,
    DiscountOption,
)
from avarias.services.damage_service import DISCOUNT_OPTIONS, damage_service

router: APIRouter = APIRouter()


@router.get("", response_model=DamageListResponse)
async def list_damage_records(
    repository: DamageRepo,
    query: Annotated[DamageFilter, Query()],
) -> dict:
    """파손 목록 조회 — 상품명/SKU 검색 + 상태/섹터/기간 필터."""
    items = await damage_service.list_records(repository, query)
    return {"items": items, "total": len(items)}


@router.get("/discount-options", response_model=list[DiscountOption])
async def list_discount_options() -> list[DiscountOption]:
    """승인 할인 옵션 목록 (Form choices)."""
    return DISCOUNT_OPTIONS


@router.get("/{record_id}", response_model=DamageRecordResponse)
async def get_damage_record(record_id: str, repository: DamageRepo) -> DamageRecordResponse:
    """파손 기록 상세 조회."""
    return await damage_service.get_detail(repository, record_id)


@router.post("", status_code=201, response_model=ActionResponse)
async def register_damage_record(data: DamageRecordCreate, repository: DamageRepo) -> ActionResponse:
    """파손 등록. 성공 시 목록 화면으로 이동."""
    return await damage_service.register(repository, data)


@router.patch("/{record_id}/status", response_model=DamageRecordResponse)
async def change_damage_status(
    record_id: str,
    data: DamageStatusUpdate,
    repository: DamageRepo,
) -> DamageRecordResponse:
    """상태 변경 — pending -> approved -> sold."""
    return await damage_service.change_status(repository, record_id, data.status)


@router.delete("/{record_id}", response_model=ActionResponse)
async def delete_damage_record(record_id: str, repository: DamageRepo) -> ActionResponse:
    """파손 기록 삭제."""
    return await damage_service.delete_record(repository, record_id)


@router.post("/{record_id}/label", response_model=ActionResponse)
async def print_damage_label(record_id: str, repository: DamageRepo) -> ActionResponse:
    """라벨 인쇄 요청."""
    return await damage_service.print_label(repository, record_id)
