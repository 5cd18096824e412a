"""필터/검색 엔진 — 기록 컬렉션에서 표시할 부분집합 계산.

Filter/search engine.
Each query is turned into a list of predicates and applied in a single
linear pass. The result keeps the input order and the input is never
modified. Criteria that match everything (empty text, "all") add no
predicate, so an empty query returns the collection unchanged.
"""

import datetime as dt
from collections.abc import Callable, Iterable, Sequence
from typing import Protocol, TypeVar

from avarias.schemas.damage import DamageFilter, DamageRecordResponse
from avarias.schemas.sale import SaleFilter, SaleRecordResponse

T = TypeVar("T")
Predicate = Callable[[T], bool]


class _Dated(Protocol):
    date: dt.date


class _Sectored(Protocol):
    sector: object


def apply_filters(records: Iterable[T], predicates: Sequence[Predicate[T]]) -> list[T]:
    """모든 조건을 만족하는 기록만 원래 순서대로 반환 (Logical AND, order-preserving)."""
    return [record for record in records if all(predicate(record) for predicate in predicates)]


def _date_predicates(date_from: dt.date | None, date_to: dt.date | None) -> list[Predicate[_Dated]]:
    predicates: list[Predicate[_Dated]] = []
    if date_from is not None:
        predicates.append(lambda record: record.date >= date_from)
    if date_to is not None:
        predicates.append(lambda record: record.date <= date_to)
    return predicates


def _sector_predicates(sector: object | None) -> list[Predicate[_Sectored]]:
    # None / "all" 은 전체 섹터: None or "all" matches every sector
    if sector is None or sector == "all":
        return []
    return [lambda record: record.sector == sector]


def damage_predicates(query: DamageFilter) -> list[Predicate[DamageRecordResponse]]:
    """파손 목록 쿼리를 조건 목록으로 변환합니다.

    Build the predicates for a damage list query:

    - text: case-insensitive substring of ``product``, or plain substring of ``sku``
    - status: "all" or an exact status match
    - sector / date_from / date_to: optional narrowing criteria
    """
    predicates: list[Predicate[DamageRecordResponse]] = []

    text: str = query.text
    if text:
        needle: str = text.lower()
        predicates.append(
            lambda record: needle in record.product.lower() or text in record.sku
        )

    if query.status != "all":
        status = query.status
        predicates.append(lambda record: record.status == status)

    predicates.extend(_sector_predicates(query.sector))
    predicates.extend(_date_predicates(query.date_from, query.date_to))
    return predicates


def sale_predicates(query: SaleFilter) -> list[Predicate[SaleRecordResponse]]:
    """리포트 쿼리를 조건 목록으로 변환합니다 (Sales report criteria)."""
    predicates: list[Predicate[SaleRecordResponse]] = []
    predicates.extend(_date_predicates(query.date_from, query.date_to))
    predicates.extend(_sector_predicates(query.sector))

    seller: str = query.seller.lower()
    if seller:
        predicates.append(lambda record: seller in record.seller.lower())
    return predicates


def filter_damage_records(
    records: Iterable[DamageRecordResponse],
    query: DamageFilter,
) -> list[DamageRecordResponse]:
    """파손 기록 필터링 — Visible damage records for a query."""
    return apply_filters(records, damage_predicates(query))


def filter_sale_records(
    records: Iterable[SaleRecordResponse],
    query: SaleFilter,
) -> list[SaleRecordResponse]:
    """판매 기록 필터링 — Visible sale records for a report query."""
    return apply_filters(records, sale_predicates(query))
