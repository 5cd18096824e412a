"""파손 기록 서비스.

Damage record service — Listing, registration, status transitions, removal
and label printing. Every user-facing outcome is reported through the
notification service and returned as an ``ActionResponse``.
"""

from avarias.repositories.base import RecordRepository
from avarias.schemas.common import ActionResponse, View
from avarias.schemas.damage import (
    DamageFilter,
    DamageRecordCreate,
    DamageRecordResponse,
    DamageStatus,
    DiscountOption,
)
from avarias.services import notification_service as messages
from avarias.services.filter_service import filter_damage_records
from avarias.services.notification_service import notification_service
from avarias.services.registration import RegistrationForm
from avarias.utils.exceptions import (
    InvalidTransitionError,
    MissingFieldsError,
    NotFoundError,
    PhotoLimitExceededError,
)

# 허용된 상태 전이: pending -> approved -> sold, sold is terminal
ALLOWED_TRANSITIONS: dict[DamageStatus, frozenset[DamageStatus]] = {
    DamageStatus.PENDING: frozenset({DamageStatus.APPROVED}),
    DamageStatus.APPROVED: frozenset({DamageStatus.SOLD}),
    DamageStatus.SOLD: frozenset(),
}

# 승인 할인 옵션: 등록 폼 선택지 (Form choices; not enforced on stored records)
DISCOUNT_OPTIONS: list[DiscountOption] = [
    DiscountOption(value=10, label="10% - Avaria leve"),
    DiscountOption(value=25, label="25% - Avaria moderada"),
    DiscountOption(value=50, label="50% - Avaria grave"),
    DiscountOption(value=75, label="75% - Avaria severa"),
]


def can_transition(current: DamageStatus, requested: DamageStatus) -> bool:
    """상태 전이 허용 여부 (Whether ``current -> requested`` is a legal move)."""
    return requested in ALLOWED_TRANSITIONS[current]


class DamageService:

    async def list_records(
        self,
        repository: RecordRepository[DamageRecordResponse],
        query: DamageFilter,
    ) -> list[DamageRecordResponse]:
        return filter_damage_records(await repository.get_all(), query)

    async def get_detail(
        self,
        repository: RecordRepository[DamageRecordResponse],
        record_id: str,
    ) -> DamageRecordResponse:
        record = await repository.get_by_id(record_id)
        if record is None:
            raise NotFoundError("Damage record not found")
        return record

    async def register(
        self,
        repository: RecordRepository[DamageRecordResponse],
        payload: DamageRecordCreate,
    ) -> ActionResponse:
        """파손 등록 — 검증 실패 시 알림 후 예외를 다시 발생시킵니다.

        Register a damaged item. Validation failures are notified and then
        re-raised so the router answers with the matching error status.
        On success the client is sent to the damage list.
        """
        try:
            form = RegistrationForm.from_payload(payload)
            record = await form.submit(repository)
        except PhotoLimitExceededError as exc:
            notification_service.notify(messages.photo_limit_exceeded(exc.limit))
            raise
        except MissingFieldsError as exc:
            notification_service.notify(messages.missing_fields(exc.fields))
            raise

        await repository.commit()
        notification = notification_service.notify(messages.damage_registered())
        return ActionResponse(notification=notification, redirect_to=View.DAMAGE_LIST, record_id=record.id)

    async def change_status(
        self,
        repository: RecordRepository[DamageRecordResponse],
        record_id: str,
        requested: DamageStatus,
    ) -> DamageRecordResponse:
        """상태 전이 — Move a record along pending -> approved -> sold.

        Raises:
            NotFoundError: 기록 없음 (Unknown record)
            InvalidTransitionError: 허용되지 않은 전이 (Illegal move, including same-state)
        """
        record = await self.get_detail(repository, record_id)
        if not can_transition(record.status, requested):
            raise InvalidTransitionError(record.status.value, requested.value)

        updated = await repository.update(record_id, {"status": requested.value})
        if updated is None:
            raise NotFoundError("Damage record not found")
        await repository.commit()
        notification_service.notify(messages.status_changed(record_id, requested.value))
        return updated

    async def delete_record(
        self,
        repository: RecordRepository[DamageRecordResponse],
        record_id: str,
    ) -> ActionResponse:
        deleted = await repository.delete(record_id)
        if not deleted:
            raise NotFoundError("Damage record not found")
        await repository.commit()
        notification = notification_service.notify(messages.damage_removed())
        return ActionResponse(notification=notification, record_id=record_id)

    async def print_label(
        self,
        repository: RecordRepository[DamageRecordResponse],
        record_id: str,
    ) -> ActionResponse:
        """라벨 인쇄 요청 — 실제 인쇄는 외부 장치 담당 (Printing itself is external)."""
        record = await self.get_detail(repository, record_id)
        notification = notification_service.notify(messages.label_printed(record.id))
        return ActionResponse(notification=notification, record_id=record.id)


damage_service: DamageService = DamageService()
