"""파손 등록 폼 — 입력 검증 및 제출.

Damage registration form — local validation and hand-off to the record store.

The form checks the four required text fields and caps the photo set.
It does not look for duplicate SKUs and does not cross-check the
authorized discount against any price.
"""

import datetime as dt
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from avarias.config import settings
from avarias.repositories.base import RecordRepository
from avarias.schemas.damage import DamageRecordCreate, DamageRecordResponse, DamageStatus, PhotoRef, Sector
from avarias.utils.exceptions import MissingFieldsError, PhotoLimitExceededError
from avarias.utils.formatting import RATE_PLACES, percent_to_rate

# 필수 항목: 폼 표시 순서 (Required fields, in form order)
REQUIRED_FIELDS: tuple[str, ...] = ("sku", "product_name", "damage_description", "responsible")


class RegistrationForm:
    """파손 등록 폼 상태.

    Draft state of the registration form.

    Attributes:
        max_photos: 최대 사진 수 (Photo limit)
        sku: 상품 코드 (SKU / EAN)
        product_name: 상품명 (Product name)
        damage_description: 파손 설명 (Damage description)
        responsible: 승인 담당자 (Employee authorizing the discount)
        authorized_discount: 승인 할인율 퍼센트 (Authorized discount in percent, optional)
        sector: 섹터 (Store sector, optional)
        photos: 첨부 사진 (Attached photos)
    """

    def __init__(self, max_photos: int | None = None) -> None:
        self.max_photos: int = settings.MAX_PHOTOS if max_photos is None else max_photos
        self.reset()

    @classmethod
    def from_payload(cls, payload: DamageRecordCreate, max_photos: int | None = None) -> "RegistrationForm":
        """요청 본문으로 폼 채우기 — Fill a form from a request payload.

        Raises:
            PhotoLimitExceededError: 사진이 한도를 넘는 경우 (Too many photos in the payload)
        """
        form = cls(max_photos)
        form.sku = payload.sku
        form.product_name = payload.product_name
        form.damage_description = payload.damage_description
        form.responsible = payload.responsible
        form.authorized_discount = payload.authorized_discount
        form.sector = payload.sector
        form.attach_photos(payload.photos)
        return form

    def reset(self) -> None:
        """폼 초기화 (Clear every field and photo)."""
        self.sku: str = ""
        self.product_name: str = ""
        self.damage_description: str = ""
        self.responsible: str = ""
        self.authorized_discount: Decimal | None = None
        self.sector: Sector | None = None
        self.photos: list[PhotoRef] = []

    def attach_photos(self, photos: Sequence[PhotoRef]) -> None:
        """사진 첨부 — 한도를 넘으면 묶음 전체를 거부하고 기존 목록은 그대로 둡니다.

        Attach a batch of photos. A batch that would push the set past
        ``max_photos`` is rejected as a whole and the current set is kept.

        Raises:
            PhotoLimitExceededError: 한도 초과 (Limit would be exceeded)
        """
        if len(self.photos) + len(photos) > self.max_photos:
            raise PhotoLimitExceededError(self.max_photos, len(self.photos), len(photos))
        self.photos = [*self.photos, *photos]

    def remove_photo(self, index: int) -> PhotoRef:
        """위치로 사진 제거 (Remove one photo by position; IndexError when out of range)."""
        return self.photos.pop(index)

    def validate(self) -> list[str]:
        """누락된 필수 항목 목록 — Missing required fields; blank strings count as missing."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name).strip()]

    def to_record_data(self, today: dt.date) -> dict[str, Any]:
        """저장소에 넘길 기록 데이터 (Record payload for the store; new records start pending)."""
        discount_rate: Decimal = (
            percent_to_rate(self.authorized_discount).quantize(RATE_PLACES, rounding=ROUND_HALF_UP)
            if self.authorized_discount is not None
            else Decimal("0")
        )
        return {
            "sku": self.sku.strip(),
            "product": self.product_name.strip(),
            "description": self.damage_description.strip(),
            "status": DamageStatus.PENDING.value,
            "date": today,
            "responsible": self.responsible.strip(),
            "discount_rate": discount_rate,
            "sector": self.sector.value if self.sector else None,
            "photos": [photo.model_dump() for photo in self.photos],
        }

    async def submit(
        self,
        repository: RecordRepository[DamageRecordResponse],
        today: dt.date | None = None,
    ) -> DamageRecordResponse:
        """검증 후 저장소에 제출하고 폼을 초기화합니다.

        Validate, insert through the record store, then reset the form.
        A failed validation leaves the form untouched.

        Raises:
            MissingFieldsError: 필수 항목 누락 (One entry per missing field)
        """
        missing: list[str] = self.validate()
        if missing:
            raise MissingFieldsError(missing)

        record: DamageRecordResponse = await repository.create(self.to_record_data(today or dt.date.today()))
        self.reset()
        return record
