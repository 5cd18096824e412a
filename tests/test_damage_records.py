"""파손 기록 API 테스트.

Damage record API tests — filtered listing, registration (success, photo
limit, missing fields), status transitions, removal and labels.
"""

import datetime as dt

from httpx import AsyncClient

from avarias.services.damage_service import ALLOWED_TRANSITIONS, can_transition
from avarias.schemas.damage import DamageStatus
from avarias.services.notification_service import notification_service

DAMAGE_URL = "/api/v1/damage-records"

VALID_PAYLOAD = {
    "sku": "7891234567899",
    "product_name": "Detergente Ypê 500ml",
    "damage_description": "Frasco vazando",
    "responsible": "Maria Santos",
    "authorized_discount": 50,
    "sector": "limpeza",
}


class TestListDamageRecords:
    """파손 목록 조회."""

    async def test_list_all(self, client: AsyncClient):
        res = await client.get(DAMAGE_URL)
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 3
        assert [item["id"] for item in data["items"]] == ["001", "002", "003"]
        assert data["items"][0]["discount"] == "10%"

    async def test_filter_by_status(self, client: AsyncClient):
        res = await client.get(DAMAGE_URL, params={"status": "approved"})
        assert res.status_code == 200
        items = res.json()["items"]
        assert len(items) == 1
        assert items[0]["product"] == "Biscoito Trakinas 126g"

    async def test_search_text(self, client: AsyncClient):
        res = await client.get(DAMAGE_URL, params={"text": "coca"})
        assert [item["id"] for item in res.json()["items"]] == ["001"]

    async def test_search_sku(self, client: AsyncClient):
        res = await client.get(DAMAGE_URL, params={"text": "567891"})
        assert [item["id"] for item in res.json()["items"]] == ["002"]

    async def test_filter_sector_and_dates(self, client: AsyncClient):
        res = await client.get(DAMAGE_URL, params={
            "sector": "alimentar",
            "date_from": "2024-01-15",
        })
        assert [item["id"] for item in res.json()["items"]] == ["001"]

    async def test_empty_result_is_not_an_error(self, client: AsyncClient):
        res = await client.get(DAMAGE_URL, params={"text": "inexistente"})
        assert res.status_code == 200
        assert res.json() == {"items": [], "total": 0}

    async def test_invalid_status(self, client: AsyncClient):
        res = await client.get(DAMAGE_URL, params={"status": "lost"})
        assert res.status_code == 422

    async def test_get_detail(self, client: AsyncClient):
        res = await client.get(f"{DAMAGE_URL}/003")
        assert res.status_code == 200
        assert res.json()["status"] == "sold"

    async def test_get_unknown(self, client: AsyncClient):
        res = await client.get(f"{DAMAGE_URL}/999")
        assert res.status_code == 404

    async def test_discount_options(self, client: AsyncClient):
        res = await client.get(f"{DAMAGE_URL}/discount-options")
        assert res.status_code == 200
        assert [opt["value"] for opt in res.json()] == [10, 25, 50, 75]


class TestRegisterDamage:
    """파손 등록."""

    async def test_register_success(self, client: AsyncClient, damage_repo):
        res = await client.post(DAMAGE_URL, json={
            **VALID_PAYLOAD,
            "photos": [{"filename": "a.jpg"}, {"filename": "b.png", "content_type": "image/png"}],
        })
        assert res.status_code == 201
        data = res.json()
        assert data["redirect_to"] == "damage-list"
        assert data["notification"]["title"] == "Avaria registrada com sucesso!"
        assert data["notification"]["severity"] == "success"

        record = await damage_repo.get_by_id(data["record_id"])
        assert record.status == "pending"
        assert record.discount == "50%"
        assert record.sector == "limpeza"
        assert record.date == dt.date.today()
        assert [p.filename for p in record.photos] == ["a.jpg", "b.png"]

    async def test_registered_record_is_listed(self, client: AsyncClient):
        await client.post(DAMAGE_URL, json=VALID_PAYLOAD)
        res = await client.get(DAMAGE_URL, params={"text": "ypê"})
        assert res.json()["total"] == 1

    async def test_fourth_photo_rejected(self, client: AsyncClient, damage_repo):
        res = await client.post(DAMAGE_URL, json={
            **VALID_PAYLOAD,
            "photos": [{"filename": f"{i}.jpg"} for i in range(4)],
        })
        assert res.status_code == 400
        assert res.json()["detail"] == "Máximo de 3 fotos permitidas"
        assert len(await damage_repo.get_all()) == 3

        last = notification_service.outbox[-1]
        assert last.title == "Limite excedido"
        assert last.severity == "destructive"

    async def test_missing_fields(self, client: AsyncClient, damage_repo):
        res = await client.post(DAMAGE_URL, json={"sku": "123", "responsible": " "})
        assert res.status_code == 422
        fields = [entry["field"] for entry in res.json()["detail"]]
        assert fields == ["product_name", "damage_description", "responsible"]
        assert len(await damage_repo.get_all()) == 3

    async def test_discount_out_of_range(self, client: AsyncClient):
        res = await client.post(DAMAGE_URL, json={**VALID_PAYLOAD, "authorized_discount": 120})
        assert res.status_code == 422


class TestStatusTransitions:
    """상태 전이."""

    def test_transition_table(self):
        assert can_transition(DamageStatus.PENDING, DamageStatus.APPROVED)
        assert can_transition(DamageStatus.APPROVED, DamageStatus.SOLD)
        assert not can_transition(DamageStatus.PENDING, DamageStatus.SOLD)
        assert not can_transition(DamageStatus.APPROVED, DamageStatus.PENDING)
        assert not can_transition(DamageStatus.PENDING, DamageStatus.PENDING)
        assert ALLOWED_TRANSITIONS[DamageStatus.SOLD] == frozenset()

    async def test_full_lifecycle(self, client: AsyncClient):
        res = await client.patch(f"{DAMAGE_URL}/001/status", json={"status": "approved"})
        assert res.status_code == 200
        assert res.json()["status"] == "approved"

        res = await client.patch(f"{DAMAGE_URL}/001/status", json={"status": "sold"})
        assert res.status_code == 200
        assert res.json()["status"] == "sold"
        assert notification_service.outbox[-1].title == "Status atualizado"

    async def test_skip_approval_rejected(self, client: AsyncClient, damage_repo):
        res = await client.patch(f"{DAMAGE_URL}/001/status", json={"status": "sold"})
        assert res.status_code == 400
        assert (await damage_repo.get_by_id("001")).status == "pending"

    async def test_sold_is_terminal(self, client: AsyncClient):
        res = await client.patch(f"{DAMAGE_URL}/003/status", json={"status": "approved"})
        assert res.status_code == 400

    async def test_unknown_record(self, client: AsyncClient):
        res = await client.patch(f"{DAMAGE_URL}/999/status", json={"status": "approved"})
        assert res.status_code == 404


class TestRemoveAndLabel:
    """삭제 및 라벨 인쇄."""

    async def test_delete(self, client: AsyncClient, damage_repo):
        res = await client.delete(f"{DAMAGE_URL}/002")
        assert res.status_code == 200
        assert res.json()["notification"]["title"] == "Item removido"
        assert await damage_repo.get_by_id("002") is None

    async def test_delete_unknown(self, client: AsyncClient):
        res = await client.delete(f"{DAMAGE_URL}/999")
        assert res.status_code == 404

    async def test_print_label(self, client: AsyncClient):
        res = await client.post(f"{DAMAGE_URL}/001/label")
        assert res.status_code == 200
        data = res.json()
        assert data["record_id"] == "001"
        assert data["notification"]["description"] == "Etiqueta do item 001 enviada para impressão."
        assert data["redirect_to"] is None
