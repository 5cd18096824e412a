"""초기 데이터 시드 스크립트 — 파손 기록 및 판매 기록 픽스처.

Seed script — Fixture damage records and sale records.
The same fixtures back the in-memory record store, so a fresh database and
the memory backend serve identical data.

Usage:
    python -m avarias.seed

Creates:
    - 3개 파손 기록: pending / approved / sold (3 damage records)
    - 3개 판매 기록: AV001 ~ AV003 (3 sale records)
"""

import asyncio
import datetime as dt
from decimal import Decimal
from typing import Any

from sqlalchemy import select

from avarias.database import Base, async_session, engine
from avarias.models import DamageRecord, SaleRecord

DAMAGE_FIXTURES: list[dict[str, Any]] = [
    {
        "id": "001",
        "sku": "7891234567890",
        "product": "Refrigerante Coca-Cola 2L",
        "description": "Lata amassada na lateral",
        "status": "pending",
        "date": dt.date(2024, 1, 15),
        "responsible": "João Silva",
        "discount_rate": Decimal("0.10"),
        "sector": "alimentar",
    },
    {
        "id": "002",
        "sku": "7891234567891",
        "product": "Biscoito Trakinas 126g",
        "description": "Embalagem rasgada",
        "status": "approved",
        "date": dt.date(2024, 1, 14),
        "responsible": "Maria Santos",
        "discount_rate": Decimal("0.25"),
        "sector": "alimentar",
    },
    {
        "id": "003",
        "sku": "7891234567892",
        "product": "Shampoo Seda 325ml",
        "description": "Tampa quebrada",
        "status": "sold",
        "date": dt.date(2024, 1, 13),
        "responsible": "Carlos Lima",
        "discount_rate": Decimal("0.50"),
        "sector": "higiene",
    },
]

SALE_FIXTURES: list[dict[str, Any]] = [
    {
        "id": "1",
        "date": dt.date(2024, 1, 15),
        "product": 'Televisão Samsung 50"',
        "original_price": Decimal("1999.99"),
        "final_price": Decimal("1799.99"),
        "discount_rate": Decimal("0.10"),
        "seller": "João Silva",
        "approver": "Maria Santos",
        "damage_id": "AV001",
    },
    {
        "id": "2",
        "date": dt.date(2024, 1, 14),
        "product": "Microondas LG 30L",
        "original_price": Decimal("899.99"),
        "final_price": Decimal("674.99"),
        "discount_rate": Decimal("0.25"),
        "seller": "Ana Costa",
        "approver": "Carlos Lima",
        "damage_id": "AV002",
    },
    {
        "id": "3",
        "date": dt.date(2024, 1, 13),
        "product": "Geladeira Electrolux 400L",
        "original_price": Decimal("3299.99"),
        "final_price": Decimal("1649.99"),
        "discount_rate": Decimal("0.50"),
        "seller": "Pedro Oliveira",
        "approver": "Maria Santos",
        "damage_id": "AV003",
    },
]


async def seed() -> None:
    """데이터베이스를 픽스처로 시드합니다.

    Create tables if they don't exist, then insert the fixture records.

    Idempotent: 파손 기록이 하나라도 있으면 건너뜁니다 (Skips if any damage record exists).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(DamageRecord).limit(1))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        # 픽스처 순서대로 삽입: Insert in fixture order
        for data in DAMAGE_FIXTURES:
            db.add(DamageRecord(**data))
        for data in SALE_FIXTURES:
            db.add(SaleRecord(**data))

        await db.commit()
        print(f"Seeded {len(DAMAGE_FIXTURES)} damage records and {len(SALE_FIXTURES)} sale records.")


if __name__ == "__main__":
    asyncio.run(seed())
