"""테스트 인프라 — 메모리 저장소, SQLite 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory record stores, an in-memory SQLite session
for the SQLAlchemy adapter, and an httpx client with the repository
dependencies overridden.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from avarias.api.deps import get_damage_repository, get_sale_repository
from avarias.database import Base
from avarias.main import app
from avarias.models import *  # noqa: F401,F403: register all models with metadata
from avarias.repositories.damage_repository import InMemoryDamageRecordRepository
from avarias.repositories.sale_repository import InMemorySaleRecordRepository
from avarias.seed import DAMAGE_FIXTURES, SALE_FIXTURES
from avarias.services.notification_service import notification_service

# ---------------------------------------------------------------------------
# 테스트 DB 설정: 연결 하나를 공유하는 인메모리 SQLite
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(autouse=True)
def clear_notifications():
    """각 테스트 전후로 알림 outbox를 비웁니다."""
    notification_service.clear()
    yield
    notification_service.clear()


# ---------------------------------------------------------------------------
# 메모리 저장소: 테스트마다 새 복사본
# ---------------------------------------------------------------------------
@pytest.fixture
def damage_repo() -> InMemoryDamageRecordRepository:
    return InMemoryDamageRecordRepository(DAMAGE_FIXTURES)


@pytest.fixture
def sale_repo() -> InMemorySaleRecordRepository:
    return InMemorySaleRecordRepository(SALE_FIXTURES)


@pytest_asyncio.fixture
async def client(damage_repo, sale_repo) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 저장소 의존성을 오버라이드합니다."""
    app.dependency_overrides[get_damage_repository] = lambda: damage_repo
    app.dependency_overrides[get_sale_repository] = lambda: sale_repo

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# SQLAlchemy 어댑터용 픽스처
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성합니다."""
    eng = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
