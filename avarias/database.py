"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class.
Only used when STORAGE_BACKEND is "database"; the in-memory record store
never opens a connection.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from avarias.config import settings


def _engine_options(url: str) -> dict[str, Any]:
    """드라이버별 엔진 옵션 — Pool options for server databases only."""
    if url.startswith("sqlite"):
        return {}
    return {
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
        # Supavisor(트랜잭션 모드 풀러)에서 prepared statement 비활성화
        "connect_args": {"statement_cache_size": 0},
    }


# 비동기 데이터베이스 엔진: Async database engine
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    **_engine_options(settings.DATABASE_URL),
)

# 비동기 세션 팩토리: Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    """

    pass
