"""Axiom 클라이언트 팩토리.

Axiom client factory shared by the request logging middleware and the
notification outbox. Returns None when Axiom is not configured.
"""

from functools import lru_cache

from axiom_py import Client as AxiomClient

from avarias.config import settings


@lru_cache(maxsize=1)
def get_axiom_client() -> AxiomClient | None:
    """설정된 경우에만 클라이언트 생성 — Client only when token and dataset are set."""
    if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
        return AxiomClient(token=settings.AXIOM_API_TOKEN)
    return None
