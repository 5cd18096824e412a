"""공통 Pydantic 요청/응답 스키마 정의.

Common response schemas shared across routers: notifications, navigation
targets, and generic messages.
"""

from enum import Enum

from pydantic import BaseModel


class Severity(str, Enum):
    """알림 심각도 (Notification severity, mirrors the front end's toast variants)."""

    INFO = "info"
    SUCCESS = "success"
    DESTRUCTIVE = "destructive"


class View(str, Enum):
    """네비게이션 대상 화면 식별자 (Navigation target view identifiers)."""

    LOGIN = "login"
    DASHBOARD = "dashboard"
    REGISTER_DAMAGE = "register-damage"
    DAMAGE_LIST = "damage-list"
    REPORTS = "reports"


class Notification(BaseModel):
    """사용자 알림 — 프론트엔드가 토스트로 표시 (Displayed by the client as a toast)."""

    title: str
    description: str
    severity: Severity = Severity.INFO


class ActionResponse(BaseModel):
    """사용자 동작 결과 — Outcome of a user-facing action.

    Attributes:
        notification: 표시할 알림 (Notification to display)
        redirect_to: 이동할 화면 (View to navigate to; None = stay)
        record_id: 관련 기록 식별자 (Affected record id, when there is one)
    """

    notification: Notification
    redirect_to: View | None = None
    record_id: str | None = None
