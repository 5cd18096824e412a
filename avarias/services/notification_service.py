"""알림 서비스 — 사용자 알림 발송 및 메시지 카탈로그.

Notification Service — Fire-and-forget dispatch of user-facing notifications.
Displaying the toast is the client's job: every notification is kept in a
bounded in-process outbox, echoed back in the action response, and shipped to
Axiom when it is configured.
"""

from collections import deque
from typing import Any

from avarias.config import settings
from avarias.schemas.common import Notification, Severity
from avarias.utils.axiom import get_axiom_client


class NotificationService:
    """알림 서비스.

    Attributes:
        maxlen: 보관할 최대 알림 수 (Outbox capacity; oldest entries are dropped)
    """

    def __init__(self, maxlen: int = 100) -> None:
        self.maxlen: int = maxlen
        self._outbox: deque[Notification] = deque(maxlen=maxlen)

    @property
    def outbox(self) -> list[Notification]:
        """최근 알림 목록, 오래된 순 (Recent notifications, oldest first)."""
        return list(self._outbox)

    def clear(self) -> None:
        self._outbox.clear()

    def notify(self, notification: Notification) -> Notification:
        """알림을 발송합니다. 반환값은 응답 본문에 그대로 실을 수 있습니다.

        Dispatch a notification. Never raises on delivery problems; the
        returned notification can be echoed in the response body.
        """
        self._outbox.append(notification)

        client = get_axiom_client()
        if client is not None:
            event: dict[str, Any] = {"kind": "notification", **notification.model_dump(mode="json")}
            try:
                client.ingest_events(settings.AXIOM_DATASET, [event])
            except Exception:
                pass  # 알림 로깅 실패가 요청 처리에 영향주지 않도록: Never break a request on log failure
        return notification


# --- 메시지 카탈로그 (Message catalog; user-facing text is Portuguese) ---

def damage_registered() -> Notification:
    return Notification(
        title="Avaria registrada com sucesso!",
        description="O produto foi adicionado ao sistema de avarias.",
        severity=Severity.SUCCESS,
    )


def damage_removed() -> Notification:
    return Notification(
        title="Item removido",
        description="O item foi removido da lista de avarias.",
        severity=Severity.DESTRUCTIVE,
    )


def label_printed(record_id: str) -> Notification:
    return Notification(
        title="Imprimindo etiqueta",
        description=f"Etiqueta do item {record_id} enviada para impressão.",
    )


def status_changed(record_id: str, status: str) -> Notification:
    return Notification(
        title="Status atualizado",
        description=f"O item {record_id} agora está como '{status}'.",
        severity=Severity.SUCCESS,
    )


def photo_limit_exceeded(limit: int) -> Notification:
    return Notification(
        title="Limite excedido",
        description=f"Máximo de {limit} fotos permitidas",
        severity=Severity.DESTRUCTIVE,
    )


def missing_fields(fields: list[str]) -> Notification:
    return Notification(
        title="Campos obrigatórios",
        description="Preencha: " + ", ".join(fields),
        severity=Severity.DESTRUCTIVE,
    )


def report_exported(export_format: str) -> Notification:
    return Notification(
        title="Relatório exportado",
        description=f"O relatório foi gerado em {export_format.upper()} com sucesso.",
        severity=Severity.SUCCESS,
    )


notification_service: NotificationService = NotificationService()
