"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per request: method, path, query/path params,
masked JSON body, status code, duration and, for error responses, the
``detail`` the client received. Passes requests straight through when Axiom
is not configured.
"""

import json
import re
import time
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from avarias.config import settings
from avarias.utils.axiom import get_axiom_client

# 마스킹 대상 필드 패턴: Fields to mask in request bodies and params
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로: Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_BODY_CHARS = 2000
_MAX_DETAIL_CHARS = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 마스킹 — Recursively mask sensitive keys; long lists keep 20 items."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            key: "***" if _SENSITIVE_KEYS.search(str(key)) else mask_sensitive(value, depth + 1)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    if isinstance(data, str) and len(data) > _MAX_BODY_CHARS:
        return data[:_MAX_BODY_CHARS] + "...(truncated)"
    return data


async def _read_json_body(request: Request) -> Any:
    if request.method not in ("POST", "PUT", "PATCH"):
        return None
    body = await request.body()
    if not body:
        return None
    try:
        return mask_sensitive(json.loads(body))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


def error_detail(body: bytes) -> str:
    """에러 응답 본문에서 사유 추출 — ``detail`` of a JSON error body, else raw text."""
    try:
        data = json.loads(body)
        detail = data.get("detail", data) if isinstance(data, dict) else data
        text = detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False)
    except (json.JSONDecodeError, UnicodeDecodeError):
        text = body.decode("utf-8", errors="replace")
    if len(text) > _MAX_DETAIL_CHARS:
        text = text[:_MAX_DETAIL_CHARS] + "..."
    return text


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        client = get_axiom_client()
        if client is None or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        event: dict[str, Any] = {"method": request.method, "path": request.url.path}
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))
        request_body = await _read_json_body(request)
        if request_body is not None:
            event["request_body"] = request_body

        event["status_code"] = 500
        try:
            response = await call_next(request)
            event["status_code"] = response.status_code
            if request.path_params:
                event["path_params"] = dict(request.path_params)

            if response.status_code >= 400:
                # 본문을 소비했으므로 다시 감싸서 반환: Body iterator is consumed, re-wrap it
                body = b"".join([
                    chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                    async for chunk in response.body_iterator
                ])
                event["error"] = error_detail(body)
                response = Response(
                    content=body,
                    status_code=response.status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            try:
                client.ingest_events(settings.AXIOM_DATASET, [event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록: Never break request on log failure

        return response
