"""Vercel Python 서버리스 함수 — POST /api/convert

handle_request()는 프레임워크와 무관한 순수 비동기 함수이고,
handler 클래스는 Vercel Python 런타임 규약(BaseHTTPRequestHandler)에 맞춘 얇은 어댑터입니다.
"""
from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler
from typing import Any

from pydantic import ValidationError

from xhs_copy.config import get_settings
from xhs_copy.errors import ConvertError, UpstreamServiceError
from xhs_copy.models.convert import ConvertRequest, ConvertResponse, ErrorResponse
from xhs_copy.service import convert_text

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

_BAD_REQUEST_MESSAGE = "请求格式错误"
_METHOD_NOT_ALLOWED_MESSAGE = "只支持POST请求"


@dataclass
class HandlerResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""


def _cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": get_settings().cors_allow_origin,
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def _json_response(status_code: int, payload: dict[str, Any]) -> HandlerResponse:
    headers = {"Content-Type": "application/json; charset=utf-8", **_cors_headers()}
    return HandlerResponse(
        status_code=status_code,
        headers=headers,
        body=json.dumps(payload, ensure_ascii=False),
    )


def _error_response(status_code: int, error: ErrorResponse) -> HandlerResponse:
    return _json_response(status_code, error.model_dump(exclude_none=True))


def _parse_body(body: bytes | str | dict | None) -> ConvertRequest:
    """요청 본문을 ConvertRequest로 변환합니다. 빈 본문은 빈 요청으로 취급합니다."""
    if isinstance(body, dict):
        data = body
    elif not body:
        data = {}
    else:
        raw = body.decode("utf-8") if isinstance(body, bytes) else body
        data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    return ConvertRequest.model_validate(data)


async def handle_request(
    method: str, body: bytes | str | dict | None = None
) -> HandlerResponse:
    """HTTP 메서드 + 본문 → 응답. 예외는 모두 JSON 오류 응답으로 변환합니다."""
    method = method.upper()
    if method == "OPTIONS":
        return HandlerResponse(status_code=200, headers=_cors_headers())
    if method != "POST":
        return _error_response(405, ErrorResponse(error=_METHOD_NOT_ALLOWED_MESSAGE))

    try:
        request = _parse_body(body)
    except (ValueError, ValidationError) as exc:
        # json.JSONDecodeError, UnicodeDecodeError 모두 ValueError 하위 클래스
        logger.warning("Rejected malformed request body: %s", exc)
        return _error_response(400, ErrorResponse(error=_BAD_REQUEST_MESSAGE))

    try:
        result = await convert_text(request.text, request.style)
    except UpstreamServiceError as exc:
        return _error_response(
            exc.status_code,
            ErrorResponse(error=exc.public_message, details=exc.details),
        )
    except ConvertError as exc:
        if exc.status_code >= 500:
            logger.error("Conversion failed: %s", exc)
        return _error_response(exc.status_code, ErrorResponse(error=exc.public_message))
    except Exception as exc:
        logger.exception("Unexpected error while converting")
        return _error_response(
            500, ErrorResponse(error=ConvertError.public_message, message=str(exc))
        )

    response = ConvertResponse.from_result(result)
    return _json_response(200, response.model_dump(mode="json", by_alias=True))


class handler(BaseHTTPRequestHandler):

    def _dispatch(self) -> None:
        content_length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(content_length) if content_length else b""
        response = asyncio.run(handle_request(self.command, body))

        payload = response.body.encode("utf-8")
        self.send_response(response.status_code)
        for name, value in response.headers.items():
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        if payload:
            self.wfile.write(payload)

    do_POST = _dispatch
    do_OPTIONS = _dispatch
    do_GET = _dispatch
    do_PUT = _dispatch
    do_PATCH = _dispatch
    do_DELETE = _dispatch
