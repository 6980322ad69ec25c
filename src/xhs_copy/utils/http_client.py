"""
LLM 클라이언트 팩토리

반환된 클라이언트는 `async with`로 사용해 요청이 끝나면 연결 풀을 닫습니다.
SSL_VERIFY=false 또는 CA_BUNDLE_PATH 설정으로 인증서 검증 방식을 제어합니다.
"""
import ssl
import warnings

import certifi
import httpx
from anthropic import AsyncAnthropic
from openai import AsyncOpenAI

from xhs_copy.config import get_settings


def _build_ssl_context() -> ssl.SSLContext | bool:
    """httpx verify 인자: certifi 번들(+기업 CA) 컨텍스트, 또는 검증 비활성화 시 False."""
    settings = get_settings()

    if not settings.ssl_verify:
        warnings.warn(
            "SSL verification disabled (SSL_VERIFY=false). "
            "Use only in development / corporate proxy environments.",
            stacklevel=3,
        )
        return False

    ctx = ssl.create_default_context(cafile=certifi.where())
    if settings.ca_bundle_path:
        ctx.load_verify_locations(cafile=settings.ca_bundle_path)
    return ctx


def _http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(verify=_build_ssl_context())


def create_openai_client() -> AsyncOpenAI:
    return AsyncOpenAI(api_key=get_settings().openai_api_key, http_client=_http_client())


def create_anthropic_client() -> AsyncAnthropic:
    return AsyncAnthropic(api_key=get_settings().anthropic_api_key, http_client=_http_client())
