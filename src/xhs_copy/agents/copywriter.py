"""小红书 카피라이터 — 입력 텍스트를 스타일 톤에 맞춘 게시글 카피로 변환합니다.

OpenAI(chat.completions)가 기본이며 LLM_PROVIDER=anthropic 이면 Anthropic messages API를 사용합니다.
재시도·캐시는 하지 않고, 제공자 오류는 UpstreamServiceError로 그대로 전달합니다.
"""
from __future__ import annotations

import logging
from pathlib import Path

import anthropic
import openai

from xhs_copy.brief.styles import get_style_profile
from xhs_copy.config import Settings, get_settings
from xhs_copy.errors import (
    ConfigurationError,
    MalformedResponseError,
    UpstreamServiceError,
)
from xhs_copy.models.convert import CopyResult, TokenUsage
from xhs_copy.models.style import StyleTag
from xhs_copy.utils.http_client import create_anthropic_client, create_openai_client

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).parent.parent / "utils/prompt_templates"
_TEMPLATE_PATH = _TEMPLATE_DIR / "copywriter.txt"
_SYSTEM_PROMPT_PATH = _TEMPLATE_DIR / "copywriter_system.txt"


def build_prompt(text: str, style: StyleTag, max_input_chars: int = 0) -> str:
    """사용자 프롬프트를 만듭니다. max_input_chars > 0 이면 입력을 해당 글자 수로 자릅니다."""
    if max_input_chars > 0:
        text = text[:max_input_chars]
    template = _TEMPLATE_PATH.read_text(encoding="utf-8")
    return template.format(
        style_description=get_style_profile(style).description,
        text=text,
    )


async def _complete_with_openai(
    settings: Settings, system_prompt: str, prompt: str
) -> CopyResult:
    if not settings.openai_api_key:
        raise ConfigurationError("OPENAI_API_KEY is not set")

    try:
        # 요청마다 asyncio.run 루프가 닫히므로 연결 풀도 요청 단위로 닫음
        async with create_openai_client() as client:
            response = await client.chat.completions.create(
                model=settings.openai_model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt},
                ],
                temperature=settings.temperature,
                max_tokens=settings.max_tokens,
            )
    except openai.APIError as exc:
        logger.error("OpenAI API error: %s", exc.message)
        raise UpstreamServiceError(exc.message) from exc

    if not response.choices or not response.choices[0].message.content:
        raise MalformedResponseError("OpenAI response has no message content")

    usage = None
    if response.usage is not None:
        usage = TokenUsage(
            prompt_tokens=response.usage.prompt_tokens,
            completion_tokens=response.usage.completion_tokens,
            total_tokens=response.usage.total_tokens,
        )
    return CopyResult(
        text=response.choices[0].message.content,
        model=response.model,
        usage=usage,
    )


async def _complete_with_anthropic(
    settings: Settings, system_prompt: str, prompt: str
) -> CopyResult:
    if not settings.anthropic_api_key:
        raise ConfigurationError("ANTHROPIC_API_KEY is not set")

    try:
        async with create_anthropic_client() as client:
            response = await client.messages.create(
                model=settings.anthropic_model,
                system=system_prompt,
                messages=[{"role": "user", "content": prompt}],
                temperature=settings.temperature,
                max_tokens=settings.max_tokens,
            )
    except anthropic.APIError as exc:
        logger.error("Anthropic API error: %s", exc.message)
        raise UpstreamServiceError(exc.message) from exc

    text = "".join(block.text for block in response.content if block.type == "text")
    if not text:
        raise MalformedResponseError("Anthropic response has no text block")

    # Anthropic usage(input/output) → OpenAI 형식(prompt/completion)으로 맞춤
    usage = TokenUsage(
        prompt_tokens=response.usage.input_tokens,
        completion_tokens=response.usage.output_tokens,
        total_tokens=response.usage.input_tokens + response.usage.output_tokens,
    )
    return CopyResult(text=text, model=response.model, usage=usage)


async def write_copy(text: str, style: StyleTag) -> CopyResult:
    """입력 텍스트를 小红书 스타일 카피로 변환합니다."""
    settings = get_settings()
    system_prompt = _SYSTEM_PROMPT_PATH.read_text(encoding="utf-8").strip()
    prompt = build_prompt(text, style, settings.max_input_chars)

    logger.info("Requesting copy from %s (style=%s)", settings.llm_provider, style.value)
    if settings.llm_provider == "anthropic":
        return await _complete_with_anthropic(settings, system_prompt, prompt)
    return await _complete_with_openai(settings, system_prompt, prompt)
