"""
변환 서비스 오케스트레이터

입력 검증 → 스타일 결정 → 카피 생성(LLM) → 콘텐츠 브리프(키워드·이미지 추천) 생성
"""
from __future__ import annotations

import logging
from typing import Any

from xhs_copy.agents.copywriter import write_copy
from xhs_copy.brief import build_content_brief, resolve_style
from xhs_copy.errors import InputValidationError
from xhs_copy.models.convert import ConvertResult

logger = logging.getLogger(__name__)


async def convert_text(text: Any, style: Any = None) -> ConvertResult:
    """원문을 小红书 카피로 변환하고 이미지 추천 브리프를 함께 반환합니다.

    Args:
        text: 사용자 입력 원문 (공백만 있으면 거부)
        style: trendy | casual | professional | emotional (그 외 값은 trendy)

    Raises:
        InputValidationError: text가 비어 있는 경우
        ConfigurationError / UpstreamServiceError / MalformedResponseError: 카피 생성 실패
    """
    if not isinstance(text, str) or not text.strip():
        raise InputValidationError("text is empty")

    tag = resolve_style(style)
    logger.info("Converting %d chars (style=%s)", len(text), tag.value)

    copy_result = await write_copy(text, tag)
    # 브리프는 프롬프트 길이 제한과 무관하게 원문 전체에서 추출
    brief = build_content_brief(text, tag)
    logger.info(
        "Converted with %s: %d keywords %s",
        copy_result.model,
        len(brief.keywords),
        brief.keywords,
    )
    return ConvertResult(copy_result=copy_result, brief=brief)
