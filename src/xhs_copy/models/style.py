from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StyleTag(str, Enum):
    TRENDY = "trendy"
    CASUAL = "casual"
    PROFESSIONAL = "professional"
    EMOTIONAL = "emotional"


class StyleProfile(BaseModel):
    """스타일 태그별 고정 프로필 (런타임 변경 불가)."""

    model_config = ConfigDict(frozen=True)

    tag: StyleTag
    name: str = Field(description="사람이 읽는 스타일 이름 (예: 潮流时尚)")
    description: str = Field(description="한 줄 톤 설명 — 카피라이터 프롬프트에도 사용")
    emoji: str = Field(description="대표 이모지")
    themes: tuple[str, ...] = Field(
        min_length=3, max_length=4, description="비주얼/촬영 테마 목록 (3~4개)"
    )
