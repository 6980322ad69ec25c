from pydantic import BaseModel, Field

from .style import StyleProfile, StyleTag


class SuggestionBundle(BaseModel):
    themes: list[str] = Field(description="스타일 프로필의 테마 목록 (그대로)")
    keywords: list[str] = Field(max_length=3, description="앞에서부터 최대 3개 키워드")
    tips: list[str] = Field(
        serialization_alias="suggestions",
        description="스타일과 무관한 고정 촬영/구도 팁 4개",
    )
    examples: list[str] = Field(description="키워드마다 '<키워드>相关场景照' 예시 캡션")


class ContentBrief(BaseModel):
    style: StyleTag
    profile: StyleProfile
    keywords: list[str] = Field(description="추출 순서 그대로의 전체 키워드 (1~5개)")
    suggestions: SuggestionBundle
