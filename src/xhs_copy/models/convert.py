from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .brief import ContentBrief, SuggestionBundle


class ConvertRequest(BaseModel):
    text: str = ""
    # 알 수 없는 값(숫자 등)도 trendy로 처리되도록 검증하지 않고 그대로 받음
    style: Any = None


class TokenUsage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class CopyResult(BaseModel):
    text: str = Field(description="LLM이 작성한 小红书 스타일 카피")
    model: str = Field(description="응답을 생성한 모델명")
    usage: TokenUsage | None = None


class ConvertResult(BaseModel):
    copy_result: CopyResult
    brief: ContentBrief


class ConvertResponse(BaseModel):
    """HTTP 응답 본문 — 프런트엔드 호환을 위해 camelCase 키로 직렬화."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    converted_text: str
    image_suggestions: SuggestionBundle
    keywords: list[str] = Field(max_length=3)
    style: str
    usage: TokenUsage | None = None
    model: str

    @classmethod
    def from_result(cls, result: ConvertResult) -> "ConvertResponse":
        return cls(
            converted_text=result.copy_result.text,
            image_suggestions=result.brief.suggestions,
            keywords=result.brief.keywords[:3],
            style=result.brief.style.value,
            usage=result.copy_result.usage,
            model=result.copy_result.model,
        )


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
    message: str | None = None
