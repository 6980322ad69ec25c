from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # LLM APIs
    openai_api_key: str = ""
    anthropic_api_key: str = ""

    # Copywriter Configuration
    # openai: chat.completions / anthropic: messages
    llm_provider: Literal["openai", "anthropic"] = "openai"
    openai_model: str = "gpt-3.5-turbo"
    anthropic_model: str = "claude-haiku-4-5-20251001"
    temperature: float = 0.7
    max_tokens: int = 1000
    # 프롬프트에 넣기 전 입력 글자 수 상한 (0이면 자르지 않음)
    max_input_chars: int = 0

    # HTTP Configuration
    cors_allow_origin: str = "*"
    log_level: str = "INFO"

    # SSL / Proxy Configuration
    # 기업 프록시 환경에서 SSL 검증 오류 발생 시 false로 설정
    ssl_verify: bool = True
    # 커스텀 CA 인증서 경로 (비워두면 certifi 기본값 사용)
    ca_bundle_path: str = ""


@lru_cache
def get_settings() -> Settings:
    return Settings()
