from typing import Any

from xhs_copy.models.brief import ContentBrief

from .keywords import FALLBACK_KEYWORDS, STOP_WORDS, extract_keywords
from .styles import PHOTO_TIPS, STYLE_PROFILES, get_style_profile, resolve_style
from .suggestions import generate_suggestions


def build_content_brief(text: str, style: Any = None) -> ContentBrief:
    """원문 + 스타일 → 키워드와 이미지 추천이 담긴 ContentBrief."""
    tag = resolve_style(style)
    keywords = extract_keywords(text)
    return ContentBrief(
        style=tag,
        profile=STYLE_PROFILES[tag],
        keywords=keywords,
        suggestions=generate_suggestions(keywords, tag),
    )


__all__ = [
    "build_content_brief",
    "extract_keywords",
    "generate_suggestions",
    "resolve_style",
    "get_style_profile",
    "STYLE_PROFILES",
    "STOP_WORDS",
    "FALLBACK_KEYWORDS",
    "PHOTO_TIPS",
]
