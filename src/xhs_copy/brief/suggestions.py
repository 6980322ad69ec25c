from collections.abc import Sequence
from typing import Any

from xhs_copy.models.brief import SuggestionBundle

from .styles import PHOTO_TIPS, get_style_profile

MAX_BUNDLE_KEYWORDS = 3
EXAMPLE_SUFFIX = "相关场景照"


def generate_suggestions(keywords: Sequence[str], style: Any) -> SuggestionBundle:
    """키워드 + 스타일 → 이미지 추천 번들 (LLM 호출 없음).

    examples는 잘리지 않은 전체 키워드 기준, keywords는 앞 3개만 담습니다.
    """
    profile = get_style_profile(style)
    return SuggestionBundle(
        themes=list(profile.themes),
        keywords=list(keywords[:MAX_BUNDLE_KEYWORDS]),
        tips=list(PHOTO_TIPS),
        examples=[f"{keyword}{EXAMPLE_SUFFIX}" for keyword in keywords],
    )
