from types import MappingProxyType
from typing import Any

from xhs_copy.models.style import StyleProfile, StyleTag

DEFAULT_STYLE = StyleTag.TRENDY

STYLE_PROFILES: MappingProxyType[StyleTag, StyleProfile] = MappingProxyType({
    StyleTag.TRENDY: StyleProfile(
        tag=StyleTag.TRENDY,
        name="潮流时尚",
        description="潮流时尚，紧跟热点，适合美妆、穿搭、探店内容",
        emoji="🔥",
        themes=("ins风", "简约时尚", "高级感"),
    ),
    StyleTag.CASUAL: StyleProfile(
        tag=StyleTag.CASUAL,
        name="日常分享",
        description="日常分享，轻松自然，像朋友聊天一样亲切",
        emoji="☕",
        themes=("日常随拍", "生活记录", "自然光"),
    ),
    StyleTag.PROFESSIONAL: StyleProfile(
        tag=StyleTag.PROFESSIONAL,
        name="专业评测",
        description="专业评测，客观详实，适合科技、产品、知识分享",
        emoji="📊",
        themes=("产品特写", "细节展示", "对比图"),
    ),
    StyleTag.EMOTIONAL: StyleProfile(
        tag=StyleTag.EMOTIONAL,
        name="情感共鸣",
        description="情感共鸣，温暖治愈，适合情感、生活感悟内容",
        emoji="💕",
        themes=("氛围感", "情绪画面", "故事感"),
    ),
})

# 스타일과 무관한 공통 촬영 팁
PHOTO_TIPS: tuple[str, ...] = (
    "📸 主图：人物+场景，突出主题",
    "🌈 配色：选择与风格匹配的色调",
    "🎨 构图：使用三分法，主体明确",
    "✨ 细节：添加文字标签或贴纸增加趣味性",
)


def resolve_style(value: Any) -> StyleTag:
    """임의의 입력을 4개 StyleTag 중 하나로 정규화합니다.

    - StyleTag → 그대로
    - 문자열 → 정확히 일치할 때만 매칭 ("Casual", " casual" 등은 trendy)
    - 그 외 (None, 모르는 문자열, 숫자 등) → trendy
    """
    if isinstance(value, StyleTag):
        return value
    if isinstance(value, str):
        try:
            return StyleTag(value)
        except ValueError:
            pass
    return DEFAULT_STYLE


def get_style_profile(value: Any) -> StyleProfile:
    return STYLE_PROFILES[resolve_style(value)]
