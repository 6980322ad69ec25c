"""이미지 추천 번들 / 스타일 해석 테스트"""
import pytest

from xhs_copy.brief import build_content_brief
from xhs_copy.brief.styles import PHOTO_TIPS, STYLE_PROFILES, resolve_style
from xhs_copy.brief.suggestions import generate_suggestions
from xhs_copy.models.style import StyleTag


@pytest.mark.parametrize("tag", list(StyleTag))
def test_known_styles_use_their_profile_themes(tag):
    bundle = generate_suggestions(["咖啡"], tag.value)
    assert bundle.themes == list(STYLE_PROFILES[tag].themes)
    assert 3 <= len(bundle.themes) <= 4


def test_emotional_scenario():
    bundle = generate_suggestions(["猫", "狗"], "emotional")
    assert bundle.themes == ["氛围感", "情绪画面", "故事感"]
    assert bundle.keywords == ["猫", "狗"]
    assert bundle.examples == ["猫相关场景照", "狗相关场景照"]


def test_unknown_style_with_no_keywords():
    bundle = generate_suggestions([], "unknown_style_xyz")
    assert bundle.themes == list(STYLE_PROFILES[StyleTag.TRENDY].themes)
    assert bundle.keywords == []
    assert bundle.examples == []
    assert len(bundle.tips) == 4


def test_keywords_capped_at_three_but_examples_are_not():
    keywords = ["春天", "夏天", "秋天", "冬天", "早晨"]
    bundle = generate_suggestions(keywords, "casual")
    assert bundle.keywords == ["春天", "夏天", "秋天"]
    assert bundle.examples == [f"{kw}相关场景照" for kw in keywords]


def test_tips_are_style_independent():
    trendy = generate_suggestions(["a1"], "trendy")
    professional = generate_suggestions(["a1"], "professional")
    assert trendy.tips == professional.tips == list(PHOTO_TIPS)


def test_tips_serialized_under_suggestions_key():
    dumped = generate_suggestions(["猫"], "trendy").model_dump(by_alias=True)
    assert set(dumped) == {"themes", "keywords", "suggestions", "examples"}


@pytest.mark.parametrize(
    "value, expected",
    [
        ("trendy", StyleTag.TRENDY),
        ("casual", StyleTag.CASUAL),
        ("professional", StyleTag.PROFESSIONAL),
        (" Professional ", StyleTag.TRENDY),
        ("CASUAL", StyleTag.TRENDY),
        (StyleTag.EMOTIONAL, StyleTag.EMOTIONAL),
        ("unknown_style_xyz", StyleTag.TRENDY),
        ("", StyleTag.TRENDY),
        (None, StyleTag.TRENDY),
        (42, StyleTag.TRENDY),
    ],
)
def test_resolve_style_is_total(value, expected):
    assert resolve_style(value) is expected


def test_style_profiles_are_read_only():
    with pytest.raises(TypeError):
        STYLE_PROFILES[StyleTag.TRENDY] = STYLE_PROFILES[StyleTag.CASUAL]


def test_build_content_brief_agrees_on_unknown_style():
    brief = build_content_brief("周末，咖啡店，看书", "vintage")
    assert brief.style is StyleTag.TRENDY
    assert brief.profile.tag is StyleTag.TRENDY
    assert brief.keywords == ["周末", "咖啡店", "看书"]
    assert brief.suggestions.themes == list(brief.profile.themes)
    assert brief.suggestions.examples == ["周末相关场景照", "咖啡店相关场景照", "看书相关场景照"]
