import re

# 한자(CJK 통합 한자 기본 블록)·영문·숫자 이외의 문자는 모두 구분자로 취급
_NON_WORD_PATTERN = re.compile(r"[^\u4e00-\u9fa5a-zA-Z0-9]")

MAX_KEYWORDS = 5

STOP_WORDS: frozenset[str] = frozenset({
    "的", "了", "在", "是", "我", "有", "和", "就", "不", "人",
    "都", "一", "个", "上", "也", "很", "到", "说", "要", "去",
    "你", "会", "着", "没有", "看", "好", "自己", "这",
})

FALLBACK_KEYWORDS: tuple[str, ...] = ("生活", "分享", "记录")


def extract_keywords(text: str) -> list[str]:
    """입력 텍스트에서 이미지 추천용 키워드를 최대 5개 추출합니다.

    빈도 순위나 중복 제거 없이 등장 순서를 그대로 유지합니다.
    남는 토큰이 없으면 FALLBACK_KEYWORDS를 반환하므로 결과는 항상 1개 이상입니다.
    빈 문자열 검증은 호출자(service) 책임입니다.
    """
    tokens = _NON_WORD_PATTERN.sub(" ", text).split()
    keywords = [
        token for token in tokens
        if len(token) > 1 and token not in STOP_WORDS
    ][:MAX_KEYWORDS]
    return keywords or list(FALLBACK_KEYWORDS)
