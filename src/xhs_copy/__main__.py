"""
사용법:
  uv run python -m xhs_copy

예시 입력값으로 변환을 한 번 실행하는 CLI 진입점.
실제 운영 시에는 아래 example_* 변수를 교체하여 사용.
"""
import asyncio
import logging

from xhs_copy.config import get_settings
from xhs_copy.errors import ConvertError, UpstreamServiceError
from xhs_copy.service import convert_text

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(levelname)s %(name)s: %(message)s",
)

# ── 예시 입력값 (실제 사용 시 교체) ──────────────────────────
example_text = "周末去了一家新开的咖啡店，拿铁很香，店里的绿植和木质桌椅特别适合拍照，还能安静看书。"
example_style = "casual"  # trendy | casual | professional | emotional


async def main() -> None:
    try:
        result = await convert_text(example_text, example_style)
    except UpstreamServiceError as exc:
        print(f"\n❌ {exc.public_message}: {exc.details}")
        return
    except ConvertError as exc:
        print(f"\n❌ {exc.public_message} ({exc})")
        return

    brief = result.brief
    print(f"\n{brief.profile.emoji} {brief.profile.name} — {result.copy_result.model}")
    print("-" * 40)
    print(result.copy_result.text)
    print("-" * 40)
    print(f"  키워드: {', '.join(brief.keywords)}")
    print(f"  테마: {', '.join(brief.suggestions.themes)}")
    print("  촬영 팁:")
    for tip in brief.suggestions.tips:
        print(f"    {tip}")
    print("  예시 컷:")
    for example in brief.suggestions.examples:
        print(f"    - {example}")
    if result.copy_result.usage:
        print(f"  토큰 사용량: {result.copy_result.usage.total_tokens}")


if __name__ == "__main__":
    asyncio.run(main())
