from .copywriter import build_prompt, write_copy

__all__ = [
    "write_copy",
    "build_prompt",
]
