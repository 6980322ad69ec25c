from .brief import ContentBrief, SuggestionBundle
from .convert import (
    ConvertRequest,
    ConvertResponse,
    ConvertResult,
    CopyResult,
    ErrorResponse,
    TokenUsage,
)
from .style import StyleProfile, StyleTag

__all__ = [
    "StyleTag",
    "StyleProfile",
    "SuggestionBundle",
    "ContentBrief",
    "ConvertRequest",
    "TokenUsage",
    "CopyResult",
    "ConvertResult",
    "ConvertResponse",
    "ErrorResponse",
]
