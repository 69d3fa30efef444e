from .loader import load_config
from .models import (
    CheatsheetConfig,
    ContentConfig,
    DocumentConfig,
    HighlightConfig,
    MarkdownConfig,
    OutputConfig,
    StyleConfig,
)

__all__ = [
    "CheatsheetConfig",
    "ContentConfig",
    "DocumentConfig",
    "HighlightConfig",
    "MarkdownConfig",
    "OutputConfig",
    "StyleConfig",
    "load_config",
]
