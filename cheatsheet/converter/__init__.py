"""Markdown conversion subsystem — wraps Python-Markdown."""

from cheatsheet.converter.contract import OUTPUT_SHAPES, ShapeRule, check_output_shape
from cheatsheet.converter.converter import (
    LANGUAGE_ALIASES,
    MarkdownConverter,
    code_languages,
    normalize_language,
)
from cheatsheet.converter.models import Fragment

__all__ = [
    "Fragment",
    "LANGUAGE_ALIASES",
    "MarkdownConverter",
    "OUTPUT_SHAPES",
    "ShapeRule",
    "check_output_shape",
    "code_languages",
    "normalize_language",
]
