"""Markdown-to-fragment converter wrapping Python-Markdown."""

from __future__ import annotations

import logging
import re

import markdown

from cheatsheet.config.models import MarkdownConfig
from cheatsheet.converter.models import Fragment

logger = logging.getLogger(__name__)

# Prism component names for the short tags people write after ``` fences.
LANGUAGE_ALIASES: dict[str, str] = {
    "py": "python",
    "python3": "python",
    "js": "javascript",
    "sh": "bash",
    "shell": "bash",
    "zsh": "bash",
    "ts": "typescript",
    "yml": "yaml",
    "md": "markdown",
    "html": "markup",
    "xml": "markup",
}

_CODE_LANGUAGE_RE = re.compile(r'<code\b[^>]*?\bclass="[^"]*?\blanguage-([^\s"]+)')


def normalize_language(tag: str) -> str:
    """Map a fence language tag to its highlighter component name."""
    tag = tag.strip().lower()
    return LANGUAGE_ALIASES.get(tag, tag)


def code_languages(fragment_html: str) -> list[str]:
    """Return the distinct language tags of code blocks, in first-appearance order."""
    seen: list[str] = []
    for match in _CODE_LANGUAGE_RE.finditer(fragment_html):
        lang = normalize_language(match.group(1))
        if lang not in seen:
            seen.append(lang)
    return seen


class MarkdownConverter:
    """Converts markdown text to an HTML fragment.

    A fresh ``markdown.Markdown`` instance is built per call because those
    instances carry parser state between conversions.
    """

    def __init__(self, config: MarkdownConfig | None = None) -> None:
        self._config = config or MarkdownConfig()

    @property
    def extensions(self) -> list[str]:
        return list(self._config.extensions)

    def convert(self, text: str) -> Fragment:
        """Convert markdown to a fragment. Malformed input degrades to literal text."""
        md = markdown.Markdown(extensions=self.extensions)
        html = md.convert(text)
        languages = code_languages(html)
        logger.debug(
            "converted %d chars of markdown to %d chars of html (languages: %s)",
            len(text),
            len(html),
            ", ".join(languages) or "none",
        )
        return Fragment(html=html, languages=languages)
