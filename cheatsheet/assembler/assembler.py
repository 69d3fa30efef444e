"""DocumentAssembler — wraps a converted fragment in the print-ready HTML template."""

from __future__ import annotations

import logging

from cheatsheet.config.models import (
    CheatsheetConfig,
    DocumentConfig,
    HighlightConfig,
    StyleConfig,
)
from cheatsheet.assembler.models import AssembledDocument
from cheatsheet.converter.converter import code_languages, normalize_language

logger = logging.getLogger(__name__)


def derive_title(subject: str, suffix: str = " Cheat Sheet") -> str:
    """Uppercase the first character of *subject* and append *suffix*.

    The rest of the token is kept as-is: ``"fastapi"`` becomes
    ``"Fastapi Cheat Sheet"``, ``"my-tool"`` becomes ``"My-tool Cheat Sheet"``.
    """
    return subject[:1].upper() + subject[1:] + suffix


def _dedupe(items: list[str]) -> list[str]:
    out: list[str] = []
    for item in items:
        if item not in out:
            out.append(item)
    return out


class DocumentAssembler:
    """Builds complete HTML documents from (subject, fragment) pairs.

    The fragment is opaque payload: it is inserted verbatim, exactly once,
    inside the container element. Layout, heading styles and code colouring
    all come from the linked stylesheets and scripts selecting on the shapes
    the markdown converter emits. The subject is not escaped; callers validate
    it before it gets here.

    The assembler holds only configuration, so one instance can be shared
    across threads.
    """

    def __init__(
        self,
        document: DocumentConfig | None = None,
        styles: StyleConfig | None = None,
        highlight: HighlightConfig | None = None,
    ) -> None:
        self.document = document or DocumentConfig()
        self.styles = styles or StyleConfig()
        self.highlight = highlight or HighlightConfig()

    @classmethod
    def from_config(cls, config: CheatsheetConfig) -> DocumentAssembler:
        return cls(config.document, config.styles, config.highlight)

    # ------------------------------------------------------------------
    # Resource references
    # ------------------------------------------------------------------

    def _prism_url(self, path: str) -> str:
        base = self.highlight.cdn_base.rstrip("/")
        return f"{base}/{self.highlight.version}/{path}"

    @property
    def supported_languages(self) -> list[str]:
        return _dedupe([normalize_language(lang) for lang in self.highlight.languages])

    def stylesheets_for(self, subject: str) -> list[str]:
        """Stylesheet hrefs in cascade order: layout, theme, global layers, subject layers."""
        hrefs = [self.styles.stylesheet]
        if self.highlight.enabled:
            hrefs.append(self._prism_url(f"themes/{self.highlight.theme}.min.css"))
        hrefs.extend(self.styles.layers)
        hrefs.extend(self.styles.subject_layers.get(subject, []))
        return _dedupe(hrefs)

    def script_languages(self, fragment: str) -> list[str]:
        """Languages that get a highlighter component script, without duplicates."""
        supported = self.supported_languages
        if self.highlight.scripts_for == "configured":
            return supported

        present = code_languages(fragment)
        unsupported = [lang for lang in present if lang not in supported]
        if unsupported:
            logger.debug("no highlighter component for: %s", ", ".join(unsupported))
        return [lang for lang in present if lang in supported]

    def scripts_for(self, fragment: str) -> list[str]:
        """Script srcs in execution order: the engine first, then one per language."""
        if not self.highlight.enabled:
            return []
        srcs = [self._prism_url("prism.min.js")]
        for lang in self.script_languages(fragment):
            srcs.append(self._prism_url(f"components/prism-{lang}.min.js"))
        return srcs

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def assemble(self, subject: str, fragment: str) -> AssembledDocument:
        """Build the full document. Identical inputs give byte-identical output."""
        title = derive_title(subject, self.document.title_suffix)
        stylesheets = self.stylesheets_for(subject)
        scripts = self.scripts_for(fragment)

        head = [
            '  <meta charset="UTF-8">',
            '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"  <title>{title}</title>",
        ]
        head.extend(f'  <link rel="stylesheet" href="{href}">' for href in stylesheets)

        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{self.document.lang}">',
            "<head>",
            *head,
            "</head>",
            "<body>",
            f'  <div class="{self.document.container_class}">',
            fragment,
            "  </div>",
        ]
        if scripts:
            parts.append("")
            parts.extend(f'  <script src="{src}"></script>' for src in scripts)
        parts.extend(["</body>", "</html>"])

        html = "\n".join(parts)
        logger.debug(
            "assembled %s: %d bytes, %d stylesheet(s), %d script(s)",
            subject,
            len(html),
            len(stylesheets),
            len(scripts),
        )
        return AssembledDocument(
            subject=subject,
            title=title,
            html=html,
            stylesheets=stylesheets,
            scripts=scripts,
        )
