"""Structural validator for generated cheat sheet documents."""

from __future__ import annotations

import logging
from html.parser import HTMLParser
from pathlib import Path

from pydantic import BaseModel, Field

from cheatsheet.assembler.assembler import derive_title
from cheatsheet.config.models import (
    CheatsheetConfig,
    DocumentConfig,
    HighlightConfig,
    StyleConfig,
)
from cheatsheet.converter.converter import normalize_language

logger = logging.getLogger(__name__)


class ValidationResult(BaseModel):
    """Result of validating a single generated document."""

    valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    path: str = ""


class _DocumentScanner(HTMLParser):
    """Collects the structural facts the validator checks."""

    def __init__(self, container_class: str) -> None:
        super().__init__(convert_charrefs=True)
        self.container_class = container_class
        self.doctype = False
        self.html_lang: str | None = None
        self.charset_metas = 0
        self.viewport_metas = 0
        self.titles: list[str] = []
        self.stylesheets: list[str] = []
        self.scripts: list[str] = []
        self.containers = 0
        self.code_blocks: list[str | None] = []
        self._in_pre = 0
        self._in_title = False

    def handle_decl(self, decl: str) -> None:
        if decl.strip().lower() == "doctype html":
            self.doctype = True

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        a = {k: (v or "") for k, v in attrs}
        classes = a.get("class", "").split()

        if tag == "html":
            self.html_lang = a.get("lang")
        elif tag == "meta":
            if "charset" in a:
                self.charset_metas += 1
            if a.get("name", "").lower() == "viewport":
                self.viewport_metas += 1
        elif tag == "title":
            self._in_title = True
            self.titles.append("")
        elif tag == "link" and a.get("rel", "").lower() == "stylesheet":
            self.stylesheets.append(a.get("href", ""))
        elif tag == "script" and "src" in a:
            self.scripts.append(a["src"])
        elif tag == "div" and self.container_class in classes:
            self.containers += 1
        elif tag == "pre":
            self._in_pre += 1
        elif tag == "code" and self._in_pre:
            lang = next((c[len("language-"):] for c in classes if c.startswith("language-")), None)
            self.code_blocks.append(lang)

    def handle_endtag(self, tag: str) -> None:
        if tag == "title":
            self._in_title = False
        elif tag == "pre" and self._in_pre:
            self._in_pre -= 1

    def handle_data(self, data: str) -> None:
        if self._in_title:
            self.titles[-1] += data


class SheetValidator:
    """Validates generated documents against the assembler's layout contract.

    Supports three modes via OutputConfig.validation:
      - "strict": structural problems → invalid, highlighting gaps → warnings
      - "warn": log everything as warnings but still return valid
      - "off": skip validation, always return valid
    """

    def __init__(
        self,
        mode: str = "strict",
        document: DocumentConfig | None = None,
        styles: StyleConfig | None = None,
        highlight: HighlightConfig | None = None,
    ) -> None:
        if mode not in ("strict", "warn", "off"):
            raise ValueError(f"Unknown validation mode: {mode!r}")
        self.mode = mode
        self.document = document or DocumentConfig()
        self.styles = styles or StyleConfig()
        self.highlight = highlight or HighlightConfig()

    @classmethod
    def from_config(cls, config: CheatsheetConfig) -> SheetValidator:
        return cls(config.output.validation, config.document, config.styles, config.highlight)

    def validate_file(self, path: str | Path) -> ValidationResult:
        """Validate a single generated document; the subject is the file stem."""
        path = Path(path)
        result = ValidationResult(path=str(path))

        if self.mode == "off":
            return result

        if not path.exists():
            result.errors.append(f"File not found: {path}")
            result.valid = False
            return result

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            result.errors.append(f"Cannot read {path}: {e}")
            result.valid = False
            return result
        return self._validate_content(content, result, subject=path.stem)

    def validate_content(
        self, content: str, source: str = "<string>", subject: str | None = None
    ) -> ValidationResult:
        """Validate document content from a string."""
        result = ValidationResult(path=source)

        if self.mode == "off":
            return result

        return self._validate_content(content, result, subject=subject)

    def validate_directory(self, path: str | Path, extension: str = ".html") -> list[ValidationResult]:
        """Validate all generated documents in a directory."""
        path = Path(path)
        results: list[ValidationResult] = []

        if not path.is_dir():
            r = ValidationResult(path=str(path), valid=False)
            r.errors.append(f"Not a directory: {path}")
            results.append(r)
            return results

        for html_file in sorted(path.glob(f"*{extension}")):
            results.append(self.validate_file(html_file))

        return results

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _validate_content(
        self, content: str, result: ValidationResult, subject: str | None
    ) -> ValidationResult:
        scanner = _DocumentScanner(self.document.container_class)
        scanner.feed(content)
        scanner.close()

        if not scanner.doctype:
            self._add_issue(result, "Missing <!DOCTYPE html> declaration")
        if not scanner.html_lang:
            self._add_issue(result, "Missing lang attribute on <html>")

        for label, count in (
            ("charset <meta>", scanner.charset_metas),
            ("viewport <meta>", scanner.viewport_metas),
            ("<title>", len(scanner.titles)),
        ):
            if count != 1:
                self._add_issue(result, f"Expected exactly one {label}, found {count}")

        if subject is not None and len(scanner.titles) == 1:
            expected = derive_title(subject, self.document.title_suffix)
            if scanner.titles[0] != expected:
                self._add_issue(
                    result,
                    f"Title {scanner.titles[0]!r} does not match subject (expected {expected!r})",
                    warning=True,
                )

        if self.styles.stylesheet not in scanner.stylesheets:
            self._add_issue(result, f"Missing shared stylesheet link: {self.styles.stylesheet}")
        elif scanner.stylesheets[0] != self.styles.stylesheet:
            self._add_issue(result, "Shared stylesheet is not the first stylesheet", warning=True)

        if scanner.containers != 1:
            self._add_issue(
                result,
                f"Expected exactly one .{self.document.container_class} element, "
                f"found {scanner.containers}",
            )

        self._check_code_blocks(scanner, result)
        return result

    def _check_code_blocks(self, scanner: _DocumentScanner, result: ValidationResult) -> None:
        """Highlighting gaps only ever produce warnings: the block still renders, uncoloured."""
        supported = {normalize_language(lang) for lang in self.highlight.languages}
        reported: set[str] = set()
        for lang in scanner.code_blocks:
            if lang is None:
                if "" not in reported:
                    self._add_issue(result, "Code block without a language tag", warning=True)
                    reported.add("")
                continue
            lang = normalize_language(lang)
            if lang in reported:
                continue
            reported.add(lang)
            if not self.highlight.enabled:
                continue
            if lang not in supported:
                self._add_issue(
                    result, f"No highlighter support for language {lang!r}", warning=True
                )
            elif not any(src.endswith(f"/prism-{lang}.min.js") for src in scanner.scripts):
                self._add_issue(
                    result, f"Missing highlighter script for language {lang!r}", warning=True
                )

    def _add_issue(self, result: ValidationResult, message: str, *, warning: bool = False) -> None:
        """Add an error or warning depending on mode."""
        if self.mode == "strict":
            if warning:
                result.warnings.append(message)
            else:
                result.errors.append(message)
                result.valid = False
        elif self.mode == "warn":
            # Everything becomes a warning; file stays valid
            result.warnings.append(message)
            logger.warning("%s: %s", result.path, message)
