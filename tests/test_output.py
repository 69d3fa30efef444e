"""Tests for the output subsystem: writer and validator."""

import logging
from pathlib import Path

import pytest

from cheatsheet.assembler import DocumentAssembler
from cheatsheet.config.models import CheatsheetConfig, ContentConfig, HighlightConfig
from cheatsheet.errors import OutputError
from cheatsheet.output import SheetValidator, SheetWriter, ValidationResult


def _document(subject="python", fragment="<h1>Python</h1>"):
    return DocumentAssembler().assemble(subject, fragment)


# ---------------------------------------------------------------------------
# SheetWriter
# ---------------------------------------------------------------------------


class TestSheetWriter:
    def test_write_creates_sibling_file(self, tmp_path):
        writer = SheetWriter(ContentConfig(directory=str(tmp_path)))
        path = writer.write(_document())
        assert path == tmp_path / "python.html"
        assert path.exists()

    def test_write_content_matches(self, tmp_path):
        writer = SheetWriter(ContentConfig(directory=str(tmp_path)))
        doc = _document(fragment="<p>naïve ✓</p>")
        path = writer.write(doc)
        assert path.read_text(encoding="utf-8") == doc.html

    def test_overwrites_existing(self, tmp_path):
        (tmp_path / "python.html").write_text("old", encoding="utf-8")
        writer = SheetWriter(ContentConfig(directory=str(tmp_path)))
        path = writer.write(_document())
        assert path.read_text(encoding="utf-8") != "old"

    def test_dry_run_no_file(self, tmp_path):
        writer = SheetWriter(ContentConfig(directory=str(tmp_path)))
        path = writer.write(_document(), dry_run=True)
        assert isinstance(path, Path)
        assert not path.exists()

    def test_missing_directory_raises(self, tmp_path):
        writer = SheetWriter(ContentConfig(directory=str(tmp_path / "missing")))
        with pytest.raises(OutputError) as exc_info:
            writer.write(_document())
        assert exc_info.value.subject == "python"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_write_logs_below_info(self, tmp_path, caplog):
        caplog.set_level(logging.DEBUG, logger="cheatsheet")
        SheetWriter(ContentConfig(directory=str(tmp_path))).write(_document())
        wrote = [r for r in caplog.records if r.getMessage().startswith("wrote ")]
        assert len(wrote) == 1
        assert wrote[0].levelno == logging.DEBUG

    def test_write_batch_preserves_order(self, tmp_path):
        writer = SheetWriter(ContentConfig(directory=str(tmp_path)))
        paths = writer.write_batch([_document("bash"), _document("python")])
        assert [p.name for p in paths] == ["bash.html", "python.html"]


# ---------------------------------------------------------------------------
# SheetValidator
# ---------------------------------------------------------------------------


class TestSheetValidator:
    def test_assembled_document_is_valid(self, sample_fragment):
        result = SheetValidator().validate_content(_document(fragment=sample_fragment).html)
        assert isinstance(result, ValidationResult)
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_empty_fragment_is_valid(self):
        result = SheetValidator().validate_content(_document(fragment="").html)
        assert result.valid

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValueError):
            SheetValidator(mode="loose")

    def test_bare_fragment_is_invalid(self, sample_fragment):
        result = SheetValidator().validate_content(sample_fragment)
        assert not result.valid
        assert any("DOCTYPE" in e for e in result.errors)
        assert any("charset" in e for e in result.errors)
        assert any("cheatsheet-container" in e for e in result.errors)

    def test_duplicate_container_is_invalid(self):
        html = _document(fragment='<div class="cheatsheet-container">nested</div>').html
        result = SheetValidator().validate_content(html)
        assert not result.valid
        assert any("found 2" in e for e in result.errors)

    def test_missing_shared_stylesheet(self):
        html = _document().html.replace("../styles/cheatsheet.css", "other.css")
        result = SheetValidator().validate_content(html)
        assert not result.valid
        assert any("shared stylesheet" in e for e in result.errors)

    def test_title_mismatch_is_warning(self):
        html = _document("python").html
        result = SheetValidator().validate_content(html, subject="bash")
        assert result.valid
        assert any("Bash Cheat Sheet" in w for w in result.warnings)

    def test_unsupported_language_is_warning(self):
        fragment = '<pre><code class="language-rust">fn main() {}</code></pre>'
        result = SheetValidator().validate_content(_document(fragment=fragment).html)
        assert result.valid
        assert any("'rust'" in w for w in result.warnings)

    def test_untagged_code_block_is_warning(self):
        fragment = "<pre><code>plain</code></pre><pre><code>again</code></pre>"
        result = SheetValidator().validate_content(_document(fragment=fragment).html)
        assert result.valid
        assert len([w for w in result.warnings if "without a language" in w]) == 1

    def test_inline_code_not_treated_as_block(self):
        result = SheetValidator().validate_content(_document(fragment="<p><code>x</code></p>").html)
        assert result.warnings == []

    def test_missing_language_script_is_warning(self):
        assembler = DocumentAssembler(highlight=HighlightConfig(scripts_for="detected"))
        html = assembler.assemble("python", '<pre><code class="language-bash">ls</code></pre>').html
        html = html.replace("prism-bash.min.js", "prism-other.min.js")
        result = SheetValidator().validate_content(html)
        assert any("Missing highlighter script" in w for w in result.warnings)

    def test_warn_mode_never_invalid(self, sample_fragment):
        result = SheetValidator(mode="warn").validate_content(sample_fragment)
        assert result.valid
        assert result.errors == []
        assert result.warnings

    def test_off_mode_skips(self):
        result = SheetValidator(mode="off").validate_content("not html at all")
        assert result.valid
        assert result.warnings == []

    def test_from_config(self):
        cfg = CheatsheetConfig.model_validate({"output": {"validation": "warn"}})
        assert SheetValidator.from_config(cfg).mode == "warn"

    def test_validate_file_uses_stem_as_subject(self, tmp_path):
        path = tmp_path / "bash.html"
        path.write_text(_document("python").html, encoding="utf-8")
        result = SheetValidator().validate_file(path)
        assert result.path == str(path)
        assert any("Bash Cheat Sheet" in w for w in result.warnings)

    def test_undecodable_file_reported_not_raised(self, tmp_path):
        (tmp_path / "bad.html").write_bytes(b"\xff\xfe\x80")
        (tmp_path / "python.html").write_text(_document("python").html, encoding="utf-8")
        results = SheetValidator().validate_directory(tmp_path)
        assert [r.valid for r in results] == [False, True]
        assert "Cannot read" in results[0].errors[0]

    def test_validate_missing_file(self, tmp_path):
        result = SheetValidator().validate_file(tmp_path / "ghost.html")
        assert not result.valid
        assert "File not found" in result.errors[0]

    def test_validate_directory(self, tmp_path):
        (tmp_path / "python.html").write_text(_document("python").html, encoding="utf-8")
        (tmp_path / "broken.html").write_text("<p>nope</p>", encoding="utf-8")
        (tmp_path / "python.md").write_text("# Python", encoding="utf-8")
        results = SheetValidator().validate_directory(tmp_path)
        assert [Path(r.path).name for r in results] == ["broken.html", "python.html"]
        assert [r.valid for r in results] == [False, True]

    def test_validate_not_a_directory(self, tmp_path):
        results = SheetValidator().validate_directory(tmp_path / "nope")
        assert len(results) == 1
        assert not results[0].valid
