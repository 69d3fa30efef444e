"""Conversion pipeline: load → convert → assemble → write."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel

from cheatsheet.assembler import AssembledDocument, DocumentAssembler
from cheatsheet.config.models import CheatsheetConfig
from cheatsheet.content import discover_subjects, load_source
from cheatsheet.converter import MarkdownConverter
from cheatsheet.errors import CheatsheetError
from cheatsheet.output import SheetWriter

logger = logging.getLogger(__name__)


class GeneratedSheet(BaseModel):
    path: str
    document: AssembledDocument


class BuildError(BaseModel):
    subject: str
    error: str


class BuildReport(BaseModel):
    generated: list[str] = []
    errors: list[BuildError] = []


def generate_sheet(
    subject: str, config: CheatsheetConfig, *, dry_run: bool = False
) -> GeneratedSheet:
    """Convert one subject's markdown into its HTML cheat sheet.

    Nothing is written unless the source was read and assembled successfully.
    """
    source = load_source(config.content, subject)
    fragment = MarkdownConverter(config.markdown).convert(source.markdown)
    document = DocumentAssembler.from_config(config).assemble(subject, fragment.html)
    dest = SheetWriter(config.content).write(document, dry_run=dry_run)
    return GeneratedSheet(path=str(dest), document=document)


def generate_all(config: CheatsheetConfig, *, dry_run: bool = False) -> BuildReport:
    """Generate every subject found in the content directory.

    Subjects are independent; a failing subject is recorded and the rest
    still build.
    """
    report = BuildReport()
    subjects = discover_subjects(config.content)
    logger.info("building %d subject(s) from %s", len(subjects), Path(config.content.directory))

    for subject in subjects:
        try:
            sheet = generate_sheet(subject, config, dry_run=dry_run)
        except CheatsheetError as e:
            logger.error("failed to build %s: %s", subject, e)
            report.errors.append(BuildError(subject=subject, error=str(e)))
            continue
        report.generated.append(sheet.path)

    return report
