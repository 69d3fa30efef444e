"""Content loader: locates and reads markdown sources by subject."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from cheatsheet.config.models import ContentConfig
from cheatsheet.content.models import SheetSource
from cheatsheet.errors import ContentError, InvalidSubjectError

logger = logging.getLogger(__name__)


def validate_subject(subject: str, pattern: str = r"^[a-z0-9-]+$") -> str:
    """Return *subject* unchanged if it matches *pattern*, else raise InvalidSubjectError.

    Subjects end up verbatim in file paths and in the document title, so
    anything outside the safe character class is rejected here rather than
    escaped later.
    """
    if not subject or not re.fullmatch(pattern, subject):
        raise InvalidSubjectError(subject, pattern)
    return subject


def source_path(config: ContentConfig, subject: str) -> Path:
    return Path(config.directory) / f"{subject}{config.source_extension}"


def output_path(config: ContentConfig, subject: str) -> Path:
    return Path(config.directory) / f"{subject}{config.output_extension}"


def load_source(config: ContentConfig, subject: str) -> SheetSource:
    """Read the markdown source for *subject*.

    Raises InvalidSubjectError for unsafe tokens and ContentError when the
    file is missing or unreadable.
    """
    validate_subject(subject, config.subject_pattern)
    path = source_path(config, subject)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(subject, str(path), e) from e

    logger.debug("loaded %s (%d chars)", path, len(text))
    return SheetSource(subject=subject, path=str(path), markdown=text)


def discover_subjects(config: ContentConfig) -> list[str]:
    """Sorted subjects that have a source file in the content directory."""
    directory = Path(config.directory)
    if not directory.is_dir():
        return []

    subjects = []
    for path in sorted(directory.glob(f"*{config.source_extension}")):
        if not path.is_file():
            continue
        subject = path.name.removesuffix(config.source_extension)
        if re.fullmatch(config.subject_pattern, subject):
            subjects.append(subject)
        else:
            logger.warning("skipping %s: name is not a valid subject", path)
    return subjects
