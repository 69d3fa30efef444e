"""SheetWriter — writes assembled documents next to their markdown sources."""

from __future__ import annotations

import logging
from pathlib import Path

from cheatsheet.assembler.models import AssembledDocument
from cheatsheet.config.models import ContentConfig
from cheatsheet.content.loader import output_path
from cheatsheet.errors import OutputError

logger = logging.getLogger(__name__)


class SheetWriter:
    """Writes AssembledDocument instances to ``<directory>/<subject><output_extension>``.

    Existing files are overwritten without confirmation. The content
    directory must already exist; a missing directory is a write error.
    """

    def __init__(self, config: ContentConfig) -> None:
        self.config = config

    def destination(self, subject: str) -> Path:
        return output_path(self.config, subject)

    def write(self, document: AssembledDocument, *, dry_run: bool = False) -> Path:
        """Write a single document to disk.

        Returns the Path of the written (or would-be) file.
        """
        dest = self.destination(document.subject)

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        try:
            dest.write_text(document.html, encoding="utf-8")
        except OSError as e:
            raise OutputError(document.subject, str(dest), e) from e

        logger.debug("wrote %s (%d bytes)", dest, len(document.html.encode("utf-8")))
        return dest

    def write_batch(
        self, documents: list[AssembledDocument], *, dry_run: bool = False
    ) -> list[Path]:
        """Write multiple documents. Returns list of paths in input order."""
        return [self.write(doc, dry_run=dry_run) for doc in documents]
