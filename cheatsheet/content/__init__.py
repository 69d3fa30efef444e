"""Subject validation and markdown source loading."""

from cheatsheet.content.loader import (
    discover_subjects,
    load_source,
    output_path,
    source_path,
    validate_subject,
)
from cheatsheet.content.models import SheetSource

__all__ = [
    "SheetSource",
    "discover_subjects",
    "load_source",
    "output_path",
    "source_path",
    "validate_subject",
]
