"""Document assembly: wraps converted fragments into complete HTML documents."""

from cheatsheet.assembler.assembler import DocumentAssembler, derive_title
from cheatsheet.assembler.models import AssembledDocument

__all__ = [
    "AssembledDocument",
    "DocumentAssembler",
    "derive_title",
]
