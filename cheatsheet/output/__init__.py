"""Output subsystem — writes and validates generated cheat sheets."""

from cheatsheet.output.validator import SheetValidator, ValidationResult
from cheatsheet.output.writer import SheetWriter

__all__ = [
    "SheetValidator",
    "SheetWriter",
    "ValidationResult",
]
