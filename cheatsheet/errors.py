"""Exception types shared across the cheatsheet pipeline."""

from __future__ import annotations


class CheatsheetError(Exception):
    """Base class for errors that abort a conversion."""


class InvalidSubjectError(CheatsheetError, ValueError):
    """Subject token is not safe to use in a file path or document title."""

    def __init__(self, subject: str, pattern: str) -> None:
        self.subject = subject
        self.pattern = pattern
        super().__init__(f"Invalid subject {subject!r}: must match {pattern}")


class ContentError(CheatsheetError):
    """Wraps a failure to read the markdown source for a subject."""

    def __init__(self, subject: str, path: str, cause: Exception) -> None:
        self.subject = subject
        self.path = path
        super().__init__(f"Cannot read {path} for subject {subject!r}: {cause}")
        self.__cause__ = cause


class OutputError(CheatsheetError):
    """Wraps a failure to write the assembled document."""

    def __init__(self, subject: str, path: str, cause: Exception) -> None:
        self.subject = subject
        self.path = path
        super().__init__(f"Cannot write {path} for subject {subject!r}: {cause}")
        self.__cause__ = cause
