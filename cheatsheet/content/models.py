"""Pydantic models for loaded cheat sheet content."""

from __future__ import annotations

from pydantic import BaseModel


class SheetSource(BaseModel):
    """Raw markdown for one subject, as read from the content directory."""

    subject: str
    path: str
    markdown: str
