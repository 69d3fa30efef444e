"""Pydantic models for the markdown conversion subsystem."""

from __future__ import annotations

from pydantic import BaseModel


class Fragment(BaseModel):
    """HTML body content converted from markdown, without a document wrapper."""

    html: str
    languages: list[str] = []  # distinct code-block language tags, first-seen order
