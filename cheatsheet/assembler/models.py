"""Pydantic models for the document assembler."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AssembledDocument(BaseModel):
    """A complete HTML document for one subject. Never mutated after assembly."""

    model_config = ConfigDict(frozen=True)

    subject: str
    title: str
    html: str
    stylesheets: list[str]
    scripts: list[str]
