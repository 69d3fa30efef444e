from pydantic import BaseModel, Field
from typing import Literal


class ContentConfig(BaseModel):
    directory: str = "cheatsheets"
    source_extension: str = ".md"
    output_extension: str = ".html"
    default_subject: str = "python"
    subject_pattern: str = r"^[a-z0-9-]+$"


class MarkdownConfig(BaseModel):
    extensions: list[str] = ["fenced_code", "tables"]


class DocumentConfig(BaseModel):
    lang: str = "en"
    container_class: str = "cheatsheet-container"
    title_suffix: str = " Cheat Sheet"


class StyleConfig(BaseModel):
    stylesheet: str = "../styles/cheatsheet.css"
    layers: list[str] = []
    subject_layers: dict[str, list[str]] = {}


class HighlightConfig(BaseModel):
    enabled: bool = True
    cdn_base: str = "https://cdnjs.cloudflare.com/ajax/libs/prism"
    version: str = "1.29.0"
    theme: str = "prism"
    languages: list[str] = ["python", "javascript", "bash"]
    scripts_for: Literal["configured", "detected"] = "configured"


class OutputConfig(BaseModel):
    validation: Literal["strict", "warn", "off"] = "strict"


class CheatsheetConfig(BaseModel):
    content: ContentConfig = Field(default_factory=ContentConfig)
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    document: DocumentConfig = Field(default_factory=DocumentConfig)
    styles: StyleConfig = Field(default_factory=StyleConfig)
    highlight: HighlightConfig = Field(default_factory=HighlightConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
