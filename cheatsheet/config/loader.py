"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import CheatsheetConfig


def load_config(cli_path: str | None = None) -> CheatsheetConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./cheatsheet.yaml"),
        Path.home() / ".cheatsheet" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                raw = _expand_env_vars(raw)
                raw = _resolve_content_dir(raw, path.parent)
                return CheatsheetConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except (TypeError, ValidationError) as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return CheatsheetConfig()


def _resolve_content_dir(raw: object, config_dir: Path) -> object:
    """Anchor a relative content.directory at the directory holding the config file."""
    if not isinstance(raw, dict):
        return raw
    content = raw.get("content")
    if not isinstance(content, dict) or not isinstance(content.get("directory"), str):
        return raw

    directory = Path(content["directory"]).expanduser()
    if directory.is_absolute():
        return raw
    return {**raw, "content": {**content, "directory": str(config_dir / directory)}}


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `cheatsheet config init`
DEFAULT_CONFIG_TEMPLATE = """\
# cheatsheet.yaml

# Content
content:
  directory: "cheatsheets"       # <directory>/<subject>.md -> <directory>/<subject>.html
  source_extension: ".md"
  output_extension: ".html"
  default_subject: "python"
  subject_pattern: "^[a-z0-9-]+$"

# Markdown (Python-Markdown extension names)
markdown:
  extensions: ["fenced_code", "tables"]

# Document
document:
  lang: "en"
  container_class: "cheatsheet-container"
  title_suffix: " Cheat Sheet"

# Stylesheets, in cascade order after the highlighting theme
styles:
  stylesheet: "../styles/cheatsheet.css"
  layers: []
  # subject_layers:
  #   python: ["../styles/python.frozen.css"]

# Syntax highlighting (Prism.js)
highlight:
  enabled: true
  cdn_base: "https://cdnjs.cloudflare.com/ajax/libs/prism"
  version: "1.29.0"
  theme: "prism"                 # prism | prism-okaidia | prism-tomorrow | ...
  languages: ["python", "javascript", "bash"]
  scripts_for: "configured"      # configured | detected

# Output
output:
  validation: "strict"           # strict | warn | off

# Logging
log_level: "info"                # debug | info | warn | error
"""
