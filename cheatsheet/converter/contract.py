"""Markdown output-shape contract.

The shared stylesheet and the client-side highlighter select on the exact
tag/class shapes the markdown engine emits. Each rule below pairs a stylesheet
selector with a pattern the converted sample document must contain. A new
engine version or a changed extension list that breaks a shape is reported by
:func:`check_output_shape` instead of silently producing an unstyled sheet.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from cheatsheet.converter.converter import MarkdownConverter


class ShapeRule(BaseModel):
    """One tag/class shape the stylesheet depends on."""

    name: str
    selector: str
    pattern: str


OUTPUT_SHAPES: list[ShapeRule] = [
    ShapeRule(name="title heading", selector="h1", pattern=r"<h1\b[^>]*>Sample Title</h1>"),
    ShapeRule(name="section heading", selector="h2", pattern=r"<h2\b[^>]*>Section</h2>"),
    ShapeRule(name="subsection heading", selector="h3", pattern=r"<h3\b[^>]*>Subsection</h3>"),
    ShapeRule(
        name="fenced code block",
        selector='pre > code[class*="language-"]',
        pattern=r'<pre>\s*<code\b[^>]*\bclass="[^"]*\blanguage-python\b[^"]*"',
    ),
    ShapeRule(name="inline code", selector="code", pattern=r"<code>sample_inline</code>"),
    ShapeRule(name="table", selector="table", pattern=r"<table\b"),
]

SAMPLE_MARKDOWN = """\
# Sample Title

## Section

### Subsection

Call `sample_inline` here.

```python
print("sample")
```

| key | value |
| --- | ----- |
| a   | 1     |
"""


def check_output_shape(converter: MarkdownConverter) -> list[str]:
    """Convert the sample document and return one message per broken shape."""
    html = converter.convert(SAMPLE_MARKDOWN).html
    problems = []
    for rule in OUTPUT_SHAPES:
        if not re.search(rule.pattern, html):
            problems.append(
                f"{rule.name}: converter output no longer matches selector '{rule.selector}'"
            )
    return problems
