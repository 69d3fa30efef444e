"""Shared test fixtures for cheatsheet."""

import pytest

from cheatsheet.config.models import CheatsheetConfig, ContentConfig


SAMPLE_MARKDOWN = """\
# Python

## Lists

```python
items = [1, 2, 3]
```

Use `len(items)` for the size.
"""


@pytest.fixture
def sample_config():
    return CheatsheetConfig()


@pytest.fixture
def sample_fragment():
    return (
        "<h1>Python</h1>\n"
        "<h2>Lists</h2>\n"
        '<pre><code class="language-python">items = [1, 2, 3]\n</code></pre>\n'
        "<p>Use <code>len(items)</code> for the size.</p>"
    )


@pytest.fixture
def content_dir(tmp_path):
    """A temp content directory holding a couple of markdown sources."""
    directory = tmp_path / "cheatsheets"
    directory.mkdir()
    (directory / "python.md").write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    (directory / "bash.md").write_text(
        "# Bash\n\n```bash\necho hi\n```\n", encoding="utf-8"
    )
    return directory


@pytest.fixture
def content_config(content_dir):
    return CheatsheetConfig(content=ContentConfig(directory=str(content_dir)))
