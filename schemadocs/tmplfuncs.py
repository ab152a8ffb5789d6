"""Helper functions available to documentation templates."""

from __future__ import annotations

from pathlib import Path


def prefix_lines(prefix: str, text: str) -> str:
    """Put ``prefix`` in front of every line of ``text``."""
    return prefix + ("\n" + prefix).join(text.split("\n"))


def code_file(format: str, file: str | Path) -> str:
    """Return the trimmed content of ``file`` as a fenced code block in ``format``."""
    try:
        content = Path(file).read_text(encoding="utf-8")
    except OSError as exc:
        raise OSError(f'unable to read content from "{file}": {exc}') from exc

    stripped = content.strip()
    if not stripped:
        raise ValueError(f'no file content in "{file}"')

    return f"```{format}\n{stripped}\n```"