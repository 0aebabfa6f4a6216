"""Markdown parser wrapping patitas with YAML front matter.

A content file may start with a front matter block::

    ---
    title: Hello
    tags: [intro]
    ---
    # Body

The block becomes the initial metadata; the rest is rendered to HTML.
"""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import Any, Protocol

import yaml
from patitas import Markdown

_DELIMITER = "---"


@dataclass(frozen=True, slots=True)
class ParsedContent:
    """Result of parsing raw content: rendered HTML plus metadata."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


class ContentParser(Protocol):
    """Raw text in, ``ParsedContent`` out. May return an awaitable."""

    def parse(self, text: str) -> ParsedContent | Awaitable[ParsedContent]: ...


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split a leading ``---`` delimited YAML block from ``text``.

    Returns ``(metadata, body)``.  Text without a complete block is
    returned unchanged with empty metadata.  A block that parses to
    something other than a mapping is ignored.

    Raises:
        yaml.YAMLError: If the block is not valid YAML.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _DELIMITER:
        return {}, text

    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() == _DELIMITER:
            block = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            data = yaml.safe_load(block)
            if not isinstance(data, dict):
                return {}, body
            return {str(key): value for key, value in data.items()}, body

    # Unterminated block: treat the whole thing as body
    return {}, text


class MarkdownParser:
    """Render markdown content files to HTML via patitas.

    Args:
        plugins: Patitas plugins to enable (default: all).
        highlight: Enable syntax highlighting for fenced code blocks.
    """

    __slots__ = ("_md",)

    def __init__(
        self,
        *,
        plugins: list[str] | tuple[str, ...] | None = None,
        highlight: bool = False,
    ) -> None:
        self._md = Markdown(plugins=list(plugins) if plugins else ["all"], highlight=highlight)

    def parse(self, text: str) -> ParsedContent:
        """Parse front matter and render the markdown body."""
        metadata, body = split_front_matter(text)
        html = self._md(body) if body.strip() else ""
        return ParsedContent(content=html, metadata=metadata)
