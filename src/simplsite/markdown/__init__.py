"""Markdown content parsing: YAML front matter plus patitas rendering.

The renderer only depends on the ``ContentParser`` protocol, so any
object with a ``parse(text)`` method can stand in for ``MarkdownParser``.
"""

from simplsite.markdown.parser import ContentParser, MarkdownParser, ParsedContent, split_front_matter

__all__ = [
    "ContentParser",
    "MarkdownParser",
    "ParsedContent",
    "split_front_matter",
]
