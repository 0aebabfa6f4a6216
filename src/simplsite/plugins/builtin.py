"""Built-in plugins registered on ``default_registry``.

- ``reading_time``: word count and estimated reading minutes.
- ``heading_anchors``: ``id`` attributes on headings plus a ``toc`` list.
- ``canonical_url``: absolute page URL for ``<link rel="canonical">``.
"""

import html
import math
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from simplsite.plugins.types import PluginContext, TemplateContext, TransformResult

if TYPE_CHECKING:
    from simplsite.plugins.registry import PluginRegistry

_TAG_RE = re.compile(r"<[^>]+>")
_WORD_RE = re.compile(r"\b\w+\b")
_SLUG_STRIP_RE = re.compile(r"[^\w\s-]")
_SLUG_SPACE_RE = re.compile(r"[\s_-]+")


def slugify(text: str) -> str:
    """Lowercase, strip punctuation, join words with hyphens."""
    text = _SLUG_STRIP_RE.sub("", text.lower()).strip()
    return _SLUG_SPACE_RE.sub("-", text) or "section"


class ReadingTime:
    """Adds ``word_count`` and ``reading_time`` (minutes) metadata."""

    def __init__(self, options: Mapping[str, Any]) -> None:
        self.words_per_minute = int(options.get("words_per_minute", 200))
        if self.words_per_minute <= 0:
            msg = f"words_per_minute must be positive, got {self.words_per_minute}"
            raise ValueError(msg)

    def transform(self, content: str, context: PluginContext) -> TransformResult:
        words = len(_WORD_RE.findall(html.unescape(_TAG_RE.sub(" ", content))))
        minutes = max(1, math.ceil(words / self.words_per_minute))
        return TransformResult(content, {"word_count": words, "reading_time": minutes})


class HeadingAnchors:
    """Adds ``id`` attributes to headings and collects a table of contents.

    Headings that already carry attributes are left untouched.  Repeated
    titles get ``-2``, ``-3`` suffixes so ids stay unique per page.
    """

    def __init__(self, options: Mapping[str, Any]) -> None:
        levels = tuple(int(level) for level in options.get("levels", (2, 3)))
        if not levels or any(not 1 <= level <= 6 for level in levels):
            msg = f"levels must be heading levels 1-6, got {levels!r}"
            raise ValueError(msg)
        pattern = "|".join(str(level) for level in levels)
        self._heading_re = re.compile(rf"<h({pattern})>(.*?)</h\1>", re.DOTALL)

    def transform(self, content: str, context: PluginContext) -> TransformResult:
        toc: list[dict[str, Any]] = []
        seen: dict[str, int] = {}

        def anchor(match: re.Match[str]) -> str:
            level, inner = match.group(1), match.group(2)
            title = html.unescape(_TAG_RE.sub("", inner)).strip()
            slug = slugify(title)
            count = seen.get(slug, 0) + 1
            seen[slug] = count
            if count > 1:
                slug = f"{slug}-{count}"
            toc.append({"id": slug, "title": title, "level": int(level)})
            return f'<h{level} id="{slug}">{inner}</h{level}>'

        return TransformResult(self._heading_re.sub(anchor, content), {"toc": toc})


class CanonicalUrl:
    """Exposes ``canonical_url`` to templates.

    Built from ``base_url`` when given, otherwise from the site URL.  The
    site URL travels to ``extend_template`` through page metadata, since
    one plugin instance serves every concurrent request.
    """

    def __init__(self, options: Mapping[str, Any]) -> None:
        self.base_url = str(options.get("base_url", "")).rstrip("/")

    def transform(self, content: str, context: PluginContext) -> TransformResult:
        if self.base_url:
            return TransformResult(content)
        return TransformResult(content, {"site_url": context.site_url})

    def extend_template(self, context: TemplateContext) -> TemplateContext:
        base = self.base_url or str(context.metadata.get("site_url", "")).rstrip("/")
        return context.with_values(canonical_url=base + "/" + context.route.lstrip("/"))


def register_builtins(registry: "PluginRegistry") -> None:
    """Register the built-in plugins on ``registry``."""
    registry.add("reading_time", ReadingTime)
    registry.add("heading_anchors", HeadingAnchors)
    registry.add("canonical_url", CanonicalUrl)
