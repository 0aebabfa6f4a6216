"""Content rendering and the 404 fallback machine.

One render runs load -> parse -> transform chain -> extend chain ->
template + layout, strictly in that order.  Failures are recovered here
and nowhere else::

    Rendering ──ok──────────────────────────────> SUCCESS (200)
        │
        ├─ NotFound, path != 404.md ─> retry 404.md ─ok─> RENDERED_FALLBACK (404)
        │                                  └─fail─┐
        └─ anything else ─────────────────────────┴─> HARD_FALLBACK (404)

The retry renders the 404 page directly, without re-entering the
machine, so a missing 404 page costs exactly one extra attempt.
"""

import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import anyio
from kida.template import Markup

from simplsite.content import ContentLoader
from simplsite.errors import ErrorKind, error_kind
from simplsite.markdown import ContentParser, ParsedContent
from simplsite.plugins import PluginContext, PluginPipeline, TemplateContext
from simplsite.templating import TemplateCompositor

logger = logging.getLogger("simplsite.render")

NOT_FOUND_PATH = "404.md"
NOT_FOUND_ROUTE = "/404"
HARD_FALLBACK_HTML = "<h1>404 - Page Not Found</h1><p>The requested page could not be found.</p>"


class FallbackState(Enum):
    """Terminal state a render finished in."""

    SUCCESS = "success"
    RENDERED_FALLBACK = "rendered_fallback"
    HARD_FALLBACK = "hard_fallback"


@dataclass(frozen=True, slots=True)
class RenderOutcome:
    """Rendered HTML with its status and the state that produced it."""

    content: str
    status: int
    state: FallbackState


class RenderController:
    """Orchestrates one content render and owns the fallback machine.

    Args:
        loader: Reads raw content for a content type.
        parser: Turns raw text into HTML plus metadata.
        pipeline: Plugins applied after parsing and before templating.
        compositor: Renders the content type's template and layout.
        default_content_type: Content type used for the 404 page.
        site_title: Exposed to templates as ``site_title``.
        site_url: Exposed to plugins via ``PluginContext``.
        template_dir: Exposed to plugins via ``PluginContext``.
        content_sources: ``type -> path`` mapping for ``PluginContext``.
        timeout: Upper bound in seconds for each render attempt.
    """

    __slots__ = (
        "_compositor",
        "_content_sources",
        "_default_content_type",
        "_loader",
        "_parser",
        "_pipeline",
        "_site_title",
        "_site_url",
        "_template_dir",
        "_timeout",
    )

    def __init__(
        self,
        *,
        loader: ContentLoader,
        parser: ContentParser,
        pipeline: PluginPipeline,
        compositor: TemplateCompositor,
        default_content_type: str,
        site_title: str,
        site_url: str,
        template_dir: str,
        content_sources: Mapping[str, str],
        timeout: float | None = None,
    ) -> None:
        self._loader = loader
        self._parser = parser
        self._pipeline = pipeline
        self._compositor = compositor
        self._default_content_type = default_content_type
        self._site_title = site_title
        self._site_url = site_url
        self._template_dir = template_dir
        self._content_sources = dict(content_sources)
        self._timeout = timeout

    async def render(self, path: str, content_type: str, route: str) -> RenderOutcome:
        """Render ``path`` and always come back with a 200 or 404 outcome."""
        try:
            html = await self._attempt(path, content_type, route)
        except Exception as exc:
            kind = error_kind(exc)
            logger.warning(
                "Render failed (%s) for path=%s type=%s route=%s: %s",
                kind.value,
                path,
                content_type,
                route,
                exc,
                exc_info=kind is ErrorKind.INTERNAL,
            )
            if kind is ErrorKind.NOT_FOUND and path != NOT_FOUND_PATH:
                return await self._render_not_found_page()
            return self._hard_fallback()

        return RenderOutcome(html, 200, FallbackState.SUCCESS)

    async def render_content(self, path: str, content_type: str, route: str) -> str:
        """Run the full pipeline once.  Errors propagate to the caller."""
        logger.debug("Rendering path=%s type=%s route=%s", path, content_type, route)
        raw = await self._loader.get_content(path, content_type)

        content, metadata = await self.process_content(raw, content_type, route)

        context = TemplateContext(
            content=Markup(content),
            metadata=metadata,
            route=route,
            site_title=self._site_title,
        )
        context = await self._pipeline.extend(context)

        html = await self._compositor.render(content_type, context.as_dict())
        logger.debug("Rendered path=%s", path)
        return html

    async def process_content(
        self, raw: str, content_type: str, route: str
    ) -> tuple[str, dict[str, Any]]:
        """Parse raw content, then run it through every transform hook."""
        parsed = self._parser.parse(raw)
        if inspect.isawaitable(parsed):
            parsed = await parsed
        if not isinstance(parsed, ParsedContent):
            msg = f"Parser returned {type(parsed).__name__}, not ParsedContent"
            raise TypeError(msg)

        context = PluginContext(
            content_type=content_type,
            route=route,
            template_dir=self._template_dir,
            content_sources=self._content_sources,
            site_url=self._site_url,
        )
        return await self._pipeline.apply(parsed.content, parsed.metadata, context)

    async def _attempt(self, path: str, content_type: str, route: str) -> str:
        if self._timeout is None:
            return await self.render_content(path, content_type, route)
        with anyio.fail_after(self._timeout):
            return await self.render_content(path, content_type, route)

    async def _render_not_found_page(self) -> RenderOutcome:
        logger.info("Rendering 404 page %s", NOT_FOUND_PATH)
        try:
            html = await self._attempt(NOT_FOUND_PATH, self._default_content_type, NOT_FOUND_ROUTE)
        except Exception as exc:
            logger.warning(
                "404 page failed for path=%s type=%s route=%s: %s",
                NOT_FOUND_PATH,
                self._default_content_type,
                NOT_FOUND_ROUTE,
                exc,
                exc_info=error_kind(exc) is ErrorKind.INTERNAL,
            )
            return self._hard_fallback()
        return RenderOutcome(html, 404, FallbackState.RENDERED_FALLBACK)

    def _hard_fallback(self) -> RenderOutcome:
        return RenderOutcome(HARD_FALLBACK_HTML, 404, FallbackState.HARD_FALLBACK)
