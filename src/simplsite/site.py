"""Site — the single request-handling entry point.

A request path is first looked up as a static asset.  Anything else is
rendered as content: the first content source (in configuration order)
whose route prefixes the path selects the content type, otherwise the
default content type renders the full path.
"""

import logging
from dataclasses import dataclass

from simplsite.config import SiteConfig
from simplsite.content import ContentLoader
from simplsite.markdown import ContentParser, MarkdownParser
from simplsite.plugins import PluginPipeline, PluginRegistry, default_registry
from simplsite.rendering import RenderController, RenderOutcome
from simplsite.server.asgi import Receive, Scope, Send, handle_asgi
from simplsite.static import StaticAssets
from simplsite.templating import CompiledTemplateCache, TemplateCompositor

logger = logging.getLogger("simplsite.site")

CONTENT_SUFFIX = ".md"
HTML_CONTENT_TYPE = "text/html"


@dataclass(frozen=True, slots=True)
class Page:
    """A response to ``Site.handle_request``."""

    content: str | bytes
    content_type: str
    status: int


def normalize_path(path: str) -> str:
    """Strip one leading ``/``; the empty path becomes ``"index"``."""
    if path.startswith("/"):
        path = path[1:]
    return path or "index"


def content_file(path: str) -> str:
    """Append the content suffix unless ``path`` already ends with it."""
    return path if path.endswith(CONTENT_SUFFIX) else path + CONTENT_SUFFIX


class Site:
    """A markdown-backed website.

    Collaborators are built from the config unless supplied, so tests
    and embedders can swap in their own parser, plugin registry, or a
    cache shared between sites.

    Usage::

        site = Site(SiteConfig(
            content_sources=(ContentSource("page", "content", ""),),
            default_content_type="page",
        ))
        page = await site.handle_request("/about")

    ``Site`` is also an ASGI application::

        simplsite run mysite:site
    """

    def __init__(
        self,
        config: SiteConfig | None = None,
        *,
        parser: ContentParser | None = None,
        registry: PluginRegistry | None = None,
        cache: CompiledTemplateCache | None = None,
    ) -> None:
        self.config = config or SiteConfig()
        self.config.check()

        if self.config.content_source(self.config.default_content_type) is None:
            logger.warning(
                "Default content type %r has no content source; fallback pages will not render",
                self.config.default_content_type,
            )

        registry = registry if registry is not None else default_registry
        self.pipeline = PluginPipeline(registry.build(self.config.plugins))
        self.assets = StaticAssets(self.config.assets_dir)
        self.compositor = TemplateCompositor(
            self.config.template_dir,
            extension=self.config.template_extension,
            layouts_dir=self.config.layouts_dir,
            partials_dir=self.config.partials_dir,
            default_layout=self.config.default_layout,
            options=self.config.template_options,
            filters=self.config.template_filters,
            globals_=self.config.template_globals,
            cache=cache,
        )
        self.renderer = RenderController(
            loader=ContentLoader(self.config.content_sources),
            parser=parser
            or MarkdownParser(
                plugins=self.config.markdown_plugins,
                highlight=self.config.markdown_highlight,
            ),
            pipeline=self.pipeline,
            compositor=self.compositor,
            default_content_type=self.config.default_content_type,
            site_title=self.config.site_title,
            site_url=self.config.site_url,
            template_dir=str(self.config.template_dir),
            content_sources={s.type: str(s.path) for s in self.config.content_sources},
            timeout=self.config.render_timeout,
        )

    async def handle_request(self, path: str) -> Page:
        """Serve a static asset or render content for ``path``."""
        logger.debug("Handling request for path: %s", path)
        path = normalize_path(path)

        asset = await self.assets.get(path)
        if asset is not None:
            logger.debug("Serving static file: %s", path)
            return Page(asset.content, asset.content_type, 200)

        outcome = await self.render(path)
        return Page(outcome.content, HTML_CONTENT_TYPE, outcome.status)

    async def render(self, path: str) -> RenderOutcome:
        """Route a normalized path to a content source and render it.

        First match in configuration order wins, even when a later route
        is more specific.
        """
        file_path = content_file(path)
        route = "/" + path

        for source in self.config.content_sources:
            if path.startswith(source.route):
                return await self.renderer.render(
                    file_path[len(source.route) :], source.type, route
                )

        return await self.renderer.render(file_path, self.config.default_content_type, route)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        await handle_asgi(self, scope, receive, send)
