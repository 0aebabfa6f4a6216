"""Simplsite — markdown-backed pages rendered per request.

Content files pass through an ordered plugin chain and a kida template
with an optional layout.  Static assets and rendered pages are served
from one entry point.

Basic usage::

    from simplsite import ContentSource, Site, SiteConfig

    site = Site(SiteConfig(
        content_sources=(ContentSource("post", "content/posts", "blog/"),
                         ContentSource("page", "content/pages", "")),
        default_content_type="page",
    ))

    page = await site.handle_request("/blog/hello")
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ContentSource",
    "NotFound",
    "Page",
    "PluginLoadError",
    "PluginSpec",
    "SimplSiteError",
    "Site",
    "SiteConfig",
    "TemplateContext",
    "TemplateNotFound",
    "TransformResult",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import simplsite`` fast while providing a clean top-level API.
    """
    if name in ("Site", "Page"):
        import simplsite.site

        return getattr(simplsite.site, name)

    if name in ("SiteConfig", "ContentSource", "PluginSpec"):
        import simplsite.config

        return getattr(simplsite.config, name)

    if name in ("TemplateContext", "TransformResult"):
        import simplsite.plugins.types

        return getattr(simplsite.plugins.types, name)

    if name in (
        "SimplSiteError",
        "ConfigurationError",
        "NotFound",
        "TemplateNotFound",
        "PluginLoadError",
    ):
        import simplsite.errors

        return getattr(simplsite.errors, name)

    msg = f"module 'simplsite' has no attribute {name!r}"
    raise AttributeError(msg)
