"""Site configuration.

SiteConfig is a frozen dataclass: immutable after creation, built once
at startup and shared read-only by every request.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from simplsite.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ContentSource:
    """A named, routed storage bucket for one kind of markdown content.

    ``path`` is the storage root, ``route`` the URL prefix that selects it.
    """

    type: str
    path: str | Path
    route: str


@dataclass(frozen=True, slots=True)
class PluginSpec:
    """A plugin to construct at startup, looked up by ``name`` in the registry."""

    name: str
    options: Mapping[str, Any] = field(default_factory=dict)


def _default_template_options() -> dict[str, Any]:
    return {"autoescape": True, "trim_blocks": True, "lstrip_blocks": True}


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SiteConfig(
            content_sources=(
                ContentSource(type="post", path="content/posts", route="blog/"),
                ContentSource(type="page", path="content/pages", route=""),
            ),
            default_content_type="page",
        )
    """

    # Content
    content_sources: tuple[ContentSource, ...] = ()
    default_content_type: str = "page"

    # Site identity
    site_url: str = "http://localhost:8000"
    site_title: str = "My Simpl Site"

    # Static assets
    assets_dir: str | Path = "assets"

    # Templates
    template_dir: str | Path = "templates"
    template_extension: str = ".html"
    layouts_dir: str = "layouts"
    partials_dir: str = "partials"
    default_layout: str = "base"
    # Passed straight through to the kida Environment
    template_options: Mapping[str, Any] = field(default_factory=_default_template_options)
    template_filters: Mapping[str, Callable[..., Any]] = field(default_factory=dict)
    template_globals: Mapping[str, Any] = field(default_factory=dict)

    # Markdown
    markdown_plugins: tuple[str, ...] | None = None
    markdown_highlight: bool = False

    # Plugins, constructed in this order
    plugins: tuple[PluginSpec, ...] = ()

    # Upper bound in seconds for a single render attempt (None = unbounded)
    render_timeout: float | None = None

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    def content_source(self, content_type: str) -> ContentSource | None:
        """Look up the content source for ``content_type``, or ``None``."""
        for source in self.content_sources:
            if source.type == content_type:
                return source
        return None

    def check(self) -> None:
        """Validate invariants that lookups by type rely on.

        Raises:
            ConfigurationError: If two content sources share a type.
        """
        seen: set[str] = set()
        for source in self.content_sources:
            if source.type in seen:
                msg = f"Duplicate content source type: {source.type!r}"
                raise ConfigurationError(msg)
            seen.add(source.type)
