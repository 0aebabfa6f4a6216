"""Template rendering with optional layout composition.

A page template ``<base>/<type><ext>`` is rendered first.  If the
default layout ``<base>/<layouts>/<layout><ext>`` exists, the page HTML
is handed to it as ``body`` and the layout output becomes the page.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import anyio
from kida import ChoiceLoader, DictLoader, Environment, FileSystemLoader
from kida.template import Markup

from simplsite.errors import TemplateNotFound
from simplsite.templating.cache import CompiledTemplateCache

if TYPE_CHECKING:
    from kida import Template

logger = logging.getLogger("simplsite.templating")


def load_partials(partials_dir: Path, extension: str) -> dict[str, str]:
    """Read every ``*<extension>`` file in ``partials_dir``.

    Partials are keyed by file name without the extension, so
    ``partials/header.html`` is included as ``{% include "header" %}``.
    A missing directory yields no partials.
    """
    if not partials_dir.is_dir():
        return {}
    partials: dict[str, str] = {}
    for entry in sorted(partials_dir.iterdir()):
        if entry.is_file() and entry.name.endswith(extension):
            partials[entry.name[: -len(extension)]] = entry.read_text(encoding="utf-8")
    logger.debug("Registered %d partial(s) from %s", len(partials), partials_dir)
    return partials


def create_environment(
    base_dir: Path,
    *,
    partials: Mapping[str, str],
    options: Mapping[str, Any],
    filters: Mapping[str, Callable[..., Any]],
    globals_: Mapping[str, Any],
) -> Environment:
    """Create the kida Environment templates are compiled against.

    ``options`` are passed to ``Environment`` unchanged, so sites control
    escaping and whitespace behaviour directly.
    """
    loader = ChoiceLoader([FileSystemLoader(str(base_dir)), DictLoader(dict(partials))])
    env = Environment(loader=loader, **options)

    if filters:
        env.update_filters(dict(filters))

    for name, value in globals_.items():
        env.add_global(name, value)

    return env


class TemplateCompositor:
    """Renders a content type's template, wrapped in the default layout.

    Usage::

        compositor = TemplateCompositor("templates")
        html = await compositor.render("post", {"content": "...", "metadata": {}})
    """

    __slots__ = ("_base_dir", "_cache", "_env", "_extension", "_layout_path")

    def __init__(
        self,
        base_dir: str | Path,
        *,
        extension: str = ".html",
        layouts_dir: str = "layouts",
        partials_dir: str = "partials",
        default_layout: str = "base",
        options: Mapping[str, Any] | None = None,
        filters: Mapping[str, Callable[..., Any]] | None = None,
        globals_: Mapping[str, Any] | None = None,
        cache: CompiledTemplateCache | None = None,
    ) -> None:
        self._base_dir = Path(base_dir).resolve()
        self._extension = extension
        self._layout_path = self._base_dir / layouts_dir / f"{default_layout}{extension}"
        self._cache = cache if cache is not None else CompiledTemplateCache()
        self._env = create_environment(
            self._base_dir,
            partials=load_partials(self._base_dir / partials_dir, extension),
            options=options or {},
            filters=filters or {},
            globals_=globals_ or {},
        )

    @property
    def cache(self) -> CompiledTemplateCache:
        return self._cache

    @property
    def environment(self) -> Environment:
        return self._env

    def template_path(self, name: str) -> Path:
        """Resolve the file backing template ``name``."""
        return self._base_dir / f"{name}{self._extension}"

    async def compile(self, path: Path) -> Template:
        """Return the compiled template at ``path``, compiling on first use."""
        key = str(path)
        template = self._cache.get(key)
        if template is not None:
            return template

        source = await anyio.Path(path).read_text(encoding="utf-8")
        logger.debug("Compiling template %s", key)
        return self._cache.store(key, self._env.from_string(source))

    async def render(self, name: str, context: Mapping[str, Any]) -> str:
        """Render template ``name`` and wrap it in the layout if one exists.

        Raises:
            TemplateNotFound: If ``<base>/<name><ext>`` does not exist.
        """
        path = self.template_path(name)
        if not await anyio.Path(path).is_file():
            raise TemplateNotFound(str(path))

        template = await self.compile(path)
        body = template.render(dict(context))

        if not await anyio.Path(self._layout_path).is_file():
            return body

        layout = await self.compile(self._layout_path)
        return layout.render({**context, "body": Markup(body)})
