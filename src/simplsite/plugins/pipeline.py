"""Ordered plugin hook application.

Both stages walk the plugins in registration order.  Hook failures are
not caught here; they abort the render and reach the fallback machine.
"""

import inspect
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from simplsite.plugins.types import Plugin, PluginContext, TemplateContext, TransformResult

logger = logging.getLogger("simplsite.plugins")


class PluginPipeline:
    """Immutable, ordered collection of plugin objects."""

    __slots__ = ("_plugins",)

    def __init__(self, plugins: Iterable[Plugin] = ()) -> None:
        self._plugins: tuple[Plugin, ...] = tuple(plugins)

    @property
    def plugins(self) -> tuple[Plugin, ...]:
        return self._plugins

    async def apply(
        self,
        content: str,
        metadata: Mapping[str, Any],
        context: PluginContext,
    ) -> tuple[str, dict[str, Any]]:
        """Run every ``transform`` hook over parsed content.

        Each hook sees the previous hook's content.  Returned metadata is
        shallow-merged into the accumulated metadata; later plugins win.
        """
        merged: dict[str, Any] = dict(metadata)
        for plugin in self._plugins:
            hook = getattr(plugin, "transform", None)
            if hook is None:
                continue
            result = hook(content, context)
            if inspect.isawaitable(result):
                result = await result
            if not isinstance(result, TransformResult):
                msg = f"{type(plugin).__name__}.transform returned {type(result).__name__}, not TransformResult"
                raise TypeError(msg)
            content = result.content
            if result.metadata:
                merged = {**merged, **result.metadata}
            logger.debug("Applied transform from %s", type(plugin).__name__)
        return content, merged

    async def extend(self, context: TemplateContext) -> TemplateContext:
        """Fold every ``extend_template`` hook over ``context``.

        Each hook's return value fully replaces the working context.
        """
        for plugin in self._plugins:
            hook = getattr(plugin, "extend_template", None)
            if hook is None:
                continue
            result = hook(context)
            if inspect.isawaitable(result):
                result = await result
            if not isinstance(result, TemplateContext):
                msg = (
                    f"{type(plugin).__name__}.extend_template returned "
                    f"{type(result).__name__}, not TemplateContext"
                )
                raise TypeError(msg)
            context = result
        return context

    def __len__(self) -> int:
        return len(self._plugins)
