"""Plugin capability contract and the values threaded through hooks.

A plugin is any object exposing zero, one, or both of:

- ``transform(content, context) -> TransformResult``
- ``extend_template(context) -> TemplateContext``

Either hook may be a coroutine function.  A plugin with neither hook
takes part in the pipeline without effect.
"""

from collections.abc import Awaitable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Protocol, TypeAlias, runtime_checkable


@dataclass(frozen=True, slots=True)
class PluginContext:
    """Read-only snapshot handed to every ``transform`` hook.

    Built once per render and shared by all plugins in the chain.
    """

    content_type: str
    route: str
    template_dir: str
    content_sources: Mapping[str, str]
    site_url: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "content_sources", MappingProxyType(dict(self.content_sources)))


@dataclass(frozen=True, slots=True)
class TransformResult:
    """Output of a ``transform`` hook.

    ``metadata`` is shallow-merged into the accumulated metadata, new
    keys winning on conflict.
    """

    content: str
    metadata: Mapping[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class TemplateContext:
    """Values exposed to the page template and its layout.

    Immutable: ``extend_template`` hooks return a new context, usually
    via ``with_values()`` or ``dataclasses.replace()``.
    """

    content: str
    metadata: Mapping[str, Any]
    route: str
    site_title: str
    extra: Mapping[str, Any] = field(default_factory=dict)

    def with_values(self, **values: Any) -> "TemplateContext":
        """Return a copy with ``values`` added to ``extra``."""
        return replace(self, extra={**self.extra, **values})

    def as_dict(self) -> dict[str, Any]:
        """Flatten into the mapping templates are rendered with.

        Core fields take precedence over ``extra`` keys of the same name.
        """
        return {
            **self.extra,
            "content": self.content,
            "metadata": dict(self.metadata),
            "route": self.route,
            "site_title": self.site_title,
        }


@runtime_checkable
class TransformPlugin(Protocol):
    def transform(
        self, content: str, context: PluginContext
    ) -> TransformResult | Awaitable[TransformResult]: ...


@runtime_checkable
class TemplatePlugin(Protocol):
    def extend_template(
        self, context: TemplateContext
    ) -> TemplateContext | Awaitable[TemplateContext]: ...


# Hooks are discovered by attribute, so any object can be a plugin.
Plugin: TypeAlias = object
