"""Plugin registry — explicit name-to-factory table.

Plugins are registered statically (``@registry.register("name")``) and
constructed by name from ``PluginSpec`` entries at startup.  There is
no import-by-path: an unknown name is just a missing table entry.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from simplsite.config import PluginSpec
from simplsite.errors import ConfigurationError, PluginLoadError
from simplsite.plugins.types import Plugin

logger = logging.getLogger("simplsite.plugins")

PluginFactory = Callable[[Mapping[str, Any]], Plugin]


class PluginRegistry:
    """Name to factory lookup table for plugins.

    A factory is called with the plugin's options mapping and returns
    the plugin object.  Plugin classes whose ``__init__`` takes a single
    options argument are factories as-is.
    """

    __slots__ = ("_factories",)

    def __init__(self, factories: Mapping[str, PluginFactory] | None = None) -> None:
        self._factories: dict[str, PluginFactory] = {}
        for name, factory in (factories or {}).items():
            self.add(name, factory)

    def add(self, name: str, factory: PluginFactory) -> None:
        """Register ``factory`` under ``name``.

        Raises:
            ConfigurationError: If ``name`` is already registered.
        """
        if name in self._factories:
            msg = f"Duplicate plugin name: {name!r}"
            raise ConfigurationError(msg)
        self._factories[name] = factory

    def register(self, name: str) -> Callable[[PluginFactory], PluginFactory]:
        """Decorator form of ``add()``.

        Usage::

            @registry.register("shout")
            class Shout:
                def __init__(self, options): ...
                def transform(self, content, context): ...
        """

        def decorator(factory: PluginFactory) -> PluginFactory:
            self.add(name, factory)
            return factory

        return decorator

    def create(self, spec: PluginSpec) -> Plugin:
        """Construct the plugin described by ``spec``.

        Raises:
            PluginLoadError: If the name is unknown or the factory fails.
        """
        factory = self._factories.get(spec.name)
        if factory is None:
            raise PluginLoadError(spec.name, "no such plugin is registered")
        try:
            return factory(spec.options)
        except Exception as exc:
            raise PluginLoadError(spec.name, str(exc)) from exc

    def build(self, specs: Iterable[PluginSpec]) -> list[Plugin]:
        """Construct plugins in spec order, skipping any that fail to load.

        Load failures are logged; the site keeps running without them.
        """
        plugins: list[Plugin] = []
        for spec in specs:
            try:
                plugin = self.create(spec)
            except PluginLoadError:
                logger.exception("Skipping plugin %r", spec.name)
                continue
            logger.info("Loaded plugin %r", spec.name)
            plugins.append(plugin)
        return plugins

    def copy(self) -> "PluginRegistry":
        """Return an independent registry with the same entries."""
        return PluginRegistry(self._factories)

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)
