"""Plugin contract, registry, and ordered pipeline.

Register a custom plugin::

    from simplsite.plugins import TransformResult, default_registry

    @default_registry.register("shout")
    class Shout:
        def __init__(self, options):
            self.suffix = options.get("suffix", "!")

        def transform(self, content, context):
            return TransformResult(content.upper() + self.suffix)

Then list it in ``SiteConfig(plugins=(PluginSpec("shout"),))``.
"""

from simplsite.plugins.builtin import CanonicalUrl, HeadingAnchors, ReadingTime, register_builtins
from simplsite.plugins.pipeline import PluginPipeline
from simplsite.plugins.registry import PluginFactory, PluginRegistry
from simplsite.plugins.types import (
    Plugin,
    PluginContext,
    TemplateContext,
    TemplatePlugin,
    TransformPlugin,
    TransformResult,
)

default_registry = PluginRegistry()
register_builtins(default_registry)

__all__ = [
    "CanonicalUrl",
    "HeadingAnchors",
    "Plugin",
    "PluginContext",
    "PluginFactory",
    "PluginPipeline",
    "PluginRegistry",
    "ReadingTime",
    "TemplateContext",
    "TemplatePlugin",
    "TransformPlugin",
    "TransformResult",
    "default_registry",
]
