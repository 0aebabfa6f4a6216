"""Kida-backed template rendering with a shared compiled-template cache."""

from simplsite.templating.cache import CompiledTemplateCache
from simplsite.templating.compositor import TemplateCompositor, create_environment, load_partials

__all__ = [
    "CompiledTemplateCache",
    "TemplateCompositor",
    "create_environment",
    "load_partials",
]
