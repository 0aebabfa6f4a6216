"""Locate the ``Site`` a CLI command should serve or render."""

import importlib
from types import ModuleType

from simplsite.site import Site

DEFAULT_ATTRIBUTE = "site"
EXPECTED = "a Site(SiteConfig(...)) instance or a zero-argument function returning one"


def _site_names(module: ModuleType) -> list[str]:
    return sorted(name for name, value in vars(module).items() if isinstance(value, Site))


def resolve_site(target: str) -> Site:
    """Return the ``Site`` named by ``target``.

    ``target`` is ``"package.module:name"``; without ``:name`` the module's
    ``site`` attribute is used.  ``name`` may also be a function that builds
    the site, which lets a project read settings before constructing it.

    Raises:
        ModuleNotFoundError: The module cannot be imported.
        AttributeError: The module has no such attribute.  The message
            lists any ``Site`` objects the module does define.
        TypeError: The attribute is neither a ``Site`` nor a function
            returning one, or that function failed.
    """
    module_name, _, name = target.partition(":")
    module = importlib.import_module(module_name)
    name = name or DEFAULT_ATTRIBUTE

    try:
        candidate = getattr(module, name)
    except AttributeError:
        found = _site_names(module)
        hint = f"; sites defined there: {', '.join(found)}" if found else ""
        msg = f"Module {module_name!r} has no attribute {name!r}{hint}"
        raise AttributeError(msg) from None

    if isinstance(candidate, Site):
        return candidate

    if callable(candidate):
        try:
            candidate = candidate()
        except Exception as exc:
            msg = f"Building the site with {target!r} failed: {exc}"
            raise TypeError(msg) from exc
        if isinstance(candidate, Site):
            return candidate

    msg = f"{target!r} gave {type(candidate).__name__}; expected {EXPECTED}"
    raise TypeError(msg)
