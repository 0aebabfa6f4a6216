"""Simplsite exception hierarchy.

Every error raised by the rendering pipeline carries an ``ErrorKind``
tag.  The fallback machine in ``simplsite.rendering`` branches on the
tag, never on exception messages.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure categories the renderer distinguishes."""

    NOT_FOUND = "not_found"
    CONFIGURATION = "configuration"
    PLUGIN_LOAD = "plugin_load"
    INTERNAL = "internal"


class SimplSiteError(Exception):
    """Base for all simplsite-specific errors."""

    kind: ErrorKind = ErrorKind.INTERNAL


class ConfigurationError(SimplSiteError):
    """Raised when site configuration is invalid.

    Unknown content types surface here at render time; duplicate
    content sources are caught by ``SiteConfig.check()`` at startup.
    """

    kind = ErrorKind.CONFIGURATION


class NotFound(SimplSiteError):  # noqa: N818
    """A content file is absent from storage.

    The only kind that sends a render to the 404 page.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        super().__init__(detail or f"Not found: {path}")


class TemplateNotFound(SimplSiteError):  # noqa: N818
    """The template for a content type does not exist.

    A site setup fault rather than a missing page: tagged ``INTERNAL`` so
    the render goes straight to the hard fallback without a 404 retry.
    """

    kind = ErrorKind.INTERNAL

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Template not found: {path}")


class PluginLoadError(SimplSiteError):
    """A configured plugin could not be constructed."""

    kind = ErrorKind.PLUGIN_LOAD

    def __init__(self, name: str, detail: str) -> None:
        self.name = name
        super().__init__(f"Error loading plugin {name!r}: {detail}")


def error_kind(exc: BaseException) -> ErrorKind:
    """Return the ``ErrorKind`` tag for any exception.

    Exceptions outside the simplsite hierarchy are ``INTERNAL``.
    """
    if isinstance(exc, SimplSiteError):
        return exc.kind
    return ErrorKind.INTERNAL
