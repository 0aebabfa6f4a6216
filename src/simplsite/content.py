"""Content loading from configured content sources."""

import logging
from collections.abc import Sequence
from pathlib import Path

import anyio

from simplsite.config import ContentSource
from simplsite.errors import ConfigurationError, NotFound

logger = logging.getLogger("simplsite.content")


class ContentLoader:
    """Reads raw content files from the source registered for a content type."""

    __slots__ = ("_sources",)

    def __init__(self, sources: Sequence[ContentSource]) -> None:
        self._sources = tuple(sources)

    def source_for(self, content_type: str) -> ContentSource:
        """Return the source whose ``type`` is ``content_type``.

        Raises:
            ConfigurationError: If no source has that type.
        """
        for source in self._sources:
            if source.type == content_type:
                return source
        msg = f"Unknown content type: {content_type}"
        raise ConfigurationError(msg)

    async def get_content(self, path: str, content_type: str) -> str:
        """Read ``path`` relative to the root of the ``content_type`` source.

        Leading separators are dropped, so ``"/hello.md"`` (left over when a
        route has no trailing slash) still reads ``<root>/hello.md``.

        Raises:
            ConfigurationError: If ``content_type`` is not configured.
            NotFound: If the file is absent or lies outside the source root.
            OSError: Any other read failure, unchanged.
        """
        root = Path(self.source_for(content_type).path).resolve()
        full_path = (root / path.lstrip("/")).resolve()
        if not full_path.is_relative_to(root):
            raise NotFound(path, f"Path escapes content root: {path}")

        logger.debug("Reading %s content from %s", content_type, full_path)
        try:
            return await anyio.Path(full_path).read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise NotFound(str(full_path)) from exc
