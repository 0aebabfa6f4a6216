"""Static asset lookup.

Resolves request paths against the assets directory.  A missing file
is not an error: the lookup returns ``None`` and the request falls
through to content rendering.
"""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

import anyio

logger = logging.getLogger("simplsite.static")


@dataclass(frozen=True, slots=True)
class StaticAsset:
    """A static file read from disk."""

    content: bytes
    content_type: str


class StaticAssets:
    """Serves files from a directory, guarding against path traversal.

    Resolves symlinks and verifies the final path is within the
    configured directory.  Directories are never served.
    """

    __slots__ = ("_directory",)

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory).resolve()

    @property
    def directory(self) -> Path:
        return self._directory

    def resolve(self, path: str) -> Path | None:
        """Map a normalized request path to a file under the directory."""
        relative = path.lstrip("/")
        if not relative:
            return None
        file_path = (self._directory / relative).resolve()
        if not file_path.is_relative_to(self._directory):
            logger.warning("Refusing asset path outside %s: %s", self._directory, path)
            return None
        return file_path

    async def get(self, path: str) -> StaticAsset | None:
        """Read the asset at ``path``, or return ``None`` if there is none."""
        file_path = self.resolve(path)
        if file_path is None:
            return None

        apath = anyio.Path(file_path)
        if not await apath.is_file():
            return None
        try:
            content = await apath.read_bytes()
        except FileNotFoundError:
            return None

        content_type, _ = mimetypes.guess_type(str(file_path))
        if content_type is None:
            content_type = "application/octet-stream"
        return StaticAsset(content=content, content_type=content_type)
