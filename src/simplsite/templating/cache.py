"""Compiled template cache shared by every request.

Entries map an absolute template path to a compiled kida ``Template``.
They are never invalidated: a compiled template is a pure function of
its source at compile time, so the cache lives as long as the process.

Concurrency:
    Two requests may miss on the same path and both compile it.  The
    first ``store()`` wins and every caller gets the stored entry back,
    so the cache always holds one entry per path.  No lock is taken;
    dict operations are atomic and compiling twice is harmless.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kida import Template


class CompiledTemplateCache:
    """Path-keyed memo of compiled templates and layouts."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, Template] = {}

    def get(self, path: str) -> Template | None:
        """Return the compiled template for ``path``, or ``None``."""
        return self._entries.get(path)

    def store(self, path: str, template: Template) -> Template:
        """Cache ``template`` unless ``path`` is already cached.

        Returns the entry that ends up in the cache.
        """
        return self._entries.setdefault(path, template)

    def clear(self) -> None:
        """Drop every entry (e.g. after templates change on disk)."""
        self._entries.clear()

    def __contains__(self, path: str) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)
