"""Tests for simplsite.content — ContentLoader."""

from pathlib import Path

import pytest

from simplsite.config import ContentSource
from simplsite.content import ContentLoader
from simplsite.errors import ConfigurationError, NotFound


@pytest.fixture
def loader(site_root: Path) -> ContentLoader:
    return ContentLoader(
        [
            ContentSource("post", site_root / "content/posts", "blog/"),
            ContentSource("page", site_root / "content/pages", ""),
        ]
    )


class TestContentLoader:
    async def test_reads_from_type_source(self, loader: ContentLoader) -> None:
        text = await loader.get_content("hello.md", "post")
        assert text == "---\ntitle: Hello\n---\nHi there"

    async def test_nested_path(self, loader: ContentLoader, site_root: Path) -> None:
        (site_root / "content/pages/docs").mkdir()
        (site_root / "content/pages/docs/intro.md").write_text("Intro")
        assert await loader.get_content("docs/intro.md", "page") == "Intro"

    async def test_leading_separator_stays_under_root(self, loader: ContentLoader) -> None:
        text = await loader.get_content("/hello.md", "post")
        assert text == "---\ntitle: Hello\n---\nHi there"

    async def test_unknown_type(self, loader: ContentLoader) -> None:
        with pytest.raises(ConfigurationError, match="Unknown content type: draft"):
            await loader.get_content("hello.md", "draft")

    async def test_missing_file(self, loader: ContentLoader, site_root: Path) -> None:
        with pytest.raises(NotFound) as info:
            await loader.get_content("nope.md", "post")
        assert info.value.path == str((site_root / "content/posts/nope.md").resolve())
        assert isinstance(info.value.__cause__, FileNotFoundError)

    async def test_traversal_is_not_found(self, loader: ContentLoader, site_root: Path) -> None:
        (site_root / "secret.md").write_text("secret")
        with pytest.raises(NotFound, match="escapes content root"):
            await loader.get_content("../../secret.md", "post")

    async def test_other_io_errors_propagate(self, loader: ContentLoader, site_root: Path) -> None:
        (site_root / "content/posts/folder.md").mkdir()
        with pytest.raises(OSError) as info:
            await loader.get_content("folder.md", "post")
        assert not isinstance(info.value, FileNotFoundError)

    def test_source_for(self, loader: ContentLoader) -> None:
        assert loader.source_for("post").route == "blog/"
