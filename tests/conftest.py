"""Shared fixtures: an on-disk site and a parser that needs no markdown engine."""

from pathlib import Path

import pytest

from simplsite.config import ContentSource, SiteConfig
from simplsite.markdown import ParsedContent, split_front_matter


class FakeParser:
    """Wraps the body in a paragraph; keeps front matter as metadata."""

    def parse(self, text: str) -> ParsedContent:
        metadata, body = split_front_matter(text)
        return ParsedContent(f"<p>{body.strip()}</p>", metadata)


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A small site: pages, posts, templates, and one asset."""
    write(tmp_path / "content/pages/index.md", "Home")
    write(tmp_path / "content/pages/about.md", "---\ntitle: About\n---\nAbout us")
    write(tmp_path / "content/pages/404.md", "Missing")
    write(tmp_path / "content/posts/hello.md", "---\ntitle: Hello\n---\nHi there")

    write(tmp_path / "templates/page.html", "<main>{{ content }}</main>")
    write(
        tmp_path / "templates/post.html",
        "<article><h1>{{ metadata['title'] }}</h1>{{ content }}</article>",
    )

    write(tmp_path / "assets/style.css", "body { color: red; }")
    return tmp_path


def _make_config(root: Path, **overrides: object) -> SiteConfig:
    values: dict[str, object] = {
        "content_sources": (
            ContentSource(type="post", path=root / "content/posts", route="blog/"),
            ContentSource(type="page", path=root / "content/pages", route="pages/"),
        ),
        "default_content_type": "page",
        "template_dir": root / "templates",
        "assets_dir": root / "assets",
        "site_title": "Test Site",
        "site_url": "https://example.com",
    }
    values.update(overrides)
    return SiteConfig(**values)  # type: ignore[arg-type]


@pytest.fixture
def fake_parser() -> FakeParser:
    return FakeParser()


@pytest.fixture
def make_config(site_root: Path):
    """Factory for a SiteConfig over ``site_root`` with posts under ``blog/``."""

    def factory(**overrides: object) -> SiteConfig:
        return _make_config(site_root, **overrides)

    return factory
