"""Tests for simplsite.errors — tagged error hierarchy."""

import pytest

from simplsite.errors import (
    ConfigurationError,
    ErrorKind,
    NotFound,
    PluginLoadError,
    SimplSiteError,
    TemplateNotFound,
    error_kind,
)


class TestErrorKind:
    @pytest.mark.parametrize(
        ("exc", "kind"),
        [
            (NotFound("a.md"), ErrorKind.NOT_FOUND),
            (TemplateNotFound("post.html"), ErrorKind.INTERNAL),
            (ConfigurationError("bad"), ErrorKind.CONFIGURATION),
            (PluginLoadError("toc", "boom"), ErrorKind.PLUGIN_LOAD),
            (SimplSiteError("other"), ErrorKind.INTERNAL),
            (RuntimeError("plugin bug"), ErrorKind.INTERNAL),
            (FileNotFoundError("raw io"), ErrorKind.INTERNAL),
        ],
    )
    def test_kinds(self, exc: BaseException, kind: ErrorKind) -> None:
        assert error_kind(exc) is kind


class TestMessages:
    def test_not_found_keeps_path(self) -> None:
        exc = NotFound("content/a.md")
        assert exc.path == "content/a.md"
        assert str(exc) == "Not found: content/a.md"

    def test_template_not_found_is_separate_from_not_found(self) -> None:
        exc = TemplateNotFound("templates/post.html")
        assert not isinstance(exc, NotFound)
        assert exc.path == "templates/post.html"
        assert str(exc) == "Template not found: templates/post.html"

    def test_plugin_load_error_names_plugin(self) -> None:
        exc = PluginLoadError("toc", "no such plugin is registered")
        assert exc.name == "toc"
        assert "'toc'" in str(exc)
