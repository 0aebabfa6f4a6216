"""Tests for simplsite.markdown — front matter splitting and patitas rendering."""

from __future__ import annotations

import pytest
import yaml

from simplsite.markdown import MarkdownParser, ParsedContent, split_front_matter


# ── split_front_matter ───────────────────────────────────────────────────


class TestSplitFrontMatter:
    def test_no_front_matter(self) -> None:
        assert split_front_matter("# Hello\n") == ({}, "# Hello\n")

    def test_extracts_mapping(self) -> None:
        metadata, body = split_front_matter("---\ntitle: Hi\ntags: [a, b]\n---\nBody\n")
        assert metadata == {"title": "Hi", "tags": ["a", "b"]}
        assert body == "Body\n"

    def test_empty_block(self) -> None:
        metadata, body = split_front_matter("---\n---\nBody")
        assert metadata == {}
        assert body == "Body"

    def test_non_mapping_block_ignored(self) -> None:
        metadata, body = split_front_matter("---\n- a\n- b\n---\nBody")
        assert metadata == {}
        assert body == "Body"

    def test_unterminated_block_is_body(self) -> None:
        text = "---\ntitle: Hi\nBody"
        assert split_front_matter(text) == ({}, text)

    def test_delimiter_must_open_the_file(self) -> None:
        text = "Intro\n---\ntitle: Hi\n---\n"
        assert split_front_matter(text) == ({}, text)

    def test_keys_become_strings(self) -> None:
        metadata, _ = split_front_matter("---\n1: one\n---\n")
        assert metadata == {"1": "one"}

    def test_invalid_yaml_raises(self) -> None:
        with pytest.raises(yaml.YAMLError):
            split_front_matter("---\ntitle: [unclosed\n---\nBody")


# ── MarkdownParser ───────────────────────────────────────────────────────


class TestMarkdownParser:
    def test_renders_heading(self) -> None:
        parsed = MarkdownParser().parse("# Hello")
        assert isinstance(parsed, ParsedContent)
        assert "<h1" in parsed.content
        assert "Hello" in parsed.content

    def test_renders_paragraph(self) -> None:
        parsed = MarkdownParser().parse("Hello, world!")
        assert "<p>" in parsed.content
        assert "Hello, world!" in parsed.content

    def test_front_matter_becomes_metadata(self) -> None:
        parsed = MarkdownParser().parse("---\ntitle: Post\n---\n**bold**")
        assert parsed.metadata == {"title": "Post"}
        assert "<strong>" in parsed.content
        assert "title:" not in parsed.content

    def test_empty_body_renders_empty(self) -> None:
        parsed = MarkdownParser().parse("---\ntitle: Only meta\n---\n")
        assert parsed.content == ""
        assert parsed.metadata == {"title": "Only meta"}

    def test_renders_list(self) -> None:
        parsed = MarkdownParser().parse("- one\n- two")
        assert "<li>" in parsed.content
