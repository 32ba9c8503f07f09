"""Tests for canonical identity and variant language resolution."""

from __future__ import annotations

import pytest

from polycontent.variants import (
    canonical_id_for,
    relative_content_path,
    resolve_identity,
    resolve_identity_from_id,
    split_language_suffix,
    variant_language_key,
)
from polycontent.variants.identity import strip_markdown_extension
from tests.fakes.fake_content import make_post, make_spec


class TestRelativeContentPath:
    """Stage one: strip the collection root."""

    def test_full_content_path(self):
        assert relative_content_path("src/content/posts/guide.ja.md") == "guide.ja.md"
        assert relative_content_path("/home/me/site/src/content/spec/api/errors.md") == "api/errors.md"

    def test_short_collection_path(self):
        assert relative_content_path("posts/2024/hello.md") == "2024/hello.md"
        assert relative_content_path("./spec/intro.md") == "intro.md"

    def test_case_insensitive_roots(self):
        assert relative_content_path("SRC/Content/Posts/a.md") == "a.md"

    def test_backslashes(self):
        assert relative_content_path("C:\\site\\src\\content\\posts\\notes\\a.zh-TW.md") == (
            "notes/a.zh-TW.md"
        )

    def test_no_known_root_passes_through(self):
        assert relative_content_path("drafts/a.md") == "drafts/a.md"
        assert relative_content_path("/abs/a.md") == "abs/a.md"


class TestSplitLanguageSuffix:
    """Stage two: strip a known language suffix."""

    def test_known_suffix(self):
        assert split_language_suffix("guide.ja") == ("guide", "ja")
        assert split_language_suffix("guide.zh-TW") == ("guide", "zh_tw")
        assert split_language_suffix("guide.jp") == ("guide", "ja")
        assert split_language_suffix("guide.EN_us") == ("guide", "en")

    def test_unknown_suffix_is_kept(self):
        assert split_language_suffix("release.v2") == ("release.v2", "")
        assert split_language_suffix("notes.fi") == ("notes.fi", "")

    def test_no_dot_or_leading_dot(self):
        assert split_language_suffix("guide") == ("guide", "")
        assert split_language_suffix(".ja") == (".ja", "")

    def test_only_last_dot_counts(self):
        assert split_language_suffix("v1.2.fr") == ("v1.2", "fr")


class TestResolveIdentity:
    """Test resolve_identity and resolve_identity_from_id."""

    def test_storage_path_preferred_over_id(self):
        doc = make_post("whatever", file_path="src/content/posts/guide.ja.md")
        info = resolve_identity(doc)
        assert info.id_without_ext == "guide.ja"
        assert info.canonical_id == "guide"
        assert info.variant_lang == "ja"
        assert info.file_suffix_lang == "ja"

    def test_id_used_without_storage_path(self):
        info = resolve_identity(make_post("2024/hello.zh-CN.mdx"))
        assert info.canonical_id == "2024/hello"
        assert info.variant_lang == "zh_cn"
        assert info.variant_lang_base == "zh"

    def test_directory_is_retained(self):
        assert canonical_id_for(make_post("notes/deep/page.md")) == "notes/deep/page"

    def test_metadata_language(self):
        info = resolve_identity(make_post("guide.md", lang="EN-GB"))
        assert info.canonical_id == "guide"
        assert info.variant_lang == "en"
        assert info.file_suffix_lang == ""

    def test_suffix_wins_over_metadata(self):
        info = resolve_identity(make_post("guide.ja.md", lang="en"))
        assert info.variant_lang == "ja"

    def test_no_language_is_default_key(self):
        doc = make_post("guide.md")
        assert resolve_identity(doc).variant_lang == ""
        assert resolve_identity(doc).variant_lang_base == ""
        assert variant_language_key(doc) == "default"

    def test_markdown_extensions(self):
        assert strip_markdown_extension("a.MD") == "a"
        assert strip_markdown_extension("a.markdown") == "a"
        assert strip_markdown_extension("a.txt") == "a.txt"

    def test_raw_identifier_entry_point(self):
        info = resolve_identity_from_id("guide.ko.md")
        assert info.canonical_id == "guide"
        assert info.variant_lang == "ko"

    @pytest.mark.parametrize(
        "doc",
        [
            make_post("guide.md"),
            make_post("guide.md", lang="fr"),
            make_post("guide.ja.md"),
            make_post("guide.zh-TW.md", lang="en"),
            make_post("x", file_path="src/content/posts/guide.pt_br.md"),
            make_spec("y", file_path="spec\\guide.tw.mdx"),
        ],
    )
    def test_canonical_id_independent_of_language(self, doc):
        assert canonical_id_for(doc) == "guide"
