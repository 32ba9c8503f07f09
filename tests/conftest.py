# tests/conftest.py
# Isolate configuration from the host environment and provide catalog fixtures.

from __future__ import annotations

import os
import socket
from pathlib import Path

import pytest

from polycontent.catalog import ContentCatalog
from polycontent.providers import MemoryProvider
from tests.fakes.fake_content import make_post, make_spec


def _clear_site_env() -> None:
    """Drop PC_* variables so tests see documented defaults."""
    for key in list(os.environ):
        if key.startswith("PC_"):
            os.environ.pop(key, None)


def pytest_sessionstart(session: pytest.Session) -> None:  # noqa: ARG001
    """Runs before collection so module-level defaults are read from a clean env."""
    _clear_site_env()


@pytest.fixture
def forbid_network(monkeypatch):
    real_create_connection = socket.create_connection

    def guarded(address, *args, **kwargs):
        host = address[0] if isinstance(address, tuple) else address
        if host not in {"127.0.0.1", "::1", "localhost"}:
            raise RuntimeError(f"Blocked outbound connection to {host}")
        return real_create_connection(address, *args, **kwargs)

    monkeypatch.setattr(socket, "create_connection", guarded, raising=True)


@pytest.fixture
def guide_variants():
    """Scenario: one guide in English (metadata), Japanese and Simplified Chinese."""
    return [
        make_post("guide.md", lang="en", file_path="src/content/posts/guide.md"),
        make_post("guide.ja.md", file_path="src/content/posts/guide.ja.md"),
        make_post("guide.zh_cn.md", file_path="src/content/posts/guide.zh_cn.md"),
    ]


@pytest.fixture
def memory_provider(guide_variants):
    return MemoryProvider(
        {
            "posts": guide_variants
            + [
                make_post("a.md", pinned=True, priority=1, published="2024-01-01", tags=["Go", "go", "rust"]),
                make_post("b.md", pinned=True, priority=2, published="2024-06-01", tags=["Rust"], category="Lang"),
                make_post("c.md", published="2025-01-01", category=" Lang "),
                make_post("wip.md", published="2025-02-01", draft=True),
            ],
            "spec": [
                make_spec("intro.md", file_path="src/content/spec/intro.md"),
                make_spec("intro.ja.md", file_path="src/content/spec/intro.ja.md"),
                make_spec("api/errors.md", file_path="src/content/spec/api/errors.md"),
            ],
        }
    )


@pytest.fixture
def catalog(memory_provider):
    return ContentCatalog(memory_provider, site_lang="en")


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """A small on-disk content tree with posts and spec pages."""
    root = tmp_path / "content"
    posts = root / "posts"
    spec = root / "spec"
    (posts / "notes").mkdir(parents=True)
    spec.mkdir(parents=True)

    (posts / "hello.md").write_text(
        "---\ntitle: Hello\npublished: 2024-03-01\ntags: [intro]\nlang: en\n---\nHello body\n",
        encoding="utf-8",
    )
    (posts / "hello.ja.md").write_text(
        "---\ntitle: こんにちは\npublished: 2024-03-01\ntags: [intro]\n---\n本文\n",
        encoding="utf-8",
    )
    (posts / "notes" / "draft.md").write_text(
        "---\ntitle: Draft\npublished: 2024-04-01\ndraft: true\n---\n", encoding="utf-8"
    )
    (posts / "broken.md").write_text("---\ntitle: [unclosed\n---\n", encoding="utf-8")
    (posts / "readme.txt").write_text("not content", encoding="utf-8")
    (spec / "overview.mdx").write_text("---\ntitle: Overview\n---\nSpec\n", encoding="utf-8")
    (spec / "overview.zh-TW.mdx").write_text("---\ntitle: 概覽\n---\n規範\n", encoding="utf-8")
    return root
