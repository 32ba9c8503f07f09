"""Tests for the read-only catalog API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from polycontent import __version__
from polycontent.api.server import create_app
from polycontent.catalog import ContentCatalog
from polycontent.providers import FileSystemProvider
from tests.fakes.fake_content import FlakyProvider, make_post

pytestmark = pytest.mark.usefixtures("forbid_network")


@pytest.fixture
def client(catalog):
    with TestClient(create_app(catalog)) as c:
        yield c


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__}
    assert client.head("/api/health").status_code == 200


def test_languages(client):
    languages = client.get("/api/languages").json()
    assert {"code": "zh_TW", "name": "繁體中文"} in languages


def test_posts_list(client):
    posts = client.get("/api/posts").json()
    assert [p["id"] for p in posts] == ["a.md", "b.md", "c.md", "guide.md"]
    assert posts[1]["data"]["nextSlug"] == "a.md"
    assert posts[1]["data"]["prevSlug"] == "c.md"
    assert posts[3]["url"] == "/posts/guide/"


def test_post_detail_explicit_language(client):
    body = client.get("/api/posts/guide", params={"lang": "ja"}).json()
    assert body["id"] == "guide.ja.md"
    assert body["lang"] == "ja"
    assert {t["id"] for t in body["translations"]} == {"guide.md", "guide.zh_cn.md"}
    names = {t["lang"]: t["name"] for t in body["translations"]}
    assert names["zh_cn"] == "简体中文"


def test_post_detail_unavailable_language_falls_back(client):
    assert client.get("/api/posts/guide", params={"lang": "fr"}).json()["id"] == "guide.md"


def test_post_detail_accept_language(client):
    response = client.get("/api/posts/guide", headers={"Accept-Language": "fr, zh-Hans;q=0.9"})
    assert response.json()["id"] == "guide.zh_cn.md"

    response = client.get("/api/posts/guide", headers={"Accept-Language": "ko"})
    assert response.json()["id"] == "guide.md"


def test_post_detail_not_found(client):
    assert client.get("/api/posts/missing").status_code == 404


def test_tags_and_categories(client):
    assert client.get("/api/tags").json() == [
        {"name": "Go", "count": 1},
        {"name": "go", "count": 1},
        {"name": "rust", "count": 1},
        {"name": "Rust", "count": 1},
    ]
    categories = client.get("/api/categories").json()
    assert categories[0] == {"name": "Lang", "count": 2, "url": "/archive/?category=Lang"}


def test_spec_detail(client):
    body = client.get("/api/spec/api/errors").json()
    assert body["canonical_id"] == "api/errors"
    assert body["translations"] == []

    body = client.get("/api/spec/intro", params={"lang": "ja"}).json()
    assert body["id"] == "intro.ja.md"


def test_content_load_failure_is_503_then_recovers():
    provider = FlakyProvider([make_post("a.md")], failures=1)
    with TestClient(create_app(ContentCatalog(provider))) as client:
        assert client.get("/api/posts").status_code == 503
        assert [p["id"] for p in client.get("/api/posts").json()] == ["a.md"]


def test_catalog_built_from_settings(monkeypatch, content_dir):
    from polycontent.config import defaults

    monkeypatch.setattr(defaults, "RT", defaults.RuntimeDefaults(content_dir=str(content_dir)))
    monkeypatch.setattr(defaults, "SITE", defaults.SiteDefaults(lang="ja"))

    app = create_app()
    with TestClient(app) as client:
        assert [p["id"] for p in client.get("/api/posts").json()] == ["hello.ja.md"]
    assert isinstance(app.state.catalog.collection("posts").provider, FileSystemProvider)
