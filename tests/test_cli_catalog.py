"""Tests for the catalog inspection CLI."""

from __future__ import annotations

import json

from polycontent.cli.catalog import build_parser, main


def test_parser_requires_command():
    args = build_parser().parse_args(["identify", "a.ja.md"])
    assert args.command == "identify"
    assert args.paths == ["a.ja.md"]


def test_identify(capsys):
    assert main(["--json", "identify", "posts/guide.zh-TW.md", "notes/plain.md"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows[0] == {
        "path": "posts/guide.zh-TW.md",
        "canonical_id": "posts/guide",
        "lang": "zh_tw",
        "name": "繁體中文",
    }
    assert rows[1]["lang"] == "default"
    assert rows[1]["name"] == ""


def test_posts(content_dir, capsys):
    assert main(["--content-dir", str(content_dir), "--lang", "en", "--json", "posts"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["id"] for r in rows] == ["hello.md"]
    assert rows[0]["url"] == "/posts/hello/"
    assert rows[0]["lang"] == "en"


def test_posts_language_from_filename_suffix(content_dir, capsys):
    # hello.ja.md has no lang field in its frontmatter
    assert main(["--content-dir", str(content_dir), "--lang", "ja", "--json", "posts"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [(r["id"], r["lang"]) for r in rows] == [("hello.ja.md", "ja")]
    assert rows[0]["url"] == "/posts/hello/"


def test_posts_dev_mode_includes_drafts(content_dir, capsys):
    assert main(["--content-dir", str(content_dir), "--dev", "posts"]) == 0
    out = capsys.readouterr().out
    assert "notes/draft.md" in out


def test_tags_tab_separated(content_dir, capsys):
    assert main(["--content-dir", str(content_dir), "tags"]) == 0
    assert capsys.readouterr().out.strip() == "intro\t1"


def test_spec(content_dir, capsys):
    assert main(["--content-dir", str(content_dir), "--lang", "zh-TW", "--json", "spec", "overview"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows == [
        {
            "canonical_id": "overview",
            "id": "overview.zh-TW.mdx",
            "lang": "zh_tw",
            "available": "zh_tw,default",
        }
    ]


def test_missing_content_dir(tmp_path, capsys):
    assert main(["--content-dir", str(tmp_path / "none"), "posts"]) == 2
    assert "error:" in capsys.readouterr().err
