"""Inspect a content directory the way the site resolves it.

Usage:
    python -m polycontent.cli.catalog posts [--content-dir DIR] [--lang LANG] [--dev] [--json]
    python -m polycontent.cli.catalog tags|categories
    python -m polycontent.cli.catalog spec [ID]
    python -m polycontent.cli.catalog identify PATH [PATH ...]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, List

from polycontent.catalog import POSTS, SPEC, ContentCatalog
from polycontent.config import defaults
from polycontent.language import get_language_display_name
from polycontent.providers import ContentLoadError, FileSystemProvider
from polycontent.urls import SiteUrlBuilder
from polycontent.variants import resolve_identity_from_id, variant_language_key

logger = logging.getLogger("polycontent.cli")


def _emit(rows: List[Any], as_json: bool) -> None:
    if as_json:
        print(json.dumps(rows, ensure_ascii=False, indent=2, default=str))
        return
    for row in rows:
        print("\t".join(str(v) for v in row.values()))


async def _run(args: argparse.Namespace, catalog: ContentCatalog) -> List[Any]:
    if args.command == "posts":
        rows = []
        for doc in await catalog.list_default_entries(POSTS):
            rows.append(
                {
                    "id": doc.id,
                    "title": doc.data.title,
                    "lang": variant_language_key(doc),
                    "pinned": getattr(doc.data, "pinned", False),
                    "url": catalog.urls.post_url(doc),
                }
            )
        return rows

    if args.command == "tags":
        return [tag.to_dict() for tag in await catalog.list_tags()]

    if args.command == "categories":
        return [c.to_dict() for c in await catalog.list_categories()]

    if args.command == "spec":
        groups = await catalog.list_groups(SPEC)
        if args.canonical_id:
            groups = [g for g in groups if g.canonical_id == args.canonical_id]
        rows = []
        for group in groups:
            chosen = catalog.select_variant(group, args.lang)
            rows.append(
                {
                    "canonical_id": group.canonical_id,
                    "id": chosen.id,
                    "lang": variant_language_key(chosen),
                    "available": ",".join(group.languages),
                }
            )
        return rows

    # identify
    rows = []
    for raw in args.paths:
        info = resolve_identity_from_id(raw)
        rows.append(
            {
                "path": raw,
                "canonical_id": info.canonical_id,
                "lang": info.variant_lang or "default",
                "name": get_language_display_name(info.variant_lang),
            }
        )
    return rows


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="polycontent")
    p.add_argument("--content-dir", type=str, default=None, help="Content root (default: PC_CONTENT_DIR)")
    p.add_argument("--lang", type=str, default=None, help="Site language (default: PC_SITE_LANG)")
    p.add_argument("--dev", action="store_true", help="Include drafts")
    p.add_argument("--json", action="store_true", help="Print JSON instead of tab separated rows")
    p.add_argument("-v", "--verbose", action="store_true")

    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("posts", help="Posts in display order")
    sub.add_parser("tags", help="Tag index")
    sub.add_parser("categories", help="Category index")
    spec = sub.add_parser("spec", help="Specification pages")
    spec.add_argument("canonical_id", nargs="?", default=None)
    identify = sub.add_parser("identify", help="Canonical id and language of file names")
    identify.add_argument("paths", nargs="+")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    site = defaults.SITE
    catalog = ContentCatalog(
        FileSystemProvider(args.content_dir or defaults.RT.content_dir),
        site_lang=args.lang or site.lang,
        dev_mode=args.dev or site.dev_mode,
        urls=SiteUrlBuilder(site.base_path),
    )

    try:
        rows = asyncio.run(_run(args, catalog))
    except ContentLoadError as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    _emit(rows, args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
