"""Default URL builders for posts and categories."""

from __future__ import annotations

from urllib.parse import quote

from polycontent.variants.identity import canonical_id_for
from polycontent.variants.types import Document


class SiteUrlBuilder:
    """Builds site-relative URLs under ``base_path``.

    Posts are addressed by canonical id so that every language variant shares
    one URL; the variant is picked at render time.
    """

    def __init__(self, base_path: str = "/") -> None:
        base = "/" + base_path.strip("/")
        self.base_path = base if base == "/" else base + "/"

    def post_url(self, doc: Document) -> str:
        return f"{self.base_path}posts/{quote(canonical_id_for(doc))}/"

    def category_url(self, name: str) -> str:
        return f"{self.base_path}archive/?category={quote(name.strip(), safe='')}"
