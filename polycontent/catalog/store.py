"""Grouped, memoized views over the content collections.

A :class:`ContentCatalog` is the process-lifetime context object. It owns one
:class:`CollectionCatalog` per collection; each of those enumerates its
documents once, groups them by canonical identity and keeps the result.
Independent instances never share state.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Sequence

from polycontent.i18n import I18nKey, I18nTranslator
from polycontent.schema import EntryMetadata
from polycontent.urls import SiteUrlBuilder
from polycontent.variants.identity import canonical_id_for, resolve_identity_from_id
from polycontent.variants.selector import select_preferred_variant, sort_variants_in_group
from polycontent.variants.types import Document, VariantGroup

from .cache import SingleFlight
from .ordering import ORDERINGS, GroupSortKey
from .protocols import CollectionProvider, Translator, UrlBuilder

logger = logging.getLogger(__name__)

POSTS = "posts"
SPEC = "spec"

# Ordering policy per collection
DEFAULT_COLLECTIONS: Dict[str, str] = {
    POSTS: "display",
    SPEC: "canonical",
}


class UnknownCollectionError(KeyError):
    """Raised when a catalog is asked for a collection it does not own."""


@dataclass
class Tag:
    name: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Category:
    name: str
    count: int
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class EntryListItem:
    """A default entry with its precomputed URL, for list pages."""

    id: str
    data: EntryMetadata
    url: str

    def to_dict(self) -> Dict[str, Any]:
        data = self.data.model_dump(mode="json", by_alias=True)
        return {"id": self.id, "data": data, "url": self.url}


def group_documents(
    documents: Iterable[Document], *, site_lang: Optional[str], sort_key: GroupSortKey
) -> List[VariantGroup]:
    """Partition documents into variant groups and order the groups.

    Buckets keep first-seen order before ``sort_key`` is applied, so equal
    keys stay in enumeration order.
    """
    buckets: Dict[str, List[Document]] = {}
    for doc in documents:
        buckets.setdefault(canonical_id_for(doc), []).append(doc)

    groups: List[VariantGroup] = []
    for canonical_id, variants in buckets.items():
        ordered = sort_variants_in_group(variants, site_lang=site_lang)
        groups.append(
            VariantGroup(
                canonical_id=canonical_id,
                variants=tuple(ordered),
                default_entry=select_preferred_variant(ordered, site_lang, site_lang=site_lang),
            )
        )

    groups.sort(key=sort_key)
    return groups


def link_neighbours(entries: Sequence[Document]) -> List[Document]:
    """Copy entries with prev/next navigation fields set.

    Entries are newest first: ``next`` points at the entry before (newer) and
    ``prev`` at the entry after (older). The ends get empty fields.
    """
    linked: List[Document] = []
    for index, doc in enumerate(entries):
        newer = entries[index - 1] if index > 0 else None
        older = entries[index + 1] if index + 1 < len(entries) else None
        navigation = {
            "next_slug": newer.id if newer else "",
            "next_title": newer.data.title if newer else "",
            "prev_slug": older.id if older else "",
            "prev_title": older.data.title if older else "",
        }
        linked.append(replace(doc, data=doc.data.model_copy(update=navigation)))
    return linked


class CollectionCatalog:
    """Memoized grouping pipeline for one collection."""

    def __init__(
        self,
        name: str,
        provider: CollectionProvider,
        *,
        site_lang: str = "en",
        dev_mode: bool = False,
        ordering: str = "display",
    ) -> None:
        if ordering not in ORDERINGS:
            raise ValueError(f"Unknown ordering: {ordering}")
        self.name = name
        self.provider = provider
        self.site_lang = site_lang
        self.dev_mode = dev_mode
        self.ordering = ordering
        self._documents: SingleFlight[List[Document]] = SingleFlight(
            self._enumerate, name=f"{name}:documents"
        )
        self._groups: SingleFlight[List[VariantGroup]] = SingleFlight(
            self._build_groups, name=f"{name}:groups"
        )
        self._entries: SingleFlight[List[Document]] = SingleFlight(
            self._build_default_entries, name=f"{name}:entries"
        )

    def include(self, data: EntryMetadata) -> bool:
        """Enumeration predicate: drafts only in development/preview mode."""
        return self.dev_mode or data.draft is not True

    async def _enumerate(self) -> List[Document]:
        result = self.provider.get_collection(self.name, self.include)
        if inspect.isawaitable(result):
            result = await result
        documents = list(result)
        logger.info("Enumerated %d documents in %s", len(documents), self.name)
        return documents

    async def _build_groups(self) -> List[VariantGroup]:
        documents = await self._documents.get()
        groups = group_documents(
            documents, site_lang=self.site_lang, sort_key=ORDERINGS[self.ordering]
        )
        logger.debug("Built %d groups for %s", len(groups), self.name)
        return groups

    async def _build_default_entries(self) -> List[Document]:
        groups = await self._groups.get()
        return link_neighbours([group.default_entry for group in groups])

    async def documents(self) -> List[Document]:
        return list(await self._documents.get())

    async def groups(self) -> List[VariantGroup]:
        return list(await self._groups.get())

    async def default_entries(self) -> List[Document]:
        return list(await self._entries.get())

    async def find_group(self, canonical_id: str) -> Optional[VariantGroup]:
        for group in await self._groups.get():
            if group.canonical_id == canonical_id:
                return group
        return None


class ContentCatalog:
    """Catalog of every collection, plus the listings built on top of posts."""

    def __init__(
        self,
        provider: CollectionProvider,
        *,
        site_lang: str = "en",
        dev_mode: bool = False,
        translator: Optional[Translator] = None,
        urls: Optional[UrlBuilder] = None,
        collections: Optional[Dict[str, str]] = None,
    ) -> None:
        self.site_lang = site_lang
        self.dev_mode = dev_mode
        self.translator = translator or I18nTranslator(site_lang)
        self.urls = urls or SiteUrlBuilder()
        self._collections: Dict[str, CollectionCatalog] = {
            name: CollectionCatalog(
                name, provider, site_lang=site_lang, dev_mode=dev_mode, ordering=ordering
            )
            for name, ordering in (collections or DEFAULT_COLLECTIONS).items()
        }
        self._tags: SingleFlight[List[Tag]] = SingleFlight(self._build_tags, name="tags")
        self._categories: SingleFlight[List[Category]] = SingleFlight(
            self._build_categories, name="categories"
        )

    @classmethod
    def from_settings(cls, provider: Optional[CollectionProvider] = None) -> "ContentCatalog":
        """Build a catalog from the PC_* environment configuration."""
        from polycontent.config import defaults
        from polycontent.providers import FileSystemProvider

        site = defaults.SITE
        return cls(
            provider or FileSystemProvider(defaults.RT.content_dir),
            site_lang=site.lang,
            dev_mode=site.dev_mode,
            urls=SiteUrlBuilder(site.base_path),
        )

    @property
    def collection_names(self) -> List[str]:
        return list(self._collections)

    def collection(self, name: str) -> CollectionCatalog:
        try:
            return self._collections[name]
        except KeyError:
            raise UnknownCollectionError(name) from None

    async def list_groups(self, collection: str = POSTS) -> List[VariantGroup]:
        return await self.collection(collection).groups()

    async def list_variants_for(self, doc: Document, collection: str = POSTS) -> List[Document]:
        """All variants of the group ``doc`` belongs to, or [] if it has none."""
        group = await self.collection(collection).find_group(canonical_id_for(doc))
        return list(group.variants) if group else []

    async def list_variants_for_id(self, identifier: str, collection: str = POSTS) -> List[Document]:
        """Same as :meth:`list_variants_for` for a bare document id."""
        canonical_id = resolve_identity_from_id(identifier).canonical_id
        group = await self.collection(collection).find_group(canonical_id)
        return list(group.variants) if group else []

    async def list_default_entries(self, collection: str = POSTS) -> List[Document]:
        return await self.collection(collection).default_entries()

    async def list_default_entries_with_urls(self, collection: str = POSTS) -> List[EntryListItem]:
        entries = await self.list_default_entries(collection)
        return [EntryListItem(id=doc.id, data=doc.data, url=self.urls.post_url(doc)) for doc in entries]

    async def find_group_by_canonical_id(
        self, collection: str, canonical_id: str
    ) -> Optional[VariantGroup]:
        return await self.collection(collection).find_group(canonical_id)

    def select_variant(
        self, group: VariantGroup, preferred_lang: Optional[str] = None
    ) -> Document:
        """Variant of ``group`` to render for a requested language."""
        return select_preferred_variant(group.variants, preferred_lang, site_lang=self.site_lang)

    async def list_tags(self) -> List[Tag]:
        return list(await self._tags.get())

    async def list_categories(self) -> List[Category]:
        return list(await self._categories.get())

    async def _build_tags(self) -> List[Tag]:
        counts: Dict[str, int] = {}
        for doc in await self.list_default_entries(POSTS):
            for tag in getattr(doc.data, "tags", None) or []:
                counts[tag] = counts.get(tag, 0) + 1

        names = sorted(counts, key=str.lower)
        return [Tag(name=name, count=counts[name]) for name in names]

    async def _build_categories(self) -> List[Category]:
        uncategorized = self.translator(I18nKey.UNCATEGORIZED)
        counts: Dict[str, int] = {}
        for doc in await self.list_default_entries(POSTS):
            name = (getattr(doc.data, "category", None) or "").strip() or uncategorized
            counts[name] = counts.get(name, 0) + 1

        names = sorted(counts, key=str.lower)
        return [
            Category(name=name, count=counts[name], url=self.urls.category_url(name))
            for name in names
        ]


__all__ = [
    "POSTS",
    "SPEC",
    "DEFAULT_COLLECTIONS",
    "UnknownCollectionError",
    "Tag",
    "Category",
    "EntryListItem",
    "group_documents",
    "link_neighbours",
    "CollectionCatalog",
    "ContentCatalog",
]
