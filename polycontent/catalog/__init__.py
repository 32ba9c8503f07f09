"""Grouped content cache over the content collections."""

from .cache import SingleFlight
from .ordering import canonical_id_sort_key, display_sort_key, publish_timestamp
from .protocols import CollectionProvider, Translator, UrlBuilder
from .store import (
    POSTS,
    SPEC,
    Category,
    CollectionCatalog,
    ContentCatalog,
    EntryListItem,
    Tag,
    UnknownCollectionError,
    group_documents,
    link_neighbours,
)

__all__ = [
    "POSTS",
    "SPEC",
    "SingleFlight",
    "CollectionProvider",
    "Translator",
    "UrlBuilder",
    "CollectionCatalog",
    "ContentCatalog",
    "UnknownCollectionError",
    "Tag",
    "Category",
    "EntryListItem",
    "group_documents",
    "link_neighbours",
    "display_sort_key",
    "canonical_id_sort_key",
    "publish_timestamp",
]
