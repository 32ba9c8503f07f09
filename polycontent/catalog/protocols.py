"""Interfaces of the catalog's external collaborators."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Protocol, Union, runtime_checkable

from polycontent.schema import EntryMetadata
from polycontent.variants.types import Document

MetadataPredicate = Callable[[EntryMetadata], bool]


@runtime_checkable
class CollectionProvider(Protocol):
    """Enumerates the raw documents of a collection."""

    def get_collection(
        self, name: str, predicate: MetadataPredicate
    ) -> Union[List[Document], Awaitable[List[Document]]]:
        """Return every document of ``name`` whose metadata passes ``predicate``.

        May be a plain or a coroutine function. No ordering guarantee.
        """
        ...


@runtime_checkable
class Translator(Protocol):
    """Looks up a UI string by key."""

    def __call__(self, key: Any) -> str: ...


@runtime_checkable
class UrlBuilder(Protocol):
    """Builds site URLs for documents and categories."""

    def post_url(self, doc: Document) -> str: ...

    def category_url(self, name: str) -> str: ...
