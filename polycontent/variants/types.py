"""Variant core types and errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar

from polycontent.schema import EntryMetadata

M = TypeVar("M", bound=EntryMetadata)


@dataclass(frozen=True)
class Document(Generic[M]):
    """A collection entry as returned by a content provider.

    ``id`` is unique within its collection. ``file_path`` is where the entry
    was loaded from, when known.
    """

    id: str
    data: M
    file_path: Optional[str] = None
    collection: str = ""
    body: str = field(default="", repr=False, compare=False)


@dataclass(frozen=True)
class VariantIdentity:
    """Identity of one document variant derived from its path and metadata."""

    id_without_ext: str
    canonical_id: str
    variant_lang: str
    variant_lang_base: str
    file_suffix_lang: str


@dataclass(frozen=True)
class VariantGroup(Generic[M]):
    """All language variants sharing one canonical id.

    ``variants`` is ordered with the preferred variant first and
    ``default_entry`` is always one of them.
    """

    canonical_id: str
    variants: Tuple[Document[M], ...]
    default_entry: Document[M]

    @property
    def languages(self) -> List[str]:
        from .identity import variant_language_key

        return [variant_language_key(doc) for doc in self.variants]


class VariantError(Exception):
    """Base variant resolution error."""
    pass


class EmptyVariantSetError(VariantError, ValueError):
    """Preferred variant requested from an empty variant list."""
    pass
