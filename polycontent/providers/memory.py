"""In-memory collection provider."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from polycontent.variants.types import Document

from .errors import ContentLoadError


class MemoryProvider:
    """Serves documents held in memory, keyed by collection name.

    ``calls`` counts enumerations per collection.
    """

    def __init__(self, collections: Optional[Dict[str, Iterable[Document]]] = None) -> None:
        self.collections: Dict[str, List[Document]] = {
            name: list(docs) for name, docs in (collections or {}).items()
        }
        self.calls: Dict[str, int] = {}

    def add(self, name: str, *documents: Document) -> None:
        self.collections.setdefault(name, []).extend(documents)

    def get_collection(self, name, predicate) -> List[Document]:
        self.calls[name] = self.calls.get(name, 0) + 1
        if name not in self.collections:
            raise ContentLoadError(f"Unknown collection: {name}")
        return [doc for doc in self.collections[name] if predicate(doc.data)]
