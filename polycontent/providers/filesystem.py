"""Markdown collections loaded from disk.

Layout: ``<content_dir>/<collection>/**/*.md`` (also ``.mdx`` and
``.markdown``). Each file starts with a YAML frontmatter block delimited by
``---`` lines; the rest is the body.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, Union

import yaml
from loguru import logger
from pydantic import ValidationError

from polycontent.schema import EntryMetadata, PostMetadata, SpecMetadata
from polycontent.variants.types import Document

from .errors import ContentLoadError

MARKDOWN_EXTENSIONS = (".md", ".mdx", ".markdown")

SCHEMAS: Dict[str, Type[EntryMetadata]] = {
    "posts": PostMetadata,
    "spec": SpecMetadata,
}


def split_frontmatter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split a markdown file into parsed frontmatter and body.

    Files without a frontmatter block yield ``({}, text)``.

    Raises:
        yaml.YAMLError: malformed frontmatter
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != "---":
        return {}, text

    for index in range(1, len(lines)):
        if lines[index].strip() == "---":
            raw = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            data = yaml.safe_load(raw) or {}
            if not isinstance(data, dict):
                raise yaml.YAMLError("frontmatter must be a mapping")
            return data, body

    # Unterminated block: treat the whole file as body
    return {}, text


class FileSystemProvider:
    """Collection provider reading markdown files below a content directory."""

    def __init__(
        self,
        content_dir: Union[str, Path],
        schemas: Optional[Dict[str, Type[EntryMetadata]]] = None,
    ) -> None:
        self.content_dir = Path(content_dir)
        self.schemas = schemas if schemas is not None else SCHEMAS

    def _collection_dir(self, name: str) -> Path:
        path = self.content_dir / name
        if not path.is_dir():
            raise ContentLoadError(f"Collection directory not found: {name}")
        return path

    def load(self, name: str) -> List[Document]:
        """Read every valid document of a collection, sorted by path."""
        root = self._collection_dir(name)
        schema = self.schemas.get(name, EntryMetadata)
        documents: List[Document] = []

        for path in sorted(root.rglob("*")):
            if not path.is_file() or path.suffix.lower() not in MARKDOWN_EXTENSIONS:
                continue
            entry_id = path.relative_to(root).as_posix()
            try:
                raw, body = split_frontmatter(path.read_text(encoding="utf-8"))
                data = schema.model_validate(raw)
            except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
                logger.warning(f"Skipping {name}/{entry_id}: {e}")
                continue

            documents.append(
                Document(
                    id=entry_id,
                    data=data,
                    # Rooted at the collection so host directories never look like a root
                    file_path=f"{name}/{entry_id}",
                    collection=name,
                    body=body,
                )
            )
        return documents

    async def get_collection(self, name, predicate) -> List[Document]:
        documents = await asyncio.to_thread(self.load, name)
        return [doc for doc in documents if predicate(doc.data)]
