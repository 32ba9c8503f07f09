"""Canonical identity and variant language of a document.

Identity is derived in two independent stages:

1. ``relative_content_path`` strips the collection root from a storage path
   (``src/content/posts/guide.ja.md`` -> ``guide.ja.md``).
2. ``split_language_suffix`` strips a known language suffix from the final
   path segment (``guide.ja`` -> ``guide``, ``ja``).

A filename suffix is the author's explicit signal and always wins over the
``lang`` metadata field.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from polycontent.language.candidates import DEFAULT_SENTINEL
from polycontent.language.normalize import language_base, normalize_language_code

from .types import Document, VariantIdentity

COLLECTION_ROOTS: Tuple[str, ...] = ("posts", "spec")

KNOWN_LANG_SUFFIXES = frozenset(
    {
        "en",
        "en_us",
        "en_gb",
        "en_au",
        "zh",
        "zh_cn",
        "zh_tw",
        "cn",
        "tw",
        "ja",
        "ja_jp",
        "jp",
        "ko",
        "ko_kr",
        "es",
        "fr",
        "de",
        "ru",
        "it",
        "pt",
        "pt_br",
        "tr",
        "vi",
        "id",
        "th",
        "ar",
    }
)

_MARKDOWN_EXT_RE = re.compile(r"\.(md|mdx|markdown)$", re.IGNORECASE)
_ROOTS_PATTERN = "|".join(re.escape(root) for root in COLLECTION_ROOTS)
_CONTENT_ROOT_RE = re.compile(rf"(?:^|/)src/content/(?:{_ROOTS_PATTERN})/(.+)$", re.IGNORECASE)
_COLLECTION_ROOT_RE = re.compile(rf"(?:^|/)(?:{_ROOTS_PATTERN})/(.+)$", re.IGNORECASE)


def _normalize_separators(value: str) -> str:
    return value.replace("\\", "/")


def strip_markdown_extension(path: str) -> str:
    return _MARKDOWN_EXT_RE.sub("", path)


def split_dir_and_base(path: str) -> Tuple[str, str]:
    """Split into directory (with trailing slash, possibly empty) and final segment."""
    slash = path.rfind("/")
    if slash < 0:
        return "", path
    return path[: slash + 1], path[slash + 1 :]


def relative_content_path(file_path: str) -> str:
    """Path of a stored document relative to its collection root.

    Paths without a recognized root come back normalized but otherwise as given.
    """
    normalized = _normalize_separators(file_path)
    normalized = re.sub(r"^\.?/", "", normalized)

    match = _CONTENT_ROOT_RE.search(normalized)
    if match:
        return match.group(1)

    # Shorter relative paths such as "posts/guide.md"
    match = _COLLECTION_ROOT_RE.search(normalized)
    if match:
        return match.group(1)

    return normalized


def is_known_language_suffix(raw: str) -> bool:
    return raw.strip().lower().replace("-", "_") in KNOWN_LANG_SUFFIXES


def split_language_suffix(base: str) -> Tuple[str, str]:
    """Split ``name.lang`` into ``(name, normalized lang)``.

    Returns ``(base, "")`` when there is no dot past the first character or
    the suffix is not a known language.
    """
    dot = base.rfind(".")
    if dot > 0:
        maybe_lang = base[dot + 1 :]
        if is_known_language_suffix(maybe_lang):
            return base[:dot], normalize_language_code(maybe_lang)
    return base, ""


def _identity_from_path(path_source: str, metadata_lang: Optional[str]) -> VariantIdentity:
    id_without_ext = strip_markdown_extension(_normalize_separators(path_source))
    directory, base = split_dir_and_base(id_without_ext)
    canonical_base, file_suffix_lang = split_language_suffix(base)

    variant_lang = file_suffix_lang or normalize_language_code(metadata_lang)
    return VariantIdentity(
        id_without_ext=id_without_ext,
        canonical_id=f"{directory}{canonical_base}",
        variant_lang=variant_lang,
        variant_lang_base=language_base(variant_lang) if variant_lang else "",
        file_suffix_lang=file_suffix_lang,
    )


def resolve_identity(doc: Document) -> VariantIdentity:
    """Identity of a full document; the storage path is preferred over the id."""
    path_source = relative_content_path(doc.file_path) if doc.file_path else doc.id
    return _identity_from_path(path_source, doc.data.lang)


def resolve_identity_from_id(identifier: str) -> VariantIdentity:
    """Identity of a bare identifier, no metadata involved."""
    return _identity_from_path(identifier, None)


def canonical_id_for(doc: Document) -> str:
    return resolve_identity(doc).canonical_id


def variant_language_key(doc: Document) -> str:
    """Variant language of ``doc``, or ``"default"`` when none could be determined."""
    return resolve_identity(doc).variant_lang or DEFAULT_SENTINEL


__all__ = [
    "COLLECTION_ROOTS",
    "KNOWN_LANG_SUFFIXES",
    "strip_markdown_extension",
    "split_dir_and_base",
    "relative_content_path",
    "is_known_language_suffix",
    "split_language_suffix",
    "resolve_identity",
    "resolve_identity_from_id",
    "canonical_id_for",
    "variant_language_key",
]
