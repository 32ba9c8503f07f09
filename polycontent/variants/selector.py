"""Preferred variant selection within a group of same-document variants."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, TypeVar

from polycontent.language.candidates import DEFAULT_SENTINEL, build_candidate_chain

from .identity import resolve_identity, variant_language_key
from .types import Document, EmptyVariantSetError

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Document)


def select_preferred_variant(
    variants: Sequence[D], preferred_lang: Optional[str] = None, *, site_lang: Optional[str]
) -> D:
    """Pick the variant that best matches ``preferred_lang``.

    Walks the candidate chain (preference, site language, unmarked variant,
    English). With no match, the first unmarked variant wins, then the first
    variant overall.

    Raises:
        EmptyVariantSetError: if ``variants`` is empty
    """
    if not variants:
        raise EmptyVariantSetError("select_preferred_variant requires at least one variant")

    by_lang: Dict[str, D] = {}
    default_entry: Optional[D] = None

    for doc in variants:
        variant_lang = resolve_identity(doc).variant_lang
        key = variant_lang or DEFAULT_SENTINEL
        by_lang.setdefault(key, doc)
        if not variant_lang and default_entry is None:
            default_entry = doc

    for candidate in build_candidate_chain(preferred_lang, site_lang=site_lang):
        match = by_lang.get(candidate)
        if match is not None:
            return match

    if default_entry is not None:
        return default_entry
    return variants[0]


def sort_variants_in_group(variants: Sequence[D], *, site_lang: Optional[str]) -> List[D]:
    """Order variants for display: site-preferred first, then unmarked, then by language."""
    preferred = select_preferred_variant(variants, site_lang, site_lang=site_lang)

    def key(doc: D):
        lang = variant_language_key(doc)
        return (doc.id != preferred.id, lang != DEFAULT_SENTINEL, lang)

    ordered = sorted(variants, key=key)
    logger.debug("Ordered %d variants, preferred=%s", len(ordered), preferred.id)
    return ordered


__all__ = ["select_preferred_variant", "sort_variants_in_group"]
