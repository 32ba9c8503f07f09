"""Ordered language candidate lists used for fallback matching."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .normalize import language_base, normalize_language_code

DEFAULT_SENTINEL = "default"
UNIVERSAL_FALLBACK = "en"


def _expand(values: Iterable[str]) -> List[str]:
    """Deduplicate while keeping order, adding each base form right after its code."""
    expanded: List[str] = []
    for value in values:
        if not value:
            continue
        if value not in expanded:
            expanded.append(value)
        base = language_base(value)
        if base and base not in expanded:
            expanded.append(base)
    return expanded


def build_candidate_chain(preferred: Optional[str] = None, *, site_lang: Optional[str]) -> List[str]:
    """Build the language chain a variant lookup walks.

    Order: caller preference, site default, the ``"default"`` sentinel (a
    variant with no explicit language), then English.

    Examples:
        >>> build_candidate_chain("zh-TW", site_lang="en")
        ['zh_tw', 'zh', 'en', 'default']
    """
    return _expand(
        [
            normalize_language_code(preferred),
            normalize_language_code(site_lang),
            DEFAULT_SENTINEL,
            UNIVERSAL_FALLBACK,
        ]
    )


def browser_language_candidates(
    languages: Optional[Sequence[str]] = None, language: Optional[str] = None
) -> List[str]:
    """Candidate list from navigator-style locale preferences.

    ``languages`` wins when non-empty, otherwise the single ``language`` is
    used. No sentinel or English fallback is appended.
    """
    if languages:
        raw_list: Sequence[str] = languages
    elif language:
        raw_list = [language]
    else:
        raw_list = []
    return _expand(normalize_language_code(raw) for raw in raw_list)


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Parse an HTTP Accept-Language header into tags ordered by quality.

    Wildcards and entries with ``q=0`` are dropped; entries with equal
    quality keep header order.
    """
    if not header:
        return []

    weighted: List[Tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        pieces = [p.strip() for p in part.split(";")]
        tag = pieces[0]
        if not tag or tag == "*":
            continue
        quality = 1.0
        for param in pieces[1:]:
            if param.lower().startswith("q="):
                try:
                    quality = float(param[2:])
                except ValueError:
                    quality = 0.0
        if quality <= 0:
            continue
        weighted.append((-quality, index, tag))

    weighted.sort()
    return [tag for _, _, tag in weighted]


__all__ = [
    "DEFAULT_SENTINEL",
    "UNIVERSAL_FALLBACK",
    "build_candidate_chain",
    "browser_language_candidates",
    "parse_accept_language",
]
