"""Language code normalization and candidate chains."""

from .candidates import (
    DEFAULT_SENTINEL,
    browser_language_candidates,
    build_candidate_chain,
    parse_accept_language,
)
from .normalize import (
    get_language_display_name,
    language_base,
    list_display_languages,
    normalize_language_code,
)

__all__ = [
    "DEFAULT_SENTINEL",
    "build_candidate_chain",
    "browser_language_candidates",
    "parse_accept_language",
    "normalize_language_code",
    "language_base",
    "get_language_display_name",
    "list_display_languages",
]
