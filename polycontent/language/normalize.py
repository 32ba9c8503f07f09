"""Language code normalization and display names.

Content arrives with language codes from several places: a ``lang`` field in
frontmatter, a filename suffix such as ``guide.zh-TW.md`` and the locale list a
browser reports. This module collapses all of those spellings to one internal
form: lowercase, underscore separated, with legacy and regional aliases folded.

Examples:
    >>> normalize_language_code("EN-US")
    'en'
    >>> normalize_language_code("zh-Hant")
    'zh_tw'
    >>> normalize_language_code("pt-BR")
    'pt_br'
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

# Curated alias mapping, keyed by the underscored lowercase form
_ALIASES: Dict[str, str] = {
    "jp": "ja",
    "ja_jp": "ja",
    "en_us": "en",
    "en_gb": "en",
    "en_au": "en",
    "cn": "zh_cn",
    "tw": "zh_tw",
    "zh_hans": "zh_cn",
    "zh_sg": "zh_cn",
    "zh_hant": "zh_tw",
    "zh_hk": "zh_tw",
    "zh_mo": "zh_tw",
}

# Display names for config-style codes (zh_CN) and translation-service names
_DISPLAY_NAMES: Dict[str, str] = {
    "zh_CN": "简体中文",
    "zh_TW": "繁體中文",
    "en": "English",
    "ja": "日本語",
    "ko": "한국어",
    "es": "Español",
    "th": "ไทย",
    "vi": "Tiếng Việt",
    "tr": "Türkçe",
    "id": "Bahasa Indonesia",
    "fr": "Français",
    "de": "Deutsch",
    "ru": "Русский",
    "ar": "العربية",
    "chinese_simplified": "简体中文",
    "chinese_traditional": "繁體中文",
    "english": "English",
    "japanese": "日本語",
    "korean": "한국어",
    "spanish": "Español",
    "thai": "ไทย",
    "vietnamese": "Tiếng Việt",
    "turkish": "Türkçe",
    "indonesian": "Bahasa Indonesia",
    "french": "Français",
    "german": "Deutsch",
    "russian": "Русский",
    "arabic": "العربية",
}

# Config-style keys the display table uses for Chinese
_DISPLAY_KEYS: Dict[str, str] = {
    "zh_cn": "zh_CN",
    "zh_tw": "zh_TW",
}

_CONFIG_CODES: Tuple[str, ...] = (
    "zh_CN",
    "zh_TW",
    "en",
    "ja",
    "ko",
    "es",
    "th",
    "vi",
    "tr",
    "id",
    "fr",
    "de",
    "ru",
    "ar",
)


def _underscored(raw: str) -> str:
    return raw.strip().lower().replace("-", "_")


def normalize_language_code(raw: Optional[str]) -> str:
    """Normalize a language code to its internal form.

    Args:
        raw: Any spelling of a language code, or None

    Returns:
        Lowercase underscored code with aliases applied, or "" for empty input.
        Unknown codes pass through unaliased.
    """
    if not raw:
        return ""
    normalized = _underscored(raw)
    return _ALIASES.get(normalized, normalized)


def language_base(code: str) -> str:
    """Return the base language of a normalized code (``zh_tw`` -> ``zh``)."""
    return code.split("_", 1)[0] or code


def get_language_display_name(lang_code: Optional[str]) -> str:
    """Map a language code to a human readable name.

    Accepts config-style codes (``zh_CN``), translation-service names
    (``chinese_simplified``) and any alias understood by
    :func:`normalize_language_code`. Unknown codes are returned as given
    (trimmed); blank input yields "".

    Examples:
        >>> get_language_display_name("zh-TW")
        '繁體中文'
        >>> get_language_display_name("klingon")
        'klingon'
    """
    trimmed = str(lang_code or "").strip()
    if not trimmed:
        return ""

    aliased = normalize_language_code(trimmed)
    candidates = [trimmed, _DISPLAY_KEYS.get(aliased, aliased), _underscored(trimmed)]

    for candidate in candidates:
        name = _DISPLAY_NAMES.get(candidate)
        if name:
            return name

    return trimmed


def list_display_languages() -> List[Tuple[str, str]]:
    """Config-style codes with their display names, in table order."""
    return [(code, _DISPLAY_NAMES[code]) for code in _CONFIG_CODES]


__all__ = [
    "normalize_language_code",
    "language_base",
    "get_language_display_name",
    "list_display_languages",
]
