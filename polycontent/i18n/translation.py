"""UI string tables with language fallback.

Lookups walk the same candidate chain as variant selection: the requested
language, its base language, then English. A key missing everywhere comes
back as the key itself so gaps are visible on the page.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union

from polycontent.language.candidates import build_candidate_chain


class I18nKey(str, Enum):
    UNCATEGORIZED = "uncategorized"


_TABLES: Dict[str, Dict[str, str]] = {
    "en": {
        "uncategorized": "Uncategorized",
    },
    "zh_cn": {
        "uncategorized": "未分类",
    },
    "zh_tw": {
        "uncategorized": "未分類",
    },
    "ja": {
        "uncategorized": "未分類",
    },
    "ko": {
        "uncategorized": "미분류",
    },
    "es": {
        "uncategorized": "Sin categoría",
    },
    "fr": {
        "uncategorized": "Non classé",
    },
    "de": {
        "uncategorized": "Unkategorisiert",
    },
}


class I18nTranslator:
    """Callable translator bound to one display language."""

    def __init__(self, lang: Optional[str] = "en", tables: Optional[Dict[str, Dict[str, str]]] = None):
        self.tables = tables if tables is not None else _TABLES
        self.chain = [c for c in build_candidate_chain(lang, site_lang="en") if c in self.tables]

    def __call__(self, key: Union[I18nKey, str]) -> str:
        name = key.value if isinstance(key, I18nKey) else str(key)
        for lang in self.chain:
            text = self.tables[lang].get(name)
            if text:
                return text
        return name


__all__ = ["I18nKey", "I18nTranslator"]
