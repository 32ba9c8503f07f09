"""Translation lookup for UI strings."""

from .translation import I18nKey, I18nTranslator

__all__ = ["I18nKey", "I18nTranslator"]
