"""polycontent centralized configuration.

All settings are backed by environment variables following the PC_* naming
convention.

Example:
    >>> from polycontent.config import SITE
    >>> SITE.lang
    'en'

Environment Variables:
    PC_SITE_LANG: Site display language (default: en)
    PC_DEV: Include draft documents (default: off)
    PC_BASE_PATH: URL prefix for generated links (default: /)
    PC_CONTENT_DIR: Content root holding one directory per collection (default: src/content)
    PC_API_PORT: HTTP port for the read-only API (default: 8000)
    PC_ALLOWED_ORIGINS: Comma separated CORS origins for dev mode
"""

from __future__ import annotations

from polycontent.config.defaults import RT, SITE, RuntimeDefaults, SiteDefaults

__all__ = [
    "SITE",
    "RT",
    "SiteDefaults",
    "RuntimeDefaults",
]
