"""polycontent config defaults.

No side effects on import. Values can be overridden via env.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List


def _env(name: str, default: str) -> str:
    if not name.startswith("PC_"):
        raise ValueError(f"Only PC_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, "1" if default else "0")
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = _env(name, str(default))
    try:
        return int(raw)
    except Exception:
        return default


def _env_list(name: str, default: str) -> List[str]:
    raw = _env(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_path_absolute(name: str, default: str) -> str:
    """Get an environment variable as an absolute path string.

    Relative paths are resolved against the current working directory.
    """
    from pathlib import Path

    raw = _env(name, default) or default
    return str(Path(raw).expanduser().resolve())


@dataclass(frozen=True)
class SiteDefaults:
    # Display language of the site; also the fallback after an explicit preference
    lang: str = _env("PC_SITE_LANG", "en")
    # Development/preview mode includes drafts
    dev_mode: bool = _env_bool("PC_DEV", False)
    base_path: str = _env("PC_BASE_PATH", "/")


@dataclass(frozen=True)
class RuntimeDefaults:
    content_dir: str = _env_path_absolute("PC_CONTENT_DIR", "src/content")
    api_port: int = _env_int("PC_API_PORT", 8000)
    allowed_origins: List[str] = field(
        default_factory=lambda: _env_list(
            "PC_ALLOWED_ORIGINS", "http://localhost:4321,http://127.0.0.1:4321"
        )
    )


SITE = SiteDefaults()
RT = RuntimeDefaults()
