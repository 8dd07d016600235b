from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging
import os

import dotenv

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    debug: bool = False
    log_dir: Optional[str] = None

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug else logging.INFO


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """Read settings (WORDPOINTS_DEBUG, WORDPOINTS_LOG_DIR).

    Values from `env_file` are used as defaults; the process environment wins.
    os.environ itself is never modified. Read on every call so tests can
    monkeypatch the environment.
    """
    values = dict(dotenv.dotenv_values(env_file)) if env_file and os.path.isfile(env_file) else {}
    values.update(os.environ)
    debug = str(values.get("WORDPOINTS_DEBUG") or "0").strip().lower() in _TRUTHY
    log_dir = values.get("WORDPOINTS_LOG_DIR") or None
    return Settings(debug=debug, log_dir=log_dir)
