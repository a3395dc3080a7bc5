"""Load config from ERROR_VALUE_CONFIG_PATH or return default.

``load_config()`` is memoised with ``functools.lru_cache`` so the file is read
and parsed at most once per process.  Call ``load_config.cache_clear()`` to
force a re-read; the environment variable is read again too, so a changed
``ERROR_VALUE_CONFIG_PATH`` is picked up.

Constructors never call this: pass ``config=load_config()`` to
``domain``/``infra`` to apply the file-based policy.
"""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .schema import DEFAULT_CONFIG, ErrorValueConfig

logger = logging.getLogger(__name__)


class _Env(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ERROR_VALUE_", extra="ignore")
    config_path: Optional[str] = None


@functools.lru_cache(maxsize=1)
def load_config() -> ErrorValueConfig:
    """Load config from ERROR_VALUE_CONFIG_PATH if set and valid; else return DEFAULT_CONFIG.

    Result is cached for the lifetime of the process.  A file that exists but
    holds invalid JSON or unknown keys raises rather than falling back.
    """
    path = _Env().config_path
    if not path or not path.strip():
        return DEFAULT_CONFIG
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        logger.warning("ERROR_VALUE_CONFIG_PATH=%s is not a file; using default config", path)
        return DEFAULT_CONFIG
    data = json.loads(p.read_text(encoding="utf-8"))
    cfg = ErrorValueConfig.model_validate(data)
    logger.debug("Loaded error-value config from %s: %s", p, cfg.model_dump())
    return cfg
