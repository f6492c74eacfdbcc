from __future__ import annotations

import logging
import os
from typing import List, Optional

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using default %d", name, raw, default)
        return default


def _optional_int_env(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; ignoring it", name, raw)
        return None


# Size of the recency filter shared by all templates
MAX_RECENT = max(1, _int_env("MAX_RECENT", 100))

# Template picks per request before the fallback question is used
MAX_ATTEMPTS = max(1, _int_env("MAX_ATTEMPTS", 50))

# Open API sessions kept in memory; the oldest is dropped past this
MAX_SESSIONS = max(1, _int_env("MAX_SESSIONS", 1000))

# Seeds the process-wide generator when set (handy for demos and debugging)
RANDOM_SEED = _optional_int_env("RANDOM_SEED")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"
CORS_ORIGINS: List[str] = [
    o.strip() for o in os.getenv("CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()
]
