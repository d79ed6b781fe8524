import logging
import os
from functools import lru_cache

logger = logging.getLogger("yestv.config")


@lru_cache(maxsize=1)
def ensure_loaded() -> None:
    """Load an env file once, if one is configured.

    Priority:
    1) YESTV_ENV_FILE path
    2) .env in the working directory
    Does not override environment variables already set.
    """
    candidates = [
        os.getenv("YESTV_ENV_FILE", ""),
        ".env",
    ]
    for p in candidates:
        if p and os.path.isfile(p):
            load_env_file(p)
            return


def load_env_file(path: str) -> int:
    """Apply KEY=VALUE lines from ``path``; returns how many keys were set."""
    applied = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and k not in os.environ:
                    os.environ[k] = v
                    applied += 1
    except OSError as exc:
        logger.warning("Could not read env file %s: %s", path, exc)
    return applied
