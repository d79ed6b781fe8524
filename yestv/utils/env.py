from __future__ import annotations

import os
from typing import Iterable, List


def env_int(name: str, *, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"Invalid integer for {name!r}: {value!r}") from None


def env_list(name: str, *, default: Iterable[str] | None = None, separator: str = ",") -> List[str]:
    """
    Read a delimited list from an environment variable.

    Missing values resolve to the provided default.
    """
    value = os.getenv(name)
    if value is None:
        if default is None:
            return []
        return [item for item in default]
    items = [item.strip() for item in value.split(separator)]
    return [item for item in items if item]


__all__ = ["env_int", "env_list"]
