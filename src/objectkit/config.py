from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjectkitConfig:
    json_indent: int | None = None
    json_sort_keys: bool = False
    json_compact: bool = True  # "," and ":" separators, no spaces
