"""objectkit: small object helpers and a CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objectkit.config import ObjectkitConfig
from objectkit.model import Rectangle
from objectkit.selector import css_selector_builder, parse_selector
from objectkit.serialization import deserialize, serialize

__all__ = [
    "__version__",
    "ObjectkitConfig",
    "Rectangle",
    "css_selector_builder",
    "parse_selector",
    "serialize",
    "deserialize",
]
