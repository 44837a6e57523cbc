"""JSON adapters: plain values to text and text back to typed objects."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from objectkit.config import ObjectkitConfig

__all__ = ["serialize", "deserialize"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def serialize(value: Any, config: ObjectkitConfig | None = None) -> str:
    """Return the JSON text of *value*.

    With the default config the output is compact: ``[1, 2, 3]`` becomes
    ``'[1,2,3]'``.
    """
    cfg = config or ObjectkitConfig()
    separators = (",", ":") if cfg.json_compact else None
    return json.dumps(
        value,
        indent=cfg.json_indent,
        sort_keys=cfg.json_sort_keys,
        separators=separators,
    )


def deserialize(text: str, shape: type[T]) -> T:
    """Parse *text* and tag the result as an instance of *shape*.

    ``shape.__init__`` is not called and the parsed keys are not checked
    against the fields *shape* expects; each key simply becomes an
    instance attribute. ``json.JSONDecodeError`` propagates as is.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Cannot tag JSON {type(data).__name__} as {shape.__name__}; "
            "expected an object"
        )
    instance = shape.__new__(shape)
    try:
        attributes = vars(instance)
    except TypeError:
        raise TypeError(
            f"Cannot tag JSON object as {shape.__name__}; its instances have no __dict__"
        ) from None
    attributes.update(data)
    logger.debug("deserialized %d key(s) into %s", len(data), shape.__name__)
    return instance
