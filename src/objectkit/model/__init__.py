from __future__ import annotations

from objectkit.model.rectangle import Rectangle

__all__ = ["Rectangle"]
