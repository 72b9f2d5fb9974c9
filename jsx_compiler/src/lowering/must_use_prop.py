"""Which attributes Vue must bind as DOM properties."""

from __future__ import annotations

from typing import Optional

_VALUE_TAGS = frozenset({"input", "textarea", "option", "select", "progress"})


def must_use_prop(tag: Optional[str], attr_type: Optional[str], attr: str) -> bool:
    """Vue 2's platform table for ``domProps`` bindings."""
    return (
        (attr == "value" and tag in _VALUE_TAGS and attr_type != "button")
        or (attr == "selected" and tag == "option")
        or (attr == "checked" and tag == "input")
        or (attr == "muted" and tag == "video")
    )
