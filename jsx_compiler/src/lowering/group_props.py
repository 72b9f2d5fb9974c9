"""Static grouping of element properties into Vue 2 data-object buckets.

``onClick`` ends up under ``on``, ``v-show`` under ``directives`` and any
plain attribute under ``attrs``, so that the object passed to ``h()`` has
the shape the runtime expects.
"""

from __future__ import annotations

import re
from typing import Dict, List

from jsx_compiler.src.ast import (
    ArrayExpression,
    Identifier,
    ObjectExpression,
    ObjectProperty,
    StringLiteral,
    copy_location,
)

TOP_LEVEL_KEYS = frozenset(
    {"class", "staticClass", "style", "key", "ref", "refInFor", "slot", "scopedSlots"}
)

_NESTABLE_RE = re.compile(r"^(props|domProps|on|nativeOn|hook|attrs)([\-_A-Z])")
_DIRECTIVE_RE = re.compile(r"^v-")
_XLINK_RE = re.compile(r"^xlink([A-Z])")


def property_name(prop: ObjectProperty) -> str:
    """Key text of an attribute entry, quoted or not."""
    key = prop.key
    if isinstance(key, StringLiteral):
        return key.value
    return key.name


def _nested_suffix(name: str) -> str:
    def replace(match: re.Match) -> str:
        separator = match.group(2)
        return "" if separator == "-" else separator.lower()

    return _NESTABLE_RE.sub(replace, name, count=1)


def group_props(entries: List[ObjectProperty]) -> ObjectExpression:
    """Build the data object for one run of named attributes.

    Buckets are created on first use and keep the position of their first
    member; entries within a bucket keep source order.
    """
    grouped: List[ObjectProperty] = []
    buckets: Dict[str, ObjectProperty] = {}

    def bucket(name: str, container) -> ObjectProperty:
        holder = buckets.get(name)
        if holder is None:
            holder = ObjectProperty(Identifier(name), container)
            buckets[name] = holder
            grouped.append(holder)
        return holder

    for prop in entries:
        name = property_name(prop)

        if name in TOP_LEVEL_KEYS:
            grouped.append(prop)
            continue

        nest_match = _NESTABLE_RE.match(name)
        if nest_match:
            nested = ObjectProperty(StringLiteral(_nested_suffix(name)), prop.value)
            copy_location(nested, prop)
            bucket(nest_match.group(1), ObjectExpression([])).value.properties.append(nested)
        elif _DIRECTIVE_RE.match(name):
            directive = ObjectExpression(
                [
                    ObjectProperty(
                        Identifier("name"), StringLiteral(_DIRECTIVE_RE.sub("", name))
                    ),
                    ObjectProperty(Identifier("value"), prop.value),
                ]
            )
            copy_location(directive, prop)
            bucket("directives", ArrayExpression([])).value.elements.append(directive)
        else:
            if _XLINK_RE.match(name):
                xlink_name = _XLINK_RE.sub(
                    lambda match: "xlink:" + match.group(1).lower(), name
                )
                prop = copy_location(ObjectProperty(StringLiteral(xlink_name), prop.value), prop)
            bucket("attrs", ObjectExpression([])).value.properties.append(prop)

    return ObjectExpression(grouped)
