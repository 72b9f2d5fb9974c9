"""Runtime-chosen tags: ``<anyslot is="router-link">``."""

from __future__ import annotations

from typing import List, Optional, Tuple

from jsx_compiler.src.ast import ASTNode, JSXAttribute, JSXIdentifier, StringLiteral
from jsx_compiler.src.common.constants import CUSTOM_TAG_ATTRIBUTE


def _is_attribute(attribute: ASTNode) -> bool:
    return (
        isinstance(attribute, JSXAttribute)
        and isinstance(attribute.name, JSXIdentifier)
        and attribute.name.name == CUSTOM_TAG_ATTRIBUTE
    )


def resolve_custom_tag(
    tag_name: Optional[str],
    attributes: List[ASTNode],
    escape_hatch_tag: Optional[str],
) -> Tuple[Optional[str], List[ASTNode]]:
    """Swap the escape-hatch tag for the component named by its ``is``.

    When rewritten, a new attribute list without any ``is`` attribute is
    returned; otherwise both inputs come back unchanged (the very same
    list object).
    """
    if escape_hatch_tag is None or tag_name != escape_hatch_tag:
        return tag_name, attributes

    target = next(
        (
            attr
            for attr in attributes
            if _is_attribute(attr)
            and isinstance(attr.value, StringLiteral)
            and attr.value.value
        ),
        None,
    )
    if target is None:
        return tag_name, attributes

    remaining = [attr for attr in attributes if not _is_attribute(attr)]
    return target.value.value, remaining
