"""Attribute classification, grouping and spread merging."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from jsx_compiler.src.ast import (
    ArrayExpression,
    ASTNode,
    BooleanLiteral,
    CallExpression,
    Expr,
    Identifier,
    JSXAttribute,
    JSXExpressionContainer,
    JSXIdentifier,
    JSXSpreadAttribute,
    NullLiteral,
    ObjectExpression,
    ObjectProperty,
    StringLiteral,
    copy_location,
)
from jsx_compiler.src.common.constants import (
    DOM_PROPS_PREFIX,
    MERGE_HELPER_ALIAS,
    MERGE_HELPER_EXPORT,
    MERGE_HELPER_MODULE,
)

from .group_props import group_props as default_group_props
from .identifiers import is_valid_identifier
from .imports import ImportRegistry
from .must_use_prop import must_use_prop as default_must_use_prop

_MULTILINE_WS_RE = re.compile(r"\n\s+")


@dataclass(frozen=True)
class TagDescriptor:
    """Tag name and ``type`` attribute, as seen by the prop oracle."""

    name: Optional[str]
    type: Optional[str] = None


@dataclass
class PropGroup:
    """One argument of the merge helper.

    Either a run of named attributes (``entries``, grouped into ``object``)
    or the argument of a single spread attribute (``opaque_expression``).
    """

    entries: List[ObjectProperty] = field(default_factory=list)
    opaque_expression: Optional[Expr] = None
    object: Optional[ObjectExpression] = None

    @property
    def is_opaque(self) -> bool:
        return self.opaque_expression is not None

    @property
    def expression(self) -> Expr:
        if self.opaque_expression is not None:
            return self.opaque_expression
        return self.object if self.object is not None else ObjectExpression(self.entries)


def attribute_name(attribute: ASTNode) -> Optional[str]:
    if isinstance(attribute, JSXAttribute) and isinstance(attribute.name, JSXIdentifier):
        return attribute.name.name
    return None


def tag_descriptor(tag_name: Optional[str], attributes: List[ASTNode]) -> TagDescriptor:
    """Descriptor for ``tag_name`` with the first ``type`` attribute's literal value."""
    type_attribute = next(
        (attr for attr in attributes if attribute_name(attr) == "type"), None
    )
    attr_type = None
    if type_attribute is not None and isinstance(type_attribute.value, StringLiteral):
        attr_type = type_attribute.value.value
    return TagDescriptor(tag_name, attr_type)


def classify_attribute(
    attribute: ASTNode,
    descriptor: TagDescriptor,
    must_use_prop: Callable[[Optional[str], Optional[str], str], bool] = default_must_use_prop,
) -> Optional[str]:
    """Name under which ``attribute`` is emitted.

    Dynamic values of attributes Vue must set as DOM properties are renamed
    to ``domProps-<name>``. Applying it to its own result changes nothing.
    """
    name = attribute_name(attribute)
    if name is None:
        return None
    if isinstance(attribute.value, JSXExpressionContainer) and must_use_prop(
        descriptor.name, descriptor.type, name
    ):
        return DOM_PROPS_PREFIX + name
    return name


def convert_attribute_value(value: Optional[ASTNode]) -> Expr:
    if value is None:
        return BooleanLiteral(True)
    if isinstance(value, JSXExpressionContainer):
        return value.expression
    if isinstance(value, StringLiteral):
        collapsed = _MULTILINE_WS_RE.sub(" ", value.value)
        return copy_location(StringLiteral(collapsed), value)
    return value


def convert_attribute(attribute: JSXAttribute, name: str) -> ObjectProperty:
    """``name={value}`` as an object entry, quoting keys that need it."""
    key = Identifier(name) if is_valid_identifier(name) else StringLiteral(name)
    copy_location(key, attribute.name)
    prop = ObjectProperty(key, convert_attribute_value(attribute.value))
    return copy_location(prop, attribute)


def build_prop_groups(
    attributes: List[ASTNode],
    descriptor: TagDescriptor,
    must_use_prop: Callable = default_must_use_prop,
    group_props: Callable[[List[ObjectProperty]], ObjectExpression] = default_group_props,
) -> List[PropGroup]:
    """Split attributes into groups at every spread, in source order."""
    groups: List[PropGroup] = []
    pending: List[ObjectProperty] = []

    def flush() -> None:
        nonlocal pending
        if pending:
            groups.append(PropGroup(entries=pending))
            pending = []

    for attribute in attributes:
        if isinstance(attribute, JSXSpreadAttribute):
            flush()
            groups.append(PropGroup(opaque_expression=attribute.argument))
        else:
            name = classify_attribute(attribute, descriptor, must_use_prop)
            pending.append(convert_attribute(attribute, name))
    flush()

    for group in groups:
        if not group.is_opaque:
            group.object = group_props(group.entries)
    return groups


def merge_prop_groups(
    groups: List[PropGroup],
    registry: ImportRegistry,
    module: str = MERGE_HELPER_MODULE,
    export: str = MERGE_HELPER_EXPORT,
    alias: str = MERGE_HELPER_ALIAS,
) -> Expr:
    """Second ``h()`` argument for the given groups.

    More than one group is combined at runtime by the merge helper, which
    is imported on first use.
    """
    if not groups:
        return NullLiteral()
    if len(groups) == 1:
        return groups[0].expression

    helper = registry.resolve(module, export, alias)
    return CallExpression(helper, [ArrayExpression([g.expression for g in groups])])


class AttributeLowerer:
    """Lowers an opening tag's attribute list to the props argument."""

    def __init__(self, parent: Any) -> None:
        self.parent = parent

    @property
    def config(self):
        return self.parent.config

    @property
    def registry(self):
        return self.parent.registry

    def lower_attributes(self, tag_name: Optional[str], attributes: List[ASTNode]) -> Expr:
        descriptor = tag_descriptor(tag_name, attributes)
        groups = build_prop_groups(
            attributes,
            descriptor,
            must_use_prop=self.config.must_use_prop or default_must_use_prop,
            group_props=self.config.group_props or default_group_props,
        )
        if len(groups) > 1:
            self.parent.merge_sites += 1
        return merge_prop_groups(
            groups,
            self.registry,
            module=self.config.merge_helper_module,
            export=self.config.merge_helper_export,
            alias=self.config.merge_helper_alias,
        )
