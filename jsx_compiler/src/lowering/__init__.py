from .attribute_lowerer import (
    AttributeLowerer,
    PropGroup,
    TagDescriptor,
    build_prop_groups,
    classify_attribute,
    merge_prop_groups,
)
from .children import build_children, clean_jsx_text
from .custom_tags import resolve_custom_tag
from .element_lowerer import ElementLowerer
from .exceptions import JSXTransformError
from .group_props import group_props
from .identifiers import convert_jsx_identifier, is_compat_tag, resolve_tag_name
from .imports import ImportRegistry
from .lowerer import JSXLowerer, TransformResult, transform_program
from .must_use_prop import must_use_prop
from .namespace_guard import check_namespaces
from .render_context import contains_jsx, inject_render_context

"""Lowering subpackage exports."""


__all__ = [
    "AttributeLowerer",
    "PropGroup",
    "TagDescriptor",
    "build_prop_groups",
    "classify_attribute",
    "merge_prop_groups",
    "build_children",
    "clean_jsx_text",
    "resolve_custom_tag",
    "ElementLowerer",
    "JSXTransformError",
    "group_props",
    "convert_jsx_identifier",
    "is_compat_tag",
    "resolve_tag_name",
    "ImportRegistry",
    "JSXLowerer",
    "TransformResult",
    "transform_program",
    "must_use_prop",
    "check_namespaces",
    "contains_jsx",
    "inject_render_context",
]
