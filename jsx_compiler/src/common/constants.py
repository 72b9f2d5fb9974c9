"""Shared constants and transform configuration."""

from dataclasses import dataclass, replace
from typing import Callable, Optional

# Factory identifier the lowered calls invoke
DEFAULT_PRAGMA = "h"

# Render-context binding
RENDER_METHOD_NAME = "render"
CREATE_ELEMENT_SLOT = "$createElement"

# Escape hatch for tags chosen at runtime: <anyslot is="router-link">
DEFAULT_CUSTOM_TAG = "anyslot"
CUSTOM_TAG_ATTRIBUTE = "is"

# Spread merging helper
MERGE_HELPER_MODULE = "babel-helper-vue-jsx-merge-props"
MERGE_HELPER_EXPORT = "default"
MERGE_HELPER_ALIAS = "_mergeJSXProps"

# Attributes that must be bound as DOM properties are renamed with this prefix
DOM_PROPS_PREFIX = "domProps-"

NAMESPACE_ERROR_MESSAGE = (
    "Namespaced tags/attributes are not supported. JSX is not XML.\n"
    "For attributes like xlink:href, use xlinkHref instead."
)


@dataclass(frozen=True)
class TransformConfig:
    """Settings for one transform run.

    ``must_use_prop`` and ``group_props`` default to the Vue 2 tables in
    ``jsx_compiler.src.lowering`` when left as ``None``.
    """

    pragma: str = DEFAULT_PRAGMA
    render_method: str = RENDER_METHOD_NAME
    create_element_slot: str = CREATE_ELEMENT_SLOT
    custom_tag: Optional[str] = DEFAULT_CUSTOM_TAG
    merge_helper_module: str = MERGE_HELPER_MODULE
    merge_helper_export: str = MERGE_HELPER_EXPORT
    merge_helper_alias: str = MERGE_HELPER_ALIAS
    inject_render_context: bool = True
    must_use_prop: Optional[Callable[[str, Optional[str], str], bool]] = None
    group_props: Optional[Callable] = None

    def with_options(self, **changes) -> "TransformConfig":
        """Copy of this config with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = TransformConfig()
