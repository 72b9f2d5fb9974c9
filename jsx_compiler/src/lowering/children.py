"""Materialization of element children into call arguments."""

from __future__ import annotations

import re
from typing import List, Optional

from jsx_compiler.src.ast import (
    Expr,
    JSXElement,
    JSXEmptyExpression,
    JSXExpressionContainer,
    JSXText,
    StringLiteral,
    copy_location,
)

_LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")


def clean_jsx_text(value: str) -> Optional[str]:
    """Collapse JSX text the way browsers would render it.

    Whitespace touching a line break is dropped and the remaining lines are
    joined with single spaces. Returns ``None`` when nothing is left.
    """
    lines = _LINE_BREAK_RE.split(value)

    last_non_empty_line = 0
    for index, line in enumerate(lines):
        if re.search(r"[^ \t]", line):
            last_non_empty_line = index

    result = ""
    for index, line in enumerate(lines):
        trimmed = line.replace("\t", " ")
        if index != 0:
            trimmed = trimmed.lstrip(" ")
        if index != len(lines) - 1:
            trimmed = trimmed.rstrip(" ")

        if trimmed:
            if index != last_non_empty_line:
                trimmed += " "
            result += trimmed

    return result or None


def build_children(element: JSXElement) -> List[Expr]:
    """Children of ``element`` as plain expressions, in source order."""
    elements: List[Expr] = []
    for child in element.children:
        if isinstance(child, JSXText):
            text = clean_jsx_text(child.value)
            if text is not None:
                elements.append(copy_location(StringLiteral(text), child))
            continue

        if isinstance(child, JSXExpressionContainer):
            child = child.expression
        if isinstance(child, JSXEmptyExpression):
            continue

        elements.append(child)
    return elements
