"""Base classes and utilities for AST traversal."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple

# Attributes carried by every node that never hold child nodes.
_LOCATION_FIELDS = ("line", "column", "source_file", "raw_text")


class ASTNode:
    """Base class for all AST nodes."""

    def __init__(
        self,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
        raw_text: Optional[str] = None,
    ) -> None:
        self.line = line
        self.column = column
        self.source_file = source_file
        self.raw_text = raw_text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.line}:{self.column})"


def copy_location(new_node: ASTNode, old_node: ASTNode) -> ASTNode:
    """Copy source location from ``old_node`` onto ``new_node`` and return it."""
    new_node.line = old_node.line
    new_node.column = old_node.column
    new_node.source_file = old_node.source_file
    return new_node


def iter_fields(node: ASTNode) -> Iterator[Tuple[str, Any]]:
    """Yield ``(name, value)`` for every non-location attribute of ``node``."""
    for field_name, field_value in vars(node).items():
        if field_name in _LOCATION_FIELDS:
            continue
        yield field_name, field_value


def iter_child_nodes(node: ASTNode) -> Iterator[ASTNode]:
    """Yield direct child nodes in field order."""
    for _, field_value in iter_fields(node):
        if isinstance(field_value, ASTNode):
            yield field_value
        elif isinstance(field_value, list):
            for item in field_value:
                if isinstance(item, ASTNode):
                    yield item


def walk(node: ASTNode) -> Iterator[ASTNode]:
    """Yield ``node`` and all of its descendants, parents first."""
    stack: List[ASTNode] = [node]
    while stack:
        current = stack.pop()
        yield current
        children = list(iter_child_nodes(current))
        stack.extend(reversed(children))


class ASTVisitor:
    """Base class for AST traversal visitors.

    ``visit`` dispatches to ``visit_<ClassName>`` when defined, otherwise to
    ``generic_visit`` which visits every child node in field order.
    """

    def visit(self, node: ASTNode) -> Any:
        """Visit a node and return result."""
        method_name = f"visit_{type(node).__name__}"
        visitor = getattr(self, method_name, None)
        if visitor is not None:
            return visitor(node)
        return self.generic_visit(node)

    def generic_visit(self, node: ASTNode) -> Any:
        """Default visitor for unhandled node types."""
        for child in iter_child_nodes(node):
            self.visit(child)
        return None


class ASTTransformer(ASTVisitor):
    """Base class for AST transformation visitors.

    Each ``visit_*`` method returns the node that replaces the visited one.
    ``generic_visit`` transforms child nodes and writes the results back
    into the parent, so subclasses that call it first get post-order
    rewriting.
    """

    def visit(self, node: ASTNode) -> ASTNode:  # type: ignore[override]
        """Visit and transform a node."""
        method_name = f"visit_{type(node).__name__}"
        visitor = getattr(self, method_name, None)
        if visitor is not None:
            return visitor(node)
        return self.generic_visit(node)

    def generic_visit(self, node: ASTNode) -> ASTNode:  # type: ignore[override]
        """Transform every child in place and return ``node``."""
        for field_name, field_value in list(iter_fields(node)):
            if isinstance(field_value, ASTNode):
                setattr(node, field_name, self.visit(field_value))
            elif isinstance(field_value, list):
                new_items = []
                for item in field_value:
                    if isinstance(item, ASTNode):
                        item = self.visit(item)
                    new_items.append(item)
                field_value[:] = new_items
        return node
