from typing import Optional
from jsx_compiler.src.ast import ASTNode

"""Transform exceptions."""


class JSXTransformError(Exception):
    """Exception raised when a file cannot be transformed."""

    def __init__(self, message: str, node: Optional[ASTNode] = None) -> None:
        self.message = message
        self.node = node
        location = f" at {node.line}:{node.column}" if node and node.line > 0 else ""
        super().__init__(f"{message}{location}")
