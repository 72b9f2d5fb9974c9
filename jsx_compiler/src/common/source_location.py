from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Any

"""Source location utilities for tracking code positions."""


@dataclass
class SourceLocation:
    """Represents a location in source code."""

    file: Optional[str] = None
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        """Format as file:line:col."""
        parts = []
        if self.file:
            parts.append(Path(self.file).name)
        if self.line > 0:
            parts.append(str(self.line))
            if self.column > 0:
                parts.append(str(self.column))
        return ":".join(parts) if parts else "unknown"

    @classmethod
    def from_node(cls, node: Optional[Any]) -> "SourceLocation":
        """Location of an AST node, or an empty location for ``None``."""
        if node is None:
            return cls()
        return cls(
            getattr(node, "source_file", None),
            getattr(node, "line", 0) or 0,
            getattr(node, "column", 0) or 0,
        )
