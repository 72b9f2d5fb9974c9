from dataclasses import dataclass
from enum import Enum
import logging
from typing import List, Optional, Any

from .source_location import SourceLocation

"""Unified diagnostic collection for the whole transform pipeline."""

logger = logging.getLogger(__name__)


class DiagnosticSeverity(Enum):
    """Severity levels for transform diagnostics."""

    DEBUG = "debug"  # Internal trace information
    INFO = "info"  # Informational messages for users
    WARNING = "warning"  # Issues that don't prevent output
    ERROR = "error"  # Issues that abort the file


_SEVERITY_ORDER = [
    DiagnosticSeverity.DEBUG,
    DiagnosticSeverity.INFO,
    DiagnosticSeverity.WARNING,
    DiagnosticSeverity.ERROR,
]

_LOG_LEVELS = {
    DiagnosticSeverity.DEBUG: logging.DEBUG,
    DiagnosticSeverity.INFO: logging.INFO,
    DiagnosticSeverity.WARNING: logging.WARNING,
    DiagnosticSeverity.ERROR: logging.ERROR,
}


@dataclass
class Diagnostic:
    """A single diagnostic message with context."""

    severity: DiagnosticSeverity
    message: str
    stage: str  # parsing, transform, emission
    line: int = 0
    column: int = 0
    source_file: Optional[str] = None
    node: Optional[Any] = None  # ASTNode reference if available


class DiagnosticError(Exception):
    """Raised for an error diagnostic when collection runs in raise mode."""

    def __init__(self, diagnostic: Diagnostic, formatted: str) -> None:
        self.diagnostic = diagnostic
        super().__init__(formatted)


class ProgramDiagnostics:
    """Central diagnostic collection for one file's transformation.

    Diagnostics are recorded per stage and mirrored to the module logger
    at or above ``log_level``.

    Usage:
        diagnostics = ProgramDiagnostics()
        diagnostics.error("Namespaced tag", stage="transform", node=element)
        if diagnostics.has_errors():
            print("\n".join(diagnostics.get_messages()))
    """

    def __init__(
        self,
        log_level: str = "warning",
        raise_errors: bool = False,
    ):
        self.diagnostics: List[Diagnostic] = []
        self.verbose = log_level.lower() in ("debug", "info")
        self.log_level = log_level
        self.raise_errors = raise_errors
        self._error_count = 0
        self.default_stage = "unknown"

    def info(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
        node: Optional[Any] = None,
    ) -> None:
        """Add an informational message (shown in verbose mode)."""
        if self.verbose:
            self._add(
                DiagnosticSeverity.INFO, message, stage, line, column, source_file, node
            )

    def error(
        self,
        message: str,
        stage: str | None = None,
        line: int = 0,
        column: int = 0,
        source_file: Optional[str] = None,
        node: Optional[Any] = None,
    ) -> None:
        """Add an error (always shown, aborts the file)."""
        diag = self._add(
            DiagnosticSeverity.ERROR, message, stage, line, column, source_file, node
        )
        self._error_count += 1
        if self.raise_errors:
            raise DiagnosticError(diag, self._format_diagnostic(diag))

    def _add(
        self,
        severity: DiagnosticSeverity,
        message: str,
        stage: str | None,
        line: int,
        column: int,
        source_file: Optional[str],
        node: Optional[Any],
    ) -> Diagnostic:
        """Internal method to add a diagnostic."""
        # Extract location from node if provided and location not specified
        if node is not None and line == 0:
            line = getattr(node, "line", 0)
            column = getattr(node, "column", 0)
            if source_file is None:
                source_file = getattr(node, "source_file", None)

        diag = Diagnostic(
            severity=severity,
            message=message,
            stage=stage or self.default_stage,
            line=line,
            column=column,
            source_file=source_file,
            node=node,
        )
        self.diagnostics.append(diag)
        logger.log(_LOG_LEVELS[severity], self._format_diagnostic(diag))
        return diag

    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return self._error_count > 0

    def get_messages(
        self, min_severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    ) -> List[str]:
        """Get formatted messages at or above the specified severity level."""
        messages = []
        for diag in self.diagnostics:
            if _SEVERITY_ORDER.index(diag.severity) < _SEVERITY_ORDER.index(min_severity):
                continue

            messages.append(self._format_diagnostic(diag))
        return messages

    def _format_diagnostic(self, diag: Diagnostic) -> str:
        """Format a single diagnostic for display."""
        # Format: SEVERITY [stage:file:line:col]: message
        location = SourceLocation(diag.source_file, diag.line, diag.column)
        location_parts = [diag.stage]
        if location.file or location.line > 0:
            location_parts.append(str(location))

        return f"{diag.severity.value.upper()} [{':'.join(location_parts)}]: {diag.message}"
