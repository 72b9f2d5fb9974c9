"""Common utilities shared across transform stages."""

from .diagnostics import ProgramDiagnostics, DiagnosticSeverity, DiagnosticError
from .source_location import SourceLocation
from .constants import *

__all__ = [
    "ProgramDiagnostics",
    "DiagnosticSeverity",
    "DiagnosticError",
    "SourceLocation",
    # Constants
    "DEFAULT_CONFIG",
    "TransformConfig",
    "DOM_PROPS_PREFIX",
    "NAMESPACE_ERROR_MESSAGE",
]
