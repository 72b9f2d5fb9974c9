"""
Shared fixtures and helpers for lowering tests.
"""

import pytest

from jsx_compiler.src.common.constants import DEFAULT_CONFIG
from jsx_compiler.src.common.diagnostics import ProgramDiagnostics
from jsx_compiler.src.emission.printer import print_program
from jsx_compiler.src.lowering.lowerer import transform_program
from jsx_compiler.src.parsing.parser import JSXParser


@pytest.fixture(scope="session")
def parser():
    return JSXParser()


@pytest.fixture
def parse_element(parser):
    """Parse a single expression statement and return its JSX element."""

    def _parse(source: str):
        program = parser.parse(source, "<test>")
        return program.body[0].expression

    return _parse


@pytest.fixture
def lower(parser):
    """Transform source text and print it with compact calls.

    Returns:
        Callable taking ``(source, config=DEFAULT_CONFIG)`` and returning code
    """

    def _lower(source: str, config=DEFAULT_CONFIG, pretty_calls: bool = False) -> str:
        program = parser.parse(source, "<test>")
        transform_program(program, config, ProgramDiagnostics())
        return print_program(program, pretty_calls=pretty_calls)

    return _lower
