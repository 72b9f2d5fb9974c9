"""Integration tests for the full transform pipeline.

These tests exercise every stage from parsing through printing.
They use stable fixture components in the fixtures/ directory; a fixture
with a matching ``.js`` file must transform to exactly that text.
"""

from pathlib import Path

import pytest

from jsx_compiler.cli import compile_jsx_source
from jsx_compiler.src.common.diagnostics import ProgramDiagnostics
from jsx_compiler.src.emission.printer import JSPrinter
from jsx_compiler.src.lowering.exceptions import JSXTransformError
from jsx_compiler.src.lowering.lowerer import JSXLowerer
from jsx_compiler.src.parsing.parser import JSXParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"
GOLDEN_FIXTURES = sorted(path.stem for path in FIXTURES_DIR.glob("*.js"))


def compile_fixture(fixture_name: str) -> dict:
    """Transform a fixture file and return the artifacts of each stage.

    Args:
        fixture_name: Name of the fixture file (without .jsx extension)

    Returns:
        dict with keys: program, result, code, diagnostics
    """
    filepath = FIXTURES_DIR / f"{fixture_name}.jsx"
    diagnostics = ProgramDiagnostics(log_level="info")

    # Stage 1: Parse
    program = JSXParser().parse_file(filepath)

    # Stage 2: Lower JSX
    result = JSXLowerer(diagnostics=diagnostics).lower_program(program)

    # Stage 3: Print
    code = JSPrinter().print(program)

    return {
        "program": program,
        "result": result,
        "code": code,
        "diagnostics": diagnostics,
    }


class TestGoldenOutput:
    """Fixtures transform to their recorded output."""

    @pytest.mark.parametrize("fixture_name", GOLDEN_FIXTURES)
    def test_matches_golden(self, fixture_name):
        expected = (FIXTURES_DIR / f"{fixture_name}.js").read_text(encoding="utf-8")
        assert compile_fixture(fixture_name)["code"] == expected

    @pytest.mark.parametrize("fixture_name", GOLDEN_FIXTURES)
    def test_compile_jsx_source_agrees(self, fixture_name):
        source = (FIXTURES_DIR / f"{fixture_name}.jsx").read_text(encoding="utf-8")
        success, code, messages = compile_jsx_source(source, f"{fixture_name}.jsx")
        assert success, f"Transform failed: {messages}"
        assert code == compile_fixture(fixture_name)["code"]


class TestStageArtifacts:
    """Per-stage details of the pipeline."""

    def test_merge_props_registers_import(self):
        artifacts = compile_fixture("merge_props")
        helper = artifacts["result"].imports[0]
        assert helper.local == "_mergeJSXProps"
        assert artifacts["program"].body[0].source.value == helper.module

    def test_render_method_diagnostics(self):
        artifacts = compile_fixture("render_method")
        messages = artifacts["diagnostics"].get_messages(
            min_severity=artifacts["diagnostics"].diagnostics[0].severity
        )
        assert len(messages) == 1
        assert "Bound h in renderRow()" in messages[0]
        assert "render_method.jsx:3" in messages[0]

    def test_source_file_reaches_nodes(self):
        artifacts = compile_fixture("render_method")
        assert artifacts["program"].body[0].source_file.endswith("render_method.jsx")

    def test_namespaced_fixture_raises(self):
        with pytest.raises(JSXTransformError) as exc_info:
            compile_fixture("namespaced")
        assert exc_info.value.node.line == 3
        assert exc_info.value.node.namespace.name == "xlink"

    def test_namespaced_fixture_reports_location(self):
        source = (FIXTURES_DIR / "namespaced.jsx").read_text(encoding="utf-8")
        success, result, messages = compile_jsx_source(source, "namespaced.jsx")
        assert not success
        assert result == "JSX transform failed"
        assert messages[0].startswith("ERROR [transform:namespaced.jsx:3:10]:")
        assert "xlinkHref" in messages[0]
