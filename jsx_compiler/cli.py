#!/usr/bin/env python3
"""
vuejsx CLI - Command-line interface for the Vue JSX transform.

This module provides the entry point for the 'vuejsx' command installed via pip.

Usage:
    vuejsx component.jsx                       # Transform a file to stdout
    vuejsx --input "<div>hi</div>"             # Transform a string
    vuejsx component.jsx -o component.js       # Save the output to a file
    vuejsx component.jsx --no-inject-h         # Do not bind h in methods
    vuejsx component.jsx --merge-helper vue-merge-props
"""

import logging
import sys
from pathlib import Path

import click

from jsx_compiler.src.common.constants import DEFAULT_CONFIG, TransformConfig
from jsx_compiler.src.common.diagnostics import ProgramDiagnostics
from jsx_compiler.src.emission.printer import JSPrinter
from jsx_compiler.src.lowering.exceptions import JSXTransformError
from jsx_compiler.src.lowering.lowerer import JSXLowerer
from jsx_compiler.src.parsing.parser import JSXParser


def compile_jsx_source(
    source_code: str,
    source_name: str = "<string>",
    config: TransformConfig = DEFAULT_CONFIG,
    log_level: str = "error",
    pretty_calls: bool = True,
) -> tuple[bool, str, list]:
    """
    Transform JavaScript + JSX source code into plain JavaScript.

    Args:
        source_code: The component source to transform
        source_name: Name of the source (for error messages)
        config: Transform configuration settings
        log_level: Logging verbosity level
        pretty_calls: Put each argument of a three-argument h() call on its own line

    Returns:
        (success: bool, result: str, diagnostics: list)
    """
    diagnostics = ProgramDiagnostics(log_level=log_level)

    # Parse
    parser = JSXParser()
    try:
        program = parser.parse(source_code, source_name)
    except SyntaxError as e:
        diagnostics.error(str(e), stage="parsing", source_file=source_name)
        return False, "Parsing failed", diagnostics.get_messages()

    # Lower JSX
    lowerer = JSXLowerer(config, diagnostics)
    try:
        lowerer.lower_program(program)
    except JSXTransformError as e:
        diagnostics.error(e.message, stage="transform", node=e.node)
        return False, "JSX transform failed", diagnostics.get_messages()

    # Print
    code = JSPrinter(pretty_calls=pretty_calls).print(program)
    if diagnostics.has_errors():
        return False, "Code emission failed", diagnostics.get_messages()

    return True, code, diagnostics.get_messages()


def setup_logging(level: str) -> None:
    """Setup logging configuration."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    logging.basicConfig(level=numeric_level, format="%(levelname)s: %(message)s")


@click.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path), required=False)
@click.option(
    "-i",
    "--input",
    "input_string",
    type=str,
    help="Transform a string instead of a file",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output file for the generated code (default: stdout)",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    help="Set the logging level",
)
@click.option(
    "--no-custom-tag",
    is_flag=True,
    help=f"Treat <{DEFAULT_CONFIG.custom_tag}> as an ordinary tag",
)
@click.option("--no-inject-h", is_flag=True, help="Do not bind h inside component methods")
@click.option(
    "--merge-helper",
    type=str,
    default=DEFAULT_CONFIG.merge_helper_module,
    show_default=True,
    help="Module whose default export merges spread props",
)
@click.option("--compact", is_flag=True, help="Print every h() call on a single line")
def main(
    input_file,
    input_string,
    output,
    log_level,
    no_custom_tag,
    no_inject_h,
    merge_helper,
    compact,
):
    """Transform Vue JSX source files or strings into h() calls."""
    setup_logging(log_level)

    # Validate input source
    if input_file and input_string:
        click.echo("Error: Cannot specify both input file and --input string", err=True)
        sys.exit(1)

    if not input_file and not input_string:
        click.echo("Error: Must specify either an input file or --input string", err=True)
        sys.exit(1)

    # Read source code
    if input_string:
        source_code = input_string
        source_name = "<string>"
        if log_level in ["debug", "info"]:
            click.echo("Transforming string input...", err=True)
    else:
        try:
            source_code = input_file.read_text(encoding="utf-8")
            source_name = str(input_file.resolve())
            if log_level in ["debug", "info"]:
                click.echo(f"Transforming {input_file}...", err=True)
        except Exception as e:
            click.echo(f"Failed to read input file: {e}", err=True)
            sys.exit(1)

    config = DEFAULT_CONFIG.with_options(
        custom_tag=None if no_custom_tag else DEFAULT_CONFIG.custom_tag,
        inject_render_context=not no_inject_h,
        merge_helper_module=merge_helper,
    )

    # Transform
    success, result, diagnostic_messages = compile_jsx_source(
        source_code,
        source_name=source_name,
        config=config,
        log_level=log_level,
        pretty_calls=not compact,
    )
    verbose = log_level in ["debug", "info"]

    if not success:
        click.echo(f"Compilation failed: {result}", err=True)
        for message in diagnostic_messages:
            click.echo(message, err=True)
        sys.exit(1)

    # Output code
    if output:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(result, encoding="utf-8")
            if verbose:
                click.echo(f"Output saved to {output}", err=True)
        except Exception as e:
            click.echo(f"Failed to write output file: {e}", err=True)
            sys.exit(1)
    else:
        click.echo(result, nl=False)

    if verbose:
        msg_count = len(diagnostic_messages) if diagnostic_messages else 0
        msg = (
            f"Transform completed with {msg_count} diagnostic(s)."
            if msg_count
            else "Transform completed successfully."
        )
        click.echo(msg, err=True)


if __name__ == "__main__":
    main()
