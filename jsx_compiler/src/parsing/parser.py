"""Parser entry point for JavaScript modules containing JSX."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from lark import Lark
from lark.exceptions import LexError, ParseError

from jsx_compiler.src.ast import ASTNode, Program
from .transformer import JSXTransformer


class JSXParser:
    """Main parser class for the JavaScript + JSX subset."""

    def __init__(self, grammar_path: Optional[Path] = None):
        """Initialize parser with grammar file."""
        if grammar_path is None:
            grammar_path = (
                Path(__file__).resolve().parent.parent.parent / "grammar" / "jsx.lark"
            )

        self.grammar_path = grammar_path
        self.parser = None
        self.transformer = JSXTransformer()
        self._load_grammar()

    def _load_grammar(self) -> None:
        """Load and compile the Lark grammar."""
        try:
            with open(self.grammar_path, "r", encoding="utf-8") as handle:
                grammar_text = handle.read()

            self.parser = Lark(
                grammar_text,
                parser="lalr",
                lexer="contextual",
                transformer=self.transformer,
                start="start",
                maybe_placeholders=True,
                debug=False,
            )
        except FileNotFoundError as exc:
            raise FileNotFoundError(
                f"Grammar file not found: {self.grammar_path}"
            ) from exc
        except Exception as exc:  # pragma: no cover - unexpected
            raise RuntimeError(f"Failed to load grammar: {exc}") from exc

    def parse(self, source_code: str, filename: str = "<string>") -> Program:
        """Parse source code into an AST.

        Args:
            source_code: The source code text to parse
            filename: Source file path for error reporting

        Returns:
            Program AST node representing the parsed source

        Raises:
            SyntaxError: If the source code has parse errors
            RuntimeError: If parser is not initialized or unexpected error occurs
        """
        if self.parser is None:
            raise RuntimeError("Parser not initialized")

        try:
            ast = self.parser.parse(source_code)
            self._attach_source_file(ast, filename)

            if not isinstance(ast, Program):
                raise RuntimeError(f"Expected Program AST node, got {type(ast)}")

            return ast

        except (ParseError, LexError) as exc:
            raise SyntaxError(f"Parse error in {filename}: {exc}") from exc
        except SyntaxError as exc:
            raise SyntaxError(f"Parse error in {filename}: {exc}") from exc
        except RuntimeError:
            raise
        except Exception as exc:
            raise RuntimeError(f"Unexpected error parsing {filename}: {exc}") from exc

    def parse_file(self, file_path: Path) -> Program:
        """Parse a source file into an AST."""
        try:
            with open(file_path, "r", encoding="utf-8") as handle:
                source_code = handle.read()
            return self.parse(source_code, str(file_path))
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Source file not found: {file_path}") from exc

    def _attach_source_file(self, node: ASTNode, filename: str) -> None:
        """Recursively annotate AST nodes with their originating filename."""
        if not isinstance(node, ASTNode):
            return

        if filename:
            node.source_file = filename

        for attr in vars(node).values():
            if isinstance(attr, ASTNode):
                self._attach_source_file(attr, filename)
            elif isinstance(attr, list):
                for item in attr:
                    if isinstance(item, ASTNode):
                        self._attach_source_file(item, filename)
