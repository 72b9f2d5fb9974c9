from .parser import JSXParser
from .transformer import JSXTransformer

"""Parsing module for JavaScript modules containing JSX."""


__all__ = ["JSXParser", "JSXTransformer"]
