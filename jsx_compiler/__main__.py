#!/usr/bin/env python3
"""
vuejsx CLI - Entry point for the Vue JSX transform.

This module allows running the transform as:
    python -m jsx_compiler component.jsx
    vuejsx component.jsx  (when installed via pip)
"""

from jsx_compiler.cli import main

if __name__ == "__main__":
    main()
