from .printer import JSPrinter, print_program

__all__ = [
    # Main API
    "JSPrinter",
    "print_program",
]
