"""Command-driven text buffer with selection and clipboard history."""

__all__ = [
    "actions",
    "buffer",
    "repl",
    "runtime",
]

__version__ = "0.1.0"
