"""A minimal shell prompt, a pipeline runner, and string, number and formatting helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "textops", "printf", "linereader", "errors", "env", "executor", "shell"]