"""A small command shell with environment and alias builtins, command chaining and history."""

__version__ = "0.1.0"
__all__ = ["aliases", "chain", "environment", "history", "pathsearch", "shell", "text"]