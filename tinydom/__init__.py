"""A small XML node tree, markup scanning helpers and command-line option parsing."""

__version__ = "0.1.0"

__all__ = ["attribute", "nodes", "options", "text"]