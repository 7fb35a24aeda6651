"""Syntax tree nodes and an indented tree printer for a small Ada-like language."""

__version__ = "0.1.0"
__all__ = ["nodes", "printer"]