"""Syntax tree, scoped symbol tables and semantic analysis for a small imperative language."""

__version__ = "0.1.0"
__all__ = ["nodes", "semantic", "symbols"]