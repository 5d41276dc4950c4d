# src/nupy/parser/__init__.py
"""
Parser module for nuPython.
"""

from .parser import Parser, StmtKind, classify_statement, parse

__all__ = ["Parser", "StmtKind", "classify_statement", "parse"]
