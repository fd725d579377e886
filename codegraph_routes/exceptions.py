"""
Custom exceptions for codegraph-routes.

Route resolution itself never raises for missing units, aliases, routing
files or titles; those are logged and resolution continues. The exceptions
below cover the parser provider, where a failure means the workspace cannot
be read at all.

Hierarchy:
- RouteMapError (base)
  - UnsupportedLanguageError (no grammar for a file/language)
  - ParseError (tree-sitter produced no tree)
"""

from __future__ import annotations


class RouteMapError(Exception):
    """Base exception for all codegraph-routes errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{super().__str__()} [{ctx_str}]"
        return super().__str__()


class UnsupportedLanguageError(RouteMapError, ValueError):
    """No tree-sitter grammar is registered for the requested language."""

    def __init__(self, language: str, file_path: str | None = None):
        context = {"language": language}
        if file_path:
            context["file"] = file_path
        super().__init__("Language not supported", context)
        self.language = language
        self.file_path = file_path


class ParseError(RouteMapError):
    """Tree-sitter failed to produce a syntax tree."""

    def __init__(self, file_path: str):
        super().__init__("Failed to parse file", {"file": file_path})
        self.file_path = file_path
