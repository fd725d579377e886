"""
Parsing Layer

Tree-sitter based parsing of the TypeScript workspace.

Components:
- parser_registry: TypeScript/TSX parser management
- source_file: Source file representation
- ast_tree: AST tree wrapper with convenient traversal methods
- source_index: Parsed-unit snapshot with class/constant name indexes
"""

from .ast_tree import AstTree
from .parser_registry import ParserRegistry, get_registry
from .source_file import SourceFile, normalize_unit_path
from .source_index import ClassDeclaration, SourceIndex, SourceUnit, VariableDeclaration, strip_quotes

__all__ = [
    "ParserRegistry",
    "get_registry",
    "SourceFile",
    "normalize_unit_path",
    "AstTree",
    "SourceIndex",
    "SourceUnit",
    "ClassDeclaration",
    "VariableDeclaration",
    "strip_quotes",
]
