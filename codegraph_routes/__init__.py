"""
CodeGraph Routes

Static resolution of a TypeScript application's declarative route
configuration into a tree of routes with their component titles.
No code from the target workspace is executed.
"""

__version__ = "0.1.0"

from .parsing import SourceFile, SourceIndex
from .routing import (
    NOT_FOUND,
    AliasTable,
    ResolvedNode,
    RouteDirector,
    RouteKind,
    TitleResolver,
    generate_tree_text,
    load_alias_table,
)

__all__ = [
    "SourceFile",
    "SourceIndex",
    "NOT_FOUND",
    "AliasTable",
    "ResolvedNode",
    "RouteDirector",
    "RouteKind",
    "TitleResolver",
    "generate_tree_text",
    "load_alias_table",
]
