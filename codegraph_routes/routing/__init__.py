"""
Route resolution.

Extractor -> Decoder feed the RouteDirector, which calls the title resolver
and lazy reference extractor while walking down; the resolved tree goes to
the renderer.
"""

from .aliases import AliasTable, load_alias_table
from .decoder import RouteDecoder
from .director import ResolutionContext, RouteDirector
from .extractor import DeclarationExtractor
from .lazy_refs import extract_destination_reference, extract_module_reference
from .models import (
    NOT_FOUND,
    LazyDestinationReference,
    LazyModuleReference,
    LoadingStrategy,
    RawRouteLiteral,
    ResolvedNode,
    RouteDeclaration,
    RouteKind,
)
from .renderer import generate_tree_text
from .titles import TitleResolver

__all__ = [
    "AliasTable",
    "load_alias_table",
    "RouteDecoder",
    "RouteDirector",
    "ResolutionContext",
    "DeclarationExtractor",
    "extract_module_reference",
    "extract_destination_reference",
    "NOT_FOUND",
    "LazyModuleReference",
    "LazyDestinationReference",
    "LoadingStrategy",
    "RawRouteLiteral",
    "ResolvedNode",
    "RouteDeclaration",
    "RouteKind",
    "generate_tree_text",
    "TitleResolver",
]
