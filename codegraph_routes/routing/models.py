"""
Route models.

RouteDeclaration is the transient record decoded from one route literal;
ResolvedNode is the durable output tree handed to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tree_sitter import Node as TSNode

from codegraph_routes.parsing.source_index import SourceUnit

NOT_FOUND = "NOT FOUND"
"""Title of an eager/lazy-component route whose metadata could not be located."""

UNKNOWN_NAME = "Unknown"
UNKNOWN_MODULE = "UNKNOWN"


class LoadingStrategy(str, Enum):
    """How a route declaration provides its content."""

    EAGER = "eager"
    LAZY_MODULE = "lazy-module"
    LAZY_DESTINATION = "lazy-component"
    UNKNOWN = "unknown"


class RouteKind(str, Enum):
    """Kind of a resolved node; the value is the tag printed by the renderer."""

    EAGER = "eager"
    LAZY_MODULE = "lazy-module"
    LAZY_DESTINATION = "lazy-component"

    @property
    def has_title(self) -> bool:
        return self is not RouteKind.LAZY_MODULE


@dataclass(frozen=True, slots=True)
class RawRouteLiteral:
    """An object literal found in a routes array, not yet interpreted."""

    unit: SourceUnit
    node: TSNode


@dataclass(slots=True)
class RouteDeclaration:
    """
    One decoded route literal.

    At most one of handler_reference / module_reference / destination_reference
    is meaningful: the one matching `loading_strategy`. If a literal sets more
    than one loading member the last one written decides the strategy.
    """

    path_segment: str = ""
    loading_strategy: LoadingStrategy = LoadingStrategy.UNKNOWN
    handler_reference: str | None = None
    module_reference: str | None = None
    destination_reference: str | None = None
    children: list[RouteDeclaration] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class LazyModuleReference:
    """Module specifier taken from `loadChildren: () => import('...')`."""

    specifier: str


@dataclass(frozen=True, slots=True)
class LazyDestinationReference:
    """Module specifier and export taken from `loadComponent`."""

    specifier: str
    export_name: str


@dataclass(frozen=True, slots=True)
class ResolvedNode:
    """
    A node of the resolved route tree.

    Attributes:
        path_segment: Segment as declared (may be empty)
        kind: Loading kind of the route
        display_name: Component class name, module specifier, or "Unknown"
        title: Resolved title or NOT_FOUND; None only for lazy modules
        full_path: Parent path + "/" + segment; lazy-module children share it
        children: Child nodes in declaration order
    """

    path_segment: str
    kind: RouteKind
    display_name: str
    full_path: str
    title: str | None = None
    children: tuple[ResolvedNode, ...] = ()

    def walk(self):
        """Yield this node and all descendants in depth-first order."""
        yield self
        for child in self.children:
            yield from child.walk()
