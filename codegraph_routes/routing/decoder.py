"""
Route Decoder

Turns one route object literal into a RouteDeclaration.
"""

from __future__ import annotations

from tree_sitter import Node as TSNode

from codegraph_routes.parsing.source_index import SourceUnit, strip_quotes
from codegraph_routes.routing.models import LoadingStrategy, RawRouteLiteral, RouteDeclaration

LITERAL_NODE_TYPES = frozenset(["string", "template_string"])

# member name -> (strategy, RouteDeclaration attribute holding the raw expression)
LOADING_MEMBERS: dict[str, tuple[LoadingStrategy, str]] = {
    "component": (LoadingStrategy.EAGER, "handler_reference"),
    "loadChildren": (LoadingStrategy.LAZY_MODULE, "module_reference"),
    "loadComponent": (LoadingStrategy.LAZY_DESTINATION, "destination_reference"),
}


def segment_from_dotted_access(text: str) -> str:
    """
    Derive a path segment from an enum-like constant such as `AppRoute.USER_PROFILE`.

    The second dotted component is lower-cased with underscores turned into
    hyphens ("user-profile"). Text without a dot is returned unquoted.
    """
    parts = text.split(".")
    if len(parts) < 2:
        return strip_quotes(text)
    return parts[1].strip().lower().replace("_", "-")


class RouteDecoder:
    """Decodes route literals. Unrecognized members are ignored."""

    def decode(self, literal: RawRouteLiteral) -> RouteDeclaration:
        return self._decode_object(literal.unit, literal.node)

    def _decode_object(self, unit: SourceUnit, obj: TSNode) -> RouteDeclaration:
        route = RouteDeclaration()

        for member in obj.named_children:
            if member.type != "pair":
                continue
            name = self._member_name(unit, member.child_by_field_name("key"))
            value = unit.ast.unwrap(member.child_by_field_name("value"))
            if name is None or value is None:
                continue

            if name == "path":
                route.path_segment = self._decode_path(unit, value)
            elif name in LOADING_MEMBERS:
                strategy, attribute = LOADING_MEMBERS[name]
                route.handler_reference = None
                route.module_reference = None
                route.destination_reference = None
                setattr(route, attribute, unit.text(value))
                route.loading_strategy = strategy
            elif name == "children" and value.type == "array":
                route.children = [
                    self._decode_object(unit, child) for child in value.named_children if child.type == "object"
                ]

        return route

    @staticmethod
    def _member_name(unit: SourceUnit, key: TSNode | None) -> str | None:
        if key is None:
            return None
        if key.type == "property_identifier":
            return unit.text(key)
        if key.type == "string":
            return strip_quotes(unit.text(key))
        return None

    @staticmethod
    def _decode_path(unit: SourceUnit, value: TSNode) -> str:
        text = unit.text(value)
        if value.type in LITERAL_NODE_TYPES:
            return strip_quotes(text)
        return segment_from_dotted_access(text)
