"""
Title Resolver

Reads the display title of a routed component from its class decorator:

    @FunselPage({ title: 'Home' })
    @FunselPage({ title: `Settings` })
    @FunselPage({ title: DASHBOARD_TITLE })   // const DASHBOARD_TITLE = 'Dashboard';

A bare identifier gets one level of indirection through a top-level string
constant; if no such constant exists the identifier itself is returned.
Template literals are returned as written, substitutions are not evaluated.
"""

from __future__ import annotations

from tree_sitter import Node as TSNode

from codegraph_routes.infra.logging import get_logger
from codegraph_routes.parsing.source_index import ClassDeclaration, SourceIndex, SourceUnit, strip_quotes

logger = get_logger(__name__)

DEFAULT_DECORATOR = "FunselPage"


def decorator_name(unit: SourceUnit, decorator: TSNode) -> str | None:
    """Name of a decorator: `@Foo`, `@Foo(...)` and `@ns.Foo(...)` all give "Foo"."""
    expression = unit.ast.unwrap(next(iter(unit.ast.get_named_children(decorator)), None))
    if expression is not None and expression.type == "call_expression":
        expression = expression.child_by_field_name("function")
    if expression is None:
        return None
    if expression.type == "identifier":
        return unit.text(expression)
    if expression.type == "member_expression":
        return unit.text(expression.child_by_field_name("property"))
    return None


def decorator_arguments(unit: SourceUnit, decorator: TSNode) -> list[TSNode]:
    expression = unit.ast.unwrap(next(iter(unit.ast.get_named_children(decorator)), None))
    if expression is None or expression.type != "call_expression":
        return []
    arguments = expression.child_by_field_name("arguments")
    if arguments is None:
        return []
    return unit.ast.get_named_children(arguments)


def object_member(unit: SourceUnit, obj: TSNode, name: str) -> TSNode | None:
    """Value of the `name: value` pair in an object literal, or None."""
    for member in obj.named_children:
        if member.type != "pair":
            continue
        key = member.child_by_field_name("key")
        if key is None:
            continue
        key_text = unit.text(key)
        if key.type == "string":
            key_text = strip_quotes(key_text)
        if key_text == name:
            return member.child_by_field_name("value")
    return None


class TitleResolver:
    """
    Resolves component titles through the source index.

    Thread-Safety: Safe (reads only the immutable index)
    """

    def __init__(self, index: SourceIndex, decorator: str = DEFAULT_DECORATOR):
        self.index = index
        self.decorator = decorator

    def resolve(self, class_name: str) -> str | None:
        """
        Title of the component class, or None when it cannot be found.

        Args:
            class_name: Exact class name (e.g. "HomeComponent")
        """
        cls_decl = self.index.find_class(class_name)
        if cls_decl is None:
            logger.warning("title_class_not_found", component=class_name)
            return None

        unit = cls_decl.unit
        logger.debug(
            "title_class_found",
            component=class_name,
            file=unit.path,
            decorators=[decorator_name(unit, d) for d in cls_decl.decorators],
        )

        title_node = self._title_node(cls_decl)
        if title_node is None:
            logger.info("title_metadata_missing", component=class_name, decorator=self.decorator)
            return None

        return self._read_title(unit, title_node, class_name)

    def _title_node(self, cls_decl: ClassDeclaration) -> TSNode | None:
        unit = cls_decl.unit
        for decorator in cls_decl.decorators:
            if decorator_name(unit, decorator) != self.decorator:
                continue
            arguments = decorator_arguments(unit, decorator)
            first = unit.ast.unwrap(arguments[0]) if arguments else None
            if first is None or first.type != "object":
                continue
            value = object_member(unit, first, "title")
            if value is not None:
                return unit.ast.unwrap(value)
        return None

    def _read_title(self, unit: SourceUnit, node: TSNode, class_name: str) -> str | None:
        logger.debug("title_initializer", component=class_name, kind=node.type)
        text = unit.text(node)

        if node.type == "string":
            return strip_quotes(text)

        if node.type == "template_string":
            return text[1:-1] if len(text) >= 2 else text

        if node.type == "identifier":
            value = self.index.find_string_constant(text)
            if value is None:
                logger.info("title_constant_unresolved", component=class_name, constant=text)
                return text
            logger.debug("title_constant_resolved", component=class_name, constant=text, value=value)
            return value

        logger.warning("title_initializer_unsupported", component=class_name, kind=node.type)
        return None
