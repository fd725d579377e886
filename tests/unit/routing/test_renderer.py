"""
Renderer tests.
"""

from codegraph_routes.routing import NOT_FOUND, ResolvedNode, RouteKind, generate_tree_text
from codegraph_routes.routing.renderer import format_node


def node(segment, kind, name, title=None, children=()):
    return ResolvedNode(
        path_segment=segment,
        kind=kind,
        display_name=name,
        full_path=f"/{segment}",
        title=title,
        children=tuple(children),
    )


class TestFormatNode:
    def test_eager_with_title(self):
        assert format_node(node("home", RouteKind.EAGER, "HomeComponent", "Home")) == (
            "/home HomeComponent [eager] (title=Home)"
        )

    def test_missing_title_defaults_to_sentinel(self):
        line = format_node(node("x", RouteKind.LAZY_DESTINATION, "X"))

        assert line == f"/x X [lazy-component] (title={NOT_FOUND})"

    def test_lazy_module_has_no_title(self):
        assert format_node(node("admin", RouteKind.LAZY_MODULE, "./admin/admin.module")) == (
            "/admin ./admin/admin.module [lazy-module]"
        )


class TestGenerateTreeText:
    def test_single_node(self):
        tree = [node("home", RouteKind.EAGER, "HomeComponent", "Home")]

        assert generate_tree_text(tree) == "└─ /home HomeComponent [eager] (title=Home)\n"

    def test_connectors_and_continuations(self):
        tree = [
            node(
                "",
                RouteKind.EAGER,
                "Shell",
                "Shell",
                children=[
                    node("a", RouteKind.EAGER, "A", "A", children=[node("a1", RouteKind.EAGER, "A1", "A1")]),
                    node("b", RouteKind.LAZY_MODULE, "@x/b"),
                ],
            ),
            node("c", RouteKind.EAGER, "C", "C"),
        ]

        assert generate_tree_text(tree) == (
            "├─ / Shell [eager] (title=Shell)\n"
            "│  ├─ /a A [eager] (title=A)\n"
            "│  │  └─ /a1 A1 [eager] (title=A1)\n"
            "│  └─ /b @x/b [lazy-module]\n"
            "└─ /c C [eager] (title=C)\n"
        )

    def test_empty_forest(self):
        assert generate_tree_text([]) == ""
