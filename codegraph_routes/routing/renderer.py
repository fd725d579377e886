"""
Route tree renderer.

    ├─ / AppShellComponent [eager] (title=Home)
    │  └─ /settings @funsel/settings [lazy-module]
    └─ /admin ./admin/admin.module [lazy-module]
"""

from __future__ import annotations

from collections.abc import Sequence

from codegraph_routes.routing.models import NOT_FOUND, ResolvedNode

BRANCH = "├─ "
LAST_BRANCH = "└─ "
PIPE = "│  "
SPACE = "   "


def format_node(node: ResolvedNode) -> str:
    """One line for a node: segment, name, kind tag and, where it applies, the title."""
    line = f"/{node.path_segment} {node.display_name} [{node.kind.value}]"
    if node.kind.has_title:
        line += f" (title={node.title if node.title is not None else NOT_FOUND})"
    return line


def generate_tree_text(nodes: Sequence[ResolvedNode], prefix: str = "") -> str:
    """Render a forest as connector-drawn text, one newline-terminated line per node."""
    out: list[str] = []
    for i, node in enumerate(nodes):
        last = i == len(nodes) - 1
        out.append(f"{prefix}{LAST_BRANCH if last else BRANCH}{format_node(node)}\n")
        if node.children:
            out.append(generate_tree_text(node.children, prefix + (SPACE if last else PIPE)))
    return "".join(out)
