"""
codegraph-routes CLI

Prints the resolved route tree of the workspace in the current directory.
All paths are workspace conventions (see infra.config); there are no
required arguments.

Examples:
    codegraph-routes
    CODEGRAPH_ROUTES_WORKSPACE__ENTRY_FILE=src/app/app.routes.ts codegraph-routes
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from codegraph_routes.infra.config import RouteMapSettings, get_settings
from codegraph_routes.infra.logging import get_logger, setup_logging
from codegraph_routes.parsing import SourceIndex
from codegraph_routes.routing import ResolvedNode, RouteDirector, TitleResolver, generate_tree_text, load_alias_table

app = typer.Typer(name="codegraph-routes", help="Static route tree of a TypeScript workspace", add_completion=False)
err_console = Console(stderr=True)

logger = get_logger(__name__)


def build_route_tree(settings: RouteMapSettings) -> list[ResolvedNode]:
    """
    Index the workspace and resolve its route tree.

    Args:
        settings: Workspace, title and logging conventions

    Returns:
        Resolved forest rooted at the entry unit's routes
    """
    workspace = settings.workspace
    root = Path(workspace.root)

    index = SourceIndex.from_workspace(root, workspace.source_globs)
    aliases = load_alias_table(root / workspace.alias_config_file)
    director = RouteDirector(
        index,
        aliases,
        titles=TitleResolver(index, decorator=settings.title.decorator_name),
        entry_file=workspace.entry_file,
    )
    return director.process_routing_modules()


@app.command()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level"),
):
    """
    Resolve and print the route tree.

    Diagnostics go to stderr, the tree to stdout.
    """
    settings = get_settings()
    setup_logging(level=log_level or settings.logging.level, format=settings.logging.format)

    try:
        tree = build_route_tree(settings)
    except Exception as e:
        logger.exception("route_resolution_failed")
        err_console.print(f"[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)

    typer.echo("Generated route tree:\n")
    typer.echo(generate_tree_text(tree), nl=False)


if __name__ == "__main__":
    app()
