"""
Route Director

Recursive resolution of the application's route configuration into a tree
of ResolvedNode, starting at the root routing unit.

Lazy modules are followed into the units that declare their routes:

    @alias/path   -> alias table -> directory of first candidate
    ./relative    -> directory of <current unit dir>/<ref>.ts

and, inside that directory, the first of these patterns that matches:

    *-routing.module.ts, *.routes.ts, lib/*-routing.module.ts, lib/*.routes.ts

falling back to the barrel `index.ts`. Nothing here raises for missing
files, aliases or titles; each is logged and the branch resolves empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath

from codegraph_routes.infra.logging import get_logger
from codegraph_routes.parsing.source_file import normalize_unit_path
from codegraph_routes.parsing.source_index import SourceIndex, SourceUnit
from codegraph_routes.routing.aliases import AliasTable
from codegraph_routes.routing.decoder import RouteDecoder
from codegraph_routes.routing.extractor import DeclarationExtractor
from codegraph_routes.routing.lazy_refs import extract_destination_reference, extract_module_reference
from codegraph_routes.routing.models import (
    NOT_FOUND,
    UNKNOWN_MODULE,
    UNKNOWN_NAME,
    LoadingStrategy,
    ResolvedNode,
    RouteDeclaration,
    RouteKind,
)
from codegraph_routes.routing.titles import TitleResolver

logger = get_logger(__name__)

DEFAULT_ENTRY_FILE = "apps/funsel/src/app/app-routing.module.ts"

ALIAS_SIGIL = "@"
RELATIVE_PREFIXES = ("./", "../")

# (subdirectory, file name pattern), tried in order; the first that matches wins
ROUTING_FILE_PATTERNS: tuple[tuple[str, str], ...] = (
    ("", "*-routing.module.ts"),
    ("", "*.routes.ts"),
    ("lib", "*-routing.module.ts"),
    ("lib", "*.routes.ts"),
)
BARREL_FILE = "index.ts"


def join_path(parent_path: str, segment: str) -> str:
    """Full path of a route: parent + "/" + segment (empty segments keep the slash)."""
    return f"{parent_path}/{segment}"


@dataclass
class ResolutionContext:
    """
    Per-run state, threaded through the recursion.

    Attributes:
        visited: Module references already expanded in this run
    """

    visited: set[str] = field(default_factory=set)


class RouteDirector:
    """
    Orchestrates extractor, decoder, lazy reference extraction and title
    lookup over a read-only SourceIndex.

    Each call to process_routing_modules() is an independent run with its own
    cycle guard, so repeated runs over the same index give identical trees.
    """

    def __init__(
        self,
        index: SourceIndex,
        aliases: AliasTable | None = None,
        titles: TitleResolver | None = None,
        entry_file: str = DEFAULT_ENTRY_FILE,
    ):
        self.index = index
        self.aliases = aliases or AliasTable()
        self.titles = titles or TitleResolver(index)
        self.entry_file = entry_file
        self.extractor = DeclarationExtractor(index)
        self.decoder = RouteDecoder()

    def process_routing_modules(self) -> list[ResolvedNode]:
        """Resolve the full route tree from the entry unit."""
        logger.info("routing_resolution_started", entry=self.entry_file)
        return self._expand_unit(
            normalize_unit_path(self.entry_file), parent_path="", depth=0, context=ResolutionContext()
        )

    # ------------------------------------------------------------------
    # Route dispatch
    # ------------------------------------------------------------------

    def _expand_unit(self, unit_path: str, parent_path: str, depth: int, context: ResolutionContext) -> list[ResolvedNode]:
        return [
            self._handle_route(self.decoder.decode(literal), parent_path, depth, unit_path, context)
            for literal in self.extractor.extract(unit_path)
        ]

    def _handle_route(
        self,
        route: RouteDeclaration,
        parent_path: str,
        depth: int,
        current_unit: str,
        context: ResolutionContext,
    ) -> ResolvedNode:
        full_path = join_path(parent_path, route.path_segment)

        handler = {
            LoadingStrategy.EAGER: self._handle_eager,
            LoadingStrategy.LAZY_MODULE: self._handle_lazy_module,
            LoadingStrategy.LAZY_DESTINATION: self._handle_lazy_destination,
        }.get(route.loading_strategy, self._handle_unknown)
        return handler(route, full_path, depth, current_unit, context)

    def _expand_children(
        self,
        route: RouteDeclaration,
        full_path: str,
        depth: int,
        current_unit: str,
        context: ResolutionContext,
    ) -> tuple[ResolvedNode, ...]:
        return tuple(self._handle_route(child, full_path, depth + 1, current_unit, context) for child in route.children)

    def _handle_eager(self, route, full_path, depth, current_unit, context) -> ResolvedNode:
        component = route.handler_reference or ""
        title = self._resolve_title(component, full_path, depth)
        logger.info("route_eager", depth=depth, path=full_path, component=component, title=title)
        return ResolvedNode(
            path_segment=route.path_segment,
            kind=RouteKind.EAGER,
            display_name=component,
            full_path=full_path,
            title=title,
            children=self._expand_children(route, full_path, depth, current_unit, context),
        )

    def _handle_lazy_destination(self, route, full_path, depth, current_unit, context) -> ResolvedNode:
        reference = extract_destination_reference(route.destination_reference or "")
        if reference is None:
            logger.warning("route_lazy_component_unresolved", depth=depth, path=full_path)
            return ResolvedNode(
                path_segment=route.path_segment,
                kind=RouteKind.EAGER,
                display_name=UNKNOWN_NAME,
                full_path=full_path,
                title=NOT_FOUND,
            )

        title = self._resolve_title(reference.export_name, full_path, depth)
        logger.info(
            "route_lazy_component",
            depth=depth,
            path=full_path,
            component=reference.export_name,
            module=reference.specifier,
            title=title,
        )
        return ResolvedNode(
            path_segment=route.path_segment,
            kind=RouteKind.LAZY_DESTINATION,
            display_name=reference.export_name,
            full_path=full_path,
            title=title,
            children=self._expand_children(route, full_path, depth, current_unit, context),
        )

    def _handle_unknown(self, route, full_path, depth, current_unit, context) -> ResolvedNode:
        logger.info("route_unknown", depth=depth, path=full_path)
        return ResolvedNode(
            path_segment=route.path_segment,
            kind=RouteKind.EAGER,
            display_name=UNKNOWN_NAME,
            full_path=full_path,
            title=NOT_FOUND,
            children=self._expand_children(route, full_path, depth, current_unit, context),
        )

    def _resolve_title(self, component: str, full_path: str, depth: int) -> str:
        title = self.titles.resolve(component)
        if title is None:
            logger.warning("title_not_found", depth=depth, path=full_path, component=component)
            return NOT_FOUND
        return title

    # ------------------------------------------------------------------
    # Lazy modules
    # ------------------------------------------------------------------

    def _handle_lazy_module(self, route, full_path, depth, current_unit, context) -> ResolvedNode:
        reference = extract_module_reference(route.module_reference or "")
        specifier = reference.specifier if reference is not None else UNKNOWN_MODULE
        logger.info("route_lazy_module", depth=depth, path=full_path, module=specifier)

        children: tuple[ResolvedNode, ...] = ()
        if specifier.startswith(ALIAS_SIGIL):
            children = self._expand_alias_module(specifier, full_path, depth + 1, context)
        elif specifier.startswith(RELATIVE_PREFIXES):
            children = self._expand_relative_module(specifier, full_path, depth + 1, current_unit, context)
        else:
            logger.warning("module_reference_unrecognized", depth=depth, path=full_path, module=specifier)

        return ResolvedNode(
            path_segment=route.path_segment,
            kind=RouteKind.LAZY_MODULE,
            display_name=specifier,
            full_path=full_path,
            children=children,
        )

    def _enter_module(self, key: str, depth: int, context: ResolutionContext) -> bool:
        """Record a module reference as visited; False if this run already expanded it."""
        if key in context.visited:
            logger.warning("module_cycle_skipped", depth=depth, module=key)
            return False
        context.visited.add(key)
        return True

    def _expand_alias_module(
        self, alias: str, parent_path: str, depth: int, context: ResolutionContext
    ) -> tuple[ResolvedNode, ...]:
        logger.debug("alias_lookup", depth=depth, alias=alias)
        if not self._enter_module(alias, depth, context):
            return ()

        base_dir = self.aliases.base_directory(alias)
        if base_dir is None:
            logger.warning("alias_not_found", depth=depth, alias=alias)
            return ()
        return self._expand_routing_directory(base_dir, parent_path, depth, context)

    def _expand_relative_module(
        self,
        specifier: str,
        parent_path: str,
        depth: int,
        current_unit: str,
        context: ResolutionContext,
    ) -> tuple[ResolvedNode, ...]:
        current_dir = PurePosixPath(current_unit).parent
        module_key = normalize_unit_path(current_dir / specifier)
        if not self._enter_module(module_key, depth, context):
            return ()

        module_file = module_key if module_key.endswith(".ts") else f"{module_key}.ts"
        logger.debug("relative_lookup", depth=depth, module_file=module_file)
        if module_file not in self.index:
            logger.warning("module_unit_not_found", depth=depth, module_file=module_file)
            return ()

        parent = PurePosixPath(module_file).parent.as_posix()
        base_dir = "" if parent == "." else parent
        return self._expand_routing_directory(base_dir, parent_path, depth, context)

    def _expand_routing_directory(
        self, base_dir: str, parent_path: str, depth: int, context: ResolutionContext
    ) -> tuple[ResolvedNode, ...]:
        units = self.locate_routing_units(base_dir, depth)
        if not units:
            logger.error("routing_files_not_found", depth=depth, directory=base_dir)
            return ()

        # Module references do not add a path segment of their own
        nodes: list[ResolvedNode] = []
        for unit in units:
            nodes.extend(self._expand_unit(unit.path, parent_path, depth + 1, context))
        return tuple(nodes)

    def locate_routing_units(self, base_dir: str, depth: int = 0) -> list[SourceUnit]:
        """
        Routing units of a module directory: first matching pattern, else the barrel.

        Args:
            base_dir: Workspace-relative module directory
            depth: Recursion depth, for diagnostics only
        """
        for subdir, pattern in ROUTING_FILE_PATTERNS:
            directory = normalize_unit_path(PurePosixPath(base_dir or ".") / subdir) if subdir else base_dir
            logger.debug("routing_file_glob", depth=depth, directory=directory, pattern=pattern)
            units = self.index.glob(directory, pattern)
            if units:
                return units

        barrel = normalize_unit_path(PurePosixPath(base_dir or ".") / BARREL_FILE)
        unit = self.index.get_unit(barrel)
        if unit is not None:
            logger.info("routing_barrel_used", depth=depth, file=barrel)
            return [unit]
        return []
