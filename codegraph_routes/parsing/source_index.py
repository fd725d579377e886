"""
Source Index

Read-only snapshot of every parsed TypeScript unit in the workspace, plus
name indexes for top-level classes and variables. Built once at start-up
and never mutated during a resolution run.

Lookups keep "first unit wins" semantics: units are ordered by normalized
path, and the first unit declaring a name is the one returned.
"""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from tree_sitter import Node as TSNode

from codegraph_routes.exceptions import RouteMapError
from codegraph_routes.infra.logging import get_logger
from codegraph_routes.parsing.ast_tree import AstTree
from codegraph_routes.parsing.parser_registry import get_registry
from codegraph_routes.parsing.source_file import SourceFile, normalize_unit_path

logger = get_logger(__name__)

CLASS_NODE_TYPES = frozenset(["class_declaration", "abstract_class_declaration"])
VARIABLE_STATEMENT_TYPES = frozenset(["lexical_declaration", "variable_declaration"])


@dataclass(frozen=True, slots=True)
class ClassDeclaration:
    """A top-level class and the decorators attached to it."""

    name: str
    unit: SourceUnit
    node: TSNode
    decorators: tuple[TSNode, ...] = ()


@dataclass(frozen=True, slots=True)
class VariableDeclaration:
    """A top-level `const`/`let`/`var` declarator."""

    name: str
    unit: SourceUnit
    node: TSNode
    value: TSNode | None


@dataclass(slots=True)
class SourceUnit:
    """A parsed source file."""

    source: SourceFile
    ast: AstTree

    @classmethod
    def parse(cls, source: SourceFile) -> SourceUnit:
        ast = AstTree.parse(source)
        if ast.has_error():
            logger.warning(
                "parse_errors",
                file=source.file_path,
                error_count=len(ast.get_errors()),
            )
        return cls(source=source, ast=ast)

    @property
    def path(self) -> str:
        return self.source.file_path

    def text(self, node: TSNode | None) -> str:
        return self.ast.get_text(node)

    def top_level_statements(self) -> Iterator[tuple[TSNode, tuple[TSNode, ...]]]:
        """
        Yield each top-level declaration with the decorators written before it.

        `export` and `export default` wrappers are looked through; decorators
        placed in front of `export` belong to the exported declaration.
        """
        for statement in self.ast.get_named_children(self.ast.root):
            if statement.type != "export_statement":
                yield statement, ()
                continue

            decorators = tuple(c for c in statement.children if c.type == "decorator")
            for child in self.ast.get_named_children(statement):
                if child.type in CLASS_NODE_TYPES or child.type in VARIABLE_STATEMENT_TYPES:
                    yield child, decorators

    def classes(self) -> Iterator[ClassDeclaration]:
        for statement, outer_decorators in self.top_level_statements():
            if statement.type not in CLASS_NODE_TYPES:
                continue
            name_node = statement.child_by_field_name("name")
            if name_node is None:
                continue
            own_decorators = tuple(c for c in statement.children if c.type == "decorator")
            yield ClassDeclaration(
                name=self.text(name_node),
                unit=self,
                node=statement,
                decorators=outer_decorators + own_decorators,
            )

    def variables(self) -> Iterator[VariableDeclaration]:
        for statement, _ in self.top_level_statements():
            if statement.type not in VARIABLE_STATEMENT_TYPES:
                continue
            for declarator in statement.named_children:
                if declarator.type != "variable_declarator":
                    continue
                name_node = declarator.child_by_field_name("name")
                # Destructuring patterns have no single name
                if name_node is None or name_node.type != "identifier":
                    continue
                yield VariableDeclaration(
                    name=self.text(name_node),
                    unit=self,
                    node=declarator,
                    value=self.ast.unwrap(declarator.child_by_field_name("value")),
                )


@dataclass
class SourceIndex:
    """
    Parsed-source-unit index.

    Attributes:
        root: Workspace root the unit paths are relative to
    """

    root: Path = field(default_factory=lambda: Path("."))
    _units: dict[str, SourceUnit] = field(default_factory=dict, init=False, repr=False)
    _classes: dict[str, ClassDeclaration] = field(default_factory=dict, init=False, repr=False)
    _variables: dict[str, list[VariableDeclaration]] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def from_sources(cls, sources: Iterable[SourceFile], root: str | Path = ".") -> SourceIndex:
        """Build an index from already-loaded sources (in-memory workspaces, tests)."""
        index = cls(root=Path(root))
        units = [SourceUnit.parse(source) for source in sources]
        for unit in sorted(units, key=lambda u: u.path):
            index._units.setdefault(unit.path, unit)
        index._build_name_indexes()
        return index

    @classmethod
    def from_workspace(cls, root: str | Path, globs: Iterable[str]) -> SourceIndex:
        """
        Load and parse every TypeScript file matching the given globs.

        Args:
            root: Workspace root
            globs: Glob patterns relative to the root (e.g. "libs/**/*.ts")

        Returns:
            SourceIndex over all matching files
        """
        root = Path(root)
        registry = get_registry()
        seen: set[Path] = set()
        sources: list[SourceFile] = []

        for pattern in globs:
            for path in sorted(root.glob(pattern)):
                if path in seen or not path.is_file():
                    continue
                seen.add(path)
                if registry.detect_language(path) is None:
                    continue
                try:
                    sources.append(SourceFile.from_file(path.relative_to(root), root))
                except (OSError, UnicodeDecodeError, RouteMapError) as e:
                    logger.warning("source_unreadable", file=str(path), error=str(e))

        index = cls.from_sources(sources, root=root)
        logger.info("source_index_built", root=str(root), units=len(index))
        return index

    def _build_name_indexes(self) -> None:
        for unit in self._units.values():
            for cls_decl in unit.classes():
                self._classes.setdefault(cls_decl.name, cls_decl)
            for var_decl in unit.variables():
                self._variables.setdefault(var_decl.name, []).append(var_decl)

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, path: str) -> bool:
        return normalize_unit_path(path) in self._units

    def units(self) -> list[SourceUnit]:
        """All units in index order."""
        return list(self._units.values())

    def get_unit(self, path: str) -> SourceUnit | None:
        """Look up a unit by workspace-relative path."""
        return self._units.get(normalize_unit_path(path))

    def glob(self, directory: str, filename_pattern: str) -> list[SourceUnit]:
        """
        Units directly inside `directory` whose file name matches the pattern.

        `*` never crosses a directory separator.
        """
        directory = normalize_unit_path(directory)
        matches = []
        for path, unit in self._units.items():
            posix = PurePosixPath(path)
            parent = posix.parent.as_posix()
            if (parent if parent != "." else "") != directory:
                continue
            if fnmatch.fnmatchcase(posix.name, filename_pattern):
                matches.append(unit)
        return matches

    def find_class(self, name: str) -> ClassDeclaration | None:
        """First top-level class declaration with this exact name."""
        return self._classes.get(name)

    def find_variables(self, name: str) -> list[VariableDeclaration]:
        """Every top-level variable declarator with this name, in index order."""
        return list(self._variables.get(name, ()))

    def find_string_constant(self, name: str) -> str | None:
        """
        Value of the first top-level constant with this name initialized by a string literal.

        Returns:
            The literal text without its surrounding quotes, or None
        """
        for var_decl in self._variables.get(name, ()):
            if var_decl.value is not None and var_decl.value.type == "string":
                return strip_quotes(var_decl.unit.text(var_decl.value))
        return None


def strip_quotes(text: str) -> str:
    """Remove one pair of enclosing quote characters (', " or `)."""
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"`":
        return text[1:-1]
    return text
