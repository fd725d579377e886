"""
Alias Table

`compilerOptions.paths` of the workspace's TypeScript base config:

    {"compilerOptions": {"baseUrl": ".", "paths": {"@funsel/admin": ["libs/admin/src/index.ts"]}}}

Only the first candidate of an alias is ever used.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from codegraph_routes.infra.logging import get_logger
from codegraph_routes.parsing.source_file import normalize_unit_path

logger = get_logger(__name__)

# Strings are matched first so comment markers inside them survive.
_JSONC_TOKENS = re.compile(r'("(?:\\.|[^"\\])*")|(//[^\n]*)|(/\*[\s\S]*?\*/)')
_TRAILING_COMMA = re.compile(r'("(?:\\.|[^"\\])*")|,(\s*[}\]])')


def strip_jsonc(text: str) -> str:
    """Remove comments and trailing commas from a tsconfig-style document."""
    text = _JSONC_TOKENS.sub(lambda m: m.group(1) or "", text)
    return _TRAILING_COMMA.sub(lambda m: m.group(1) or m.group(2), text)


@dataclass(frozen=True)
class AliasTable:
    """
    Read-only alias → candidate paths mapping.

    Attributes:
        paths: Alias to ordered candidate path patterns
        base_url: compilerOptions.baseUrl, relative to the workspace root
    """

    paths: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    base_url: str = ""

    @classmethod
    def from_compiler_options(cls, options: Mapping) -> AliasTable:
        raw_paths = options.get("paths") or {}
        paths: dict[str, tuple[str, ...]] = {}
        for alias, candidates in raw_paths.items():
            if isinstance(candidates, str):
                paths[alias] = (candidates,)
            elif isinstance(candidates, list):
                paths[alias] = tuple(str(c) for c in candidates)
        base_url = options.get("baseUrl") or ""
        return cls(paths=paths, base_url=normalize_unit_path(str(base_url)))

    def __contains__(self, alias: str) -> bool:
        return alias in self.paths

    def __len__(self) -> int:
        return len(self.paths)

    def first_candidate(self, alias: str) -> str | None:
        """First candidate of the alias, joined onto baseUrl, or None."""
        candidates = self.paths.get(alias)
        if not candidates:
            return None
        return normalize_unit_path(PurePosixPath(self.base_url or ".") / candidates[0])

    def base_directory(self, alias: str) -> str | None:
        """Directory of the alias's first candidate ("libs/admin/src" for ".../src/index.ts")."""
        candidate = self.first_candidate(alias)
        if candidate is None:
            return None
        parent = PurePosixPath(candidate).parent.as_posix()
        return "" if parent == "." else parent


def load_alias_table(path: str | Path) -> AliasTable:
    """
    Load the alias table from a tsconfig document.

    A missing or unparsable document gives an empty table.
    """
    path = Path(path)
    try:
        document = json.loads(strip_jsonc(path.read_text(encoding="utf-8")))
    except FileNotFoundError:
        logger.warning("alias_config_missing", file=str(path))
        return AliasTable()
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("alias_config_unreadable", file=str(path), error=str(e))
        return AliasTable()

    options = document.get("compilerOptions") if isinstance(document, dict) else None
    table = AliasTable.from_compiler_options(options if isinstance(options, dict) else {})
    logger.info("alias_table_loaded", file=str(path), aliases=len(table))
    return table
