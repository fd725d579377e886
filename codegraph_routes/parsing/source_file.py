"""
Source File representation
"""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from codegraph_routes.exceptions import UnsupportedLanguageError


def normalize_unit_path(path: str | PurePosixPath) -> str:
    """
    Normalize a workspace-relative path into the key used by the source index.

    Collapses ``.`` and ``..`` segments and drops a leading ``./`` so that
    ``apps/x/../y/a.ts`` and ``./apps/y/a.ts`` both become ``apps/y/a.ts``.
    """
    parts: list[str] = []
    for part in PurePosixPath(str(path).replace("\\", "/")).parts:
        if part in ("", "."):
            continue
        if part == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            else:
                parts.append(part)
            continue
        parts.append(part)
    return "/".join(parts)


@dataclass
class SourceFile:
    """
    Represents a TypeScript source unit.

    Attributes:
        file_path: Normalized POSIX path relative to the workspace root
        content: File content as string
        language: Grammar name ("typescript" or "tsx")
        encoding: File encoding (default: utf-8)
    """

    file_path: str
    content: str
    language: str
    encoding: str = "utf-8"

    @classmethod
    def from_file(
        cls,
        file_path: str | Path,
        repo_root: str | Path,
        language: str | None = None,
        encoding: str = "utf-8",
    ) -> "SourceFile":
        """
        Load source file from disk.

        Args:
            file_path: Absolute or workspace-relative path to file
            repo_root: Workspace root directory
            language: Language override (auto-detected if None)
            encoding: File encoding

        Returns:
            SourceFile instance

        Raises:
            UnsupportedLanguageError: If the suffix has no registered grammar
        """
        file_path = Path(file_path)
        repo_root = Path(repo_root)

        relative_path = file_path.relative_to(repo_root) if file_path.is_absolute() else file_path
        abs_path = repo_root / relative_path
        content = abs_path.read_text(encoding=encoding)

        if language is None:
            from .parser_registry import get_registry

            language = get_registry().detect_language(abs_path)
            if language is None:
                raise UnsupportedLanguageError(abs_path.suffix or "<none>", str(relative_path))

        return cls(
            file_path=normalize_unit_path(relative_path.as_posix()),
            content=content,
            language=language,
            encoding=encoding,
        )

    @classmethod
    def from_content(
        cls,
        file_path: str,
        content: str,
        language: str = "typescript",
        encoding: str = "utf-8",
    ) -> "SourceFile":
        """Create source file from content string."""
        return cls(
            file_path=normalize_unit_path(file_path),
            content=content,
            language=language,
            encoding=encoding,
        )
