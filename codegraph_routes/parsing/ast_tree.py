"""
AST Tree wrapper for Tree-sitter
"""

try:
    from tree_sitter import Node as TSNode
    from tree_sitter import Tree as TSTree
except ImportError as e:
    raise ImportError("tree-sitter is required. Install with: pip install tree-sitter") from e

from codegraph_routes.exceptions import ParseError, UnsupportedLanguageError
from codegraph_routes.parsing.parser_registry import get_registry
from codegraph_routes.parsing.source_file import SourceFile

# Wrappers that only add type information around an expression.
TRANSPARENT_EXPRESSIONS = frozenset(
    [
        "parenthesized_expression",
        "as_expression",
        "satisfies_expression",
        "non_null_expression",
    ]
)


class AstTree:
    """
    Wrapper for Tree-sitter AST.

    Provides convenient methods for traversing and analyzing the AST.
    """

    def __init__(self, source: SourceFile, tree: TSTree):
        self.source = source
        self.tree = tree
        self._root = tree.root_node
        self._content_bytes = source.content.encode(source.encoding)

    @classmethod
    def parse(cls, source: SourceFile) -> "AstTree":
        """
        Parse source file into AST.

        Args:
            source: Source file to parse

        Returns:
            AstTree instance

        Raises:
            UnsupportedLanguageError: If language not supported
            ParseError: If parsing fails
        """
        parser = get_registry().get_parser(source.language)
        if parser is None:
            raise UnsupportedLanguageError(source.language, source.file_path)

        tree = parser.parse(source.content.encode(source.encoding))
        if tree is None:
            raise ParseError(source.file_path)

        return cls(source, tree)

    @property
    def root(self) -> TSNode:
        """Get root node"""
        return self._root

    def get_text(self, node: TSNode | None) -> str:
        """
        Get text content of a node.

        Tree-sitter offsets are byte offsets, so slicing happens on the encoded
        content to stay correct for non-ASCII sources.
        """
        if node is None:
            return ""
        return self._content_bytes[node.start_byte : node.end_byte].decode(self.source.encoding)

    def get_named_children(self, node: TSNode) -> list[TSNode]:
        """Get named child nodes (excluding anonymous nodes and comments)"""
        return [child for child in node.children if child.is_named and child.type != "comment"]

    def unwrap(self, node: TSNode | None) -> TSNode | None:
        """Strip parentheses and `as`/`satisfies`/`!` wrappers from an expression."""
        while node is not None and node.type in TRANSPARENT_EXPRESSIONS:
            inner = self.get_named_children(node)
            if not inner:
                break
            node = inner[0]
        return node

    def has_error(self, node: TSNode | None = None) -> bool:
        """Check if AST has any error nodes."""
        if node is None:
            node = self._root

        if node.type == "ERROR" or node.is_missing:
            return True

        return any(self.has_error(child) for child in node.children)

    def get_errors(self, node: TSNode | None = None) -> list[TSNode]:
        """Get all error nodes."""
        if node is None:
            node = self._root

        errors = []
        if node.type == "ERROR" or node.is_missing:
            errors.append(node)

        for child in node.children:
            errors.extend(self.get_errors(child))

        return errors

    def __repr__(self) -> str:
        return f"AstTree(file={self.source.file_path}, language={self.source.language})"
