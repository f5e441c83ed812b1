"""
Tree-sitter Go parsing.

Wraps the Go grammar shipped with `tree-sitter-language-pack` and exposes
the position service the collector relies on: every syntax node maps to a
filename, a 1-based line, a 1-based byte column and a 0-based byte offset,
the same convention `go/token` uses.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

from tree_sitter import Node, Parser, Tree
from tree_sitter_language_pack import get_language


@dataclass(frozen=True)
class Position:
  """
  Source position of a syntax node.
  """

  filename: str
  line: int
  column: int
  offset: int

  def __str__(self) -> str:
    return f"{self.filename}:{self.line}:{self.column}"


@dataclass
class SourceFile:
  """
  A parsed Go source file.

  Attributes:
      path: Originating path on disk, or None for synthetic in-memory files.
      content: Raw file bytes. Offsets are byte offsets into this buffer.
      tree: The tree-sitter syntax tree.
  """

  path: Optional[Path]
  content: bytes
  tree: Tree = field(repr=False)

  @property
  def filename(self) -> str:
    return str(self.path) if self.path else ""

  @property
  def root(self) -> Node:
    return self.tree.root_node

  @property
  def has_errors(self) -> bool:
    return self.tree.root_node.has_error

  def text(self, node: Node) -> str:
    """Returns the source text spanned by `node`."""
    return self.content[node.start_byte : node.end_byte].decode("utf-8")

  def position(self, node: Node) -> Position:
    """
    Resolves a node to its starting position.

    Args:
        node (Node): A node of this file's tree.

    Returns:
        Position: Filename, 1-based line, 1-based byte column and byte offset.
    """
    row, col = node.start_point
    return Position(filename=self.filename, line=row + 1, column=col + 1, offset=node.start_byte)


@lru_cache(maxsize=1)
def get_go_parser() -> Parser:
  """Returns a cached tree-sitter parser for Go."""
  return Parser(get_language("go"))


def parse_source(content: bytes, path: Optional[Path] = None) -> SourceFile:
  """
  Parses Go source bytes.

  Args:
      content (bytes): The file contents.
      path (Path, optional): Originating path; leave None for synthetic files.

  Returns:
      SourceFile: The parsed file.
  """
  tree = get_go_parser().parse(content)
  return SourceFile(path=path, content=content, tree=tree)


def parse_file(path: Path) -> SourceFile:
  """
  Reads and parses a Go file from disk.

  Args:
      path (Path): The file to parse.

  Returns:
      SourceFile: The parsed file.
  """
  return parse_source(path.read_bytes(), path=path)
