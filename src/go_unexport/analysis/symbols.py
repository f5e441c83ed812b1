"""
Package-level Symbol Collection.

Walks the top-level declarations of parsed Go files and records every
identifier they introduce:

*   ``var`` / ``const`` specs, every name of a multi-name spec, grouped or not.
*   ``type`` specs and aliases, grouped or not.
*   Functions and methods. Methods are collected exactly like free functions.

Only the direct children of a file's root are inspected, so anything declared
inside a function body is never seen. Files without an originating path are
skipped.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from tree_sitter import Node

from go_unexport.analysis.policy import Policy
from go_unexport.core.naming import is_exported
from go_unexport.core.renamer import Address
from go_unexport.enums import DeclKind
from go_unexport.loading.parser import Position, SourceFile

_VALUE_DECLS = {"var_declaration": "var_spec", "const_declaration": "const_spec"}
_TYPE_SPECS = ("type_spec", "type_alias")
_FUNC_DECLS = ("function_declaration", "method_declaration")


@dataclass(frozen=True)
class Candidate:
  """
  A package-level declared name considered for unexporting.
  """

  name: str
  position: Position
  kind: DeclKind

  @property
  def exported(self) -> bool:
    return is_exported(self.name)

  @property
  def filename(self) -> str:
    return self.position.filename

  @property
  def offset(self) -> int:
    return self.position.offset

  @property
  def address(self) -> Address:
    """The renamer address of the identifier."""
    return Address(filename=self.position.filename, offset=self.position.offset)


def _specs(decl: Node, spec_types: Iterable[str]) -> Iterator[Node]:
  # Parenthesised groups may be wrapped in a `*_spec_list` node depending on grammar version.
  for child in decl.named_children:
    if child.type in spec_types:
      yield child
    elif child.type.endswith("_spec_list"):
      yield from _specs(child, spec_types)


class SymbolCollector:
  """
  Accumulates candidates from the files of one or more units.

  Attributes:
      policy (Policy): Filter applied to every collected name.
      candidates (List[Candidate]): Retained candidates in declaration order.
  """

  def __init__(self, policy: Optional[Policy] = None):
    self.policy = policy or Policy()
    self.candidates: List[Candidate] = []

  def collect_files(self, files: Iterable[SourceFile]) -> None:
    """
    Collects every file that has an originating path.

    Args:
        files (Iterable[SourceFile]): Parsed files of one unit.
    """
    for source in files:
      if not source.filename:
        continue
      self.collect_file(source)

  def collect_file(self, source: SourceFile) -> None:
    for decl in source.root.named_children:
      if decl.type in _VALUE_DECLS:
        for spec in _specs(decl, (_VALUE_DECLS[decl.type],)):
          # The name field also covers the separating commas.
          for ident in spec.children_by_field_name("name"):
            if ident.type == "identifier":
              self._add(source, ident, DeclKind.VALUE)

      elif decl.type == "type_declaration":
        for spec in _specs(decl, _TYPE_SPECS):
          ident = spec.child_by_field_name("name")
          if ident is not None:
            self._add(source, ident, DeclKind.TYPE)

      elif decl.type in _FUNC_DECLS:
        ident = decl.child_by_field_name("name")
        if ident is not None:
          self._add(source, ident, DeclKind.FUNC)

  def _add(self, source: SourceFile, ident: Node, kind: DeclKind) -> None:
    name = source.text(ident)
    if self.policy.allows(name):
      self.candidates.append(Candidate(name=name, position=source.position(ident), kind=kind))


def collect_symbols(files: Iterable[SourceFile], policy: Optional[Policy] = None) -> List[Candidate]:
  """
  Convenience wrapper returning the filtered candidates of `files`.

  Args:
      files (Iterable[SourceFile]): Parsed files.
      policy (Policy, optional): Include/skip policy. Defaults to "everything".

  Returns:
      List[Candidate]: Candidates in file and declaration order.
  """
  collector = SymbolCollector(policy)
  collector.collect_files(files)
  return collector.candidates
