"""
Go Package Loading.

Resolves target patterns (``./...``, import paths, directories) into parsed
package units using ``go list -json``. Each unit carries the package's own
files and, when the package has in-package tests, a test variant that also
includes its ``_test.go`` files. External test packages (``package foo_test``)
are not loaded.
"""

import json
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence

from rich.markup import escape

from go_unexport.errors import LoadError
from go_unexport.loading.parser import SourceFile, get_go_parser, parse_file
from go_unexport.utils.console import log_warning


@dataclass
class PackageUnit:
  """
  One loaded package.
  """

  import_path: str
  files: List[SourceFile] = field(default_factory=list)
  test: Optional["PackageUnit"] = None
  """The package compiled together with its in-package tests, if any."""

  @property
  def selected(self) -> "PackageUnit":
    """The test variant when present, else the package itself."""
    return self.test if self.test is not None else self


class GoPackageLoader:
  """
  Loads Go packages through the `go` command.
  """

  def __init__(self, go_command: str = "go", include_tests: bool = True, cwd: Optional[Path] = None):
    """
    Args:
        go_command (str): Name or path of the go binary.
        include_tests (bool): Whether to build test variants.
        cwd (Path, optional): Directory to run `go list` in (module root).
    """
    self.go_command = go_command
    self.include_tests = include_tests
    self.cwd = cwd

  def load(self, targets: Sequence[str]) -> List[PackageUnit]:
    """
    Lists and parses every package matched by `targets`.

    Args:
        targets (Sequence[str]): Package patterns; empty means the current directory.

    Returns:
        List[PackageUnit]: Units in `go list` order.

    Raises:
        LoadError: If the Go grammar is unavailable, listing fails, a package reports
            an error, or a file cannot be read.
    """
    self._check_grammar()
    records = self._list(list(targets) or ["."])
    units = []
    for record in records:
      if record.get("Error"):
        err = record["Error"]
        msg = err.get("Err", err) if isinstance(err, dict) else err
        raise LoadError(f"{record.get('ImportPath', '?')}: {msg}")
      units.append(self._build_unit(record))
    return units

  def _check_grammar(self) -> None:
    try:
      get_go_parser()
    except Exception as e:
      # tree-sitter-language-pack raises its own error types (e.g. on a failed grammar download).
      raise LoadError(f"Go grammar unavailable: {e}") from e

  def _list(self, targets: List[str]) -> List[Dict[str, Any]]:
    cmd = [self.go_command, "list", "-json", *targets]
    try:
      proc = subprocess.run(cmd, capture_output=True, text=True, errors="replace", cwd=self.cwd)
    except OSError as e:
      raise LoadError(f"cannot run '{self.go_command}': {e}") from e

    if proc.returncode != 0:
      raise LoadError(proc.stderr.strip() or f"'{' '.join(cmd)}' exited with status {proc.returncode}")

    try:
      return list(_decode_stream(proc.stdout))
    except json.JSONDecodeError as e:
      raise LoadError(f"malformed 'go list' output: {e}") from e

  def _build_unit(self, record: Dict[str, Any]) -> PackageUnit:
    pkg_dir = Path(record.get("Dir", "."))
    base_names = list(record.get("GoFiles") or []) + list(record.get("CgoFiles") or [])
    test_names = list(record.get("TestGoFiles") or [])

    base_files = [self._parse(pkg_dir / name) for name in base_names]
    unit = PackageUnit(import_path=record.get("ImportPath", str(pkg_dir)), files=base_files)

    if self.include_tests and test_names:
      test_files = [self._parse(pkg_dir / name) for name in test_names]
      unit.test = PackageUnit(import_path=f"{unit.import_path} [test]", files=base_files + test_files)

    return unit

  def _parse(self, path: Path) -> SourceFile:
    try:
      source = parse_file(path)
    except OSError as e:
      raise LoadError(f"cannot read {path}: {e}") from e

    if source.has_errors:
      log_warning(f"Syntax errors in [bold blue]{escape(str(path))}[/bold blue]; collecting what parsed")
    return source


def _decode_stream(text: str) -> Iterator[Dict[str, Any]]:
  """
  Decodes a stream of concatenated JSON objects, as emitted by `go list -json`.
  """
  decoder = json.JSONDecoder()
  idx = 0
  end = len(text)
  while True:
    while idx < end and text[idx].isspace():
      idx += 1
    if idx >= end:
      return
    obj, idx = decoder.raw_decode(text, idx)
    yield obj
