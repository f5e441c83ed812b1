"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A recording console so tests can assert on printed status lines.
- Test doubles for the package loader and the renamer.
"""

import io
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pytest
from rich.console import Console

# Add src to path so we can import 'go_unexport' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from go_unexport.core.renamer import Address, RenameOutcome, Renamer  # noqa: E402
from go_unexport.loading.packages import PackageUnit  # noqa: E402
from go_unexport.loading.parser import SourceFile, parse_source  # noqa: E402
from go_unexport.utils.console import reset_console, set_console  # noqa: E402


class ScriptedRenamer(Renamer):
  """
  Renamer double answering from a table of ``old name -> failure text``.

  Names absent from the table are renamed successfully. Every request is
  recorded in `calls` as ``(address, new_name)``.
  """

  def __init__(self, source_names: Dict[str, str], failures: Optional[Dict[str, str]] = None):
    """
    Args:
        source_names: Maps ``str(address)`` to the identifier found there.
        failures: Maps identifiers to the refusal text to return.
    """
    self.source_names = source_names
    self.failures = failures or {}
    self.calls: List[Tuple[Address, str]] = []

  def attempt_rename(self, address: Address, new_name: str) -> RenameOutcome:
    self.calls.append((address, new_name))
    old = self.source_names.get(str(address))
    if old is None:
      return RenameOutcome(success=False, output="gorename: no identifier at this position")
    if old in self.failures:
      return RenameOutcome(success=False, output=self.failures[old])
    return RenameOutcome(success=True, output=f"Renamed 1 occurrence of {old}")


class StaticLoader:
  """Package loader double returning pre-built units."""

  def __init__(self, units: Sequence[PackageUnit]):
    self.units = list(units)
    self.requested: List[Sequence[str]] = []

  def load(self, targets: Sequence[str]) -> List[PackageUnit]:
    self.requested.append(targets)
    return self.units


@pytest.fixture
def recorder() -> Console:
  """
  Routes all console output and log records into a recording console.
  """
  capture = Console(record=True, file=io.StringIO(), width=200, color_system=None)
  set_console(capture)
  yield capture
  reset_console()


@pytest.fixture
def go_file() -> Callable[..., SourceFile]:
  """
  Factory parsing Go source text into a `SourceFile`.

  The default path is ``pkg/demo.go``; pass ``path=None`` for a synthetic file.
  """

  def _make(code: str, path: Optional[str] = "pkg/demo.go") -> SourceFile:
    return parse_source(code.encode("utf-8"), path=Path(path) if path else None)

  return _make


@pytest.fixture
def scripted_renamer() -> Callable[..., ScriptedRenamer]:
  """Factory for `ScriptedRenamer` instances."""
  return ScriptedRenamer


@pytest.fixture
def static_loader() -> Callable[..., StaticLoader]:
  """Factory for `StaticLoader` instances."""
  return StaticLoader
