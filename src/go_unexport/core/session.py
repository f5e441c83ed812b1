"""
Unexport Pipeline Orchestration.

`UnexportSession` owns all state of a run and executes its phases in order:

1.  **locate renamer**: the rename executable must exist before anything else.
2.  **load targets**: packages are listed and parsed; the test variant of a
    package is used when it has one.
3.  **collect symbols**: top-level identifiers passing the policy.
4.  **unexport symbols**: one blocking rename per exported candidate.
5.  **print results**: verbose summary.

An error in any phase is fatal and is raised as `PipelineError` carrying the
phase name. Refused renames are not errors; they are printed and skipped.
"""

from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from go_unexport.analysis.symbols import Candidate, collect_symbols
from go_unexport.config import UnexportConfig
from go_unexport.core.invoker import AttemptStatus, RenameInvoker, UnexportResults
from go_unexport.core.renamer import GorenameRenamer, Renamer
from go_unexport.core.report import print_results
from go_unexport.errors import PipelineError, UnexportError
from go_unexport.loading.packages import GoPackageLoader, PackageUnit


class PackageLoader(Protocol):
  """Anything able to turn target patterns into package units."""

  def load(self, targets: Sequence[str]) -> List[PackageUnit]: ...


class UnexportSession:
  """
  The orchestration context of a single run.

  Attributes:
      config (UnexportConfig): Finalised settings.
      loader (PackageLoader): Package loading collaborator.
      renamer (Renamer): Rename collaborator.
      units (List[PackageUnit]): Selected units (test variant preferred).
      candidates (List[Candidate]): Filtered candidates in declaration order.
      statuses (List[AttemptStatus]): Outcome of every attempted rename.
      results (UnexportResults): Successful renames.
  """

  def __init__(
    self,
    config: Optional[UnexportConfig] = None,
    loader: Optional[PackageLoader] = None,
    renamer: Optional[Renamer] = None,
  ):
    self.config = config or UnexportConfig()
    self.loader = loader or GoPackageLoader(go_command=self.config.go_command, include_tests=self.config.include_tests)
    self.renamer = renamer or GorenameRenamer(self.config.renamer)

    self.units: List[PackageUnit] = []
    self.candidates: List[Candidate] = []
    self.statuses: List[AttemptStatus] = []
    self.results = UnexportResults()

  @property
  def steps(self) -> List[Tuple[str, Callable[[], None]]]:
    return [
      ("locate renamer", self.locate_renamer),
      ("load targets", self.load_targets),
      ("collect symbols", self.collect_symbols),
      ("unexport symbols", self.unexport_symbols),
      ("print results", self.print_results),
    ]

  def run(self) -> UnexportResults:
    """
    Executes every phase in order.

    Returns:
        UnexportResults: Successful renames.

    Raises:
        PipelineError: If a phase fails; later phases are not run.
    """
    for name, step in self.steps:
      try:
        step()
      except UnexportError as e:
        raise PipelineError(name, e) from e
    return self.results

  def locate_renamer(self) -> None:
    self.renamer.locate()

  def load_targets(self) -> None:
    units = self.loader.load(self.config.targets)
    self.units = [unit.selected for unit in units]

  def collect_symbols(self) -> None:
    files = [source for unit in self.units for source in unit.files]
    self.candidates = collect_symbols(files, self.config.policy)

  def unexport_symbols(self) -> None:
    invoker = RenameInvoker(self.renamer, self.results)
    self.statuses = invoker.unexport_all(self.candidates)

  def print_results(self) -> None:
    print_results(self.results, self.config.verbose)
