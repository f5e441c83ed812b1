"""
Rename Invoker.

Attempts to unexport one candidate at a time through a `Renamer`. Successful
renames are recorded in `UnexportResults`; refusals are classified, printed
next to the symbol and then forgotten. A refusal is final: there are no
retries.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from rich.markup import escape

from go_unexport.analysis.symbols import Candidate
from go_unexport.core.classifier import classify_failure
from go_unexport.core.naming import to_lower_first
from go_unexport.core.renamer import Renamer
from go_unexport.enums import ErrorCategory
from go_unexport.utils.console import console, log_warning


class UnexportResults:
  """
  Successful renames keyed by ``(position, original name)``.

  The mapping value is the ``"Old -> new"`` description printed by the reporter.
  """

  def __init__(self) -> None:
    self.success: Dict[Tuple[str, str], str] = {}

  def record(self, candidate: Candidate, new_name: str) -> None:
    self.success[(str(candidate.position), candidate.name)] = f"{candidate.name} -> {new_name}"

  def __len__(self) -> int:
    return len(self.success)

  def __bool__(self) -> bool:
    return bool(self.success)


@dataclass(frozen=True)
class AttemptStatus:
  """
  Outcome of one rename attempt, as shown to the operator.
  """

  candidate: Candidate
  new_name: str
  category: Optional[ErrorCategory] = None
  """None on success."""
  output: str = ""

  @property
  def success(self) -> bool:
    return self.category is None

  def __str__(self) -> str:
    if self.success:
      return "success"
    return f"impossible: {self.category.description}"


class RenameInvoker:
  """
  Sequentially unexports candidates through a renamer.
  """

  def __init__(self, renamer: Renamer, results: Optional[UnexportResults] = None):
    self.renamer = renamer
    self.results = results if results is not None else UnexportResults()

  def try_unexport(self, candidate: Candidate) -> AttemptStatus:
    """
    Asks the renamer to unexport one candidate and records a success.

    Args:
        candidate (Candidate): An exported candidate.

    Returns:
        AttemptStatus: Success or the classified refusal.
    """
    new_name = to_lower_first(candidate.name)
    outcome = self.renamer.attempt_rename(candidate.address, new_name)

    if outcome.success:
      self.results.record(candidate, new_name)
      return AttemptStatus(candidate=candidate, new_name=new_name, output=outcome.output)

    category = classify_failure(outcome.output)
    if category is ErrorCategory.UNKNOWN:
      log_warning(f"unknown error: {escape(outcome.output.strip())}")
    return AttemptStatus(candidate=candidate, new_name=new_name, category=category, output=outcome.output)

  def unexport_all(self, candidates: Iterable[Candidate]) -> List[AttemptStatus]:
    """
    Attempts every exported candidate in order; unexported ones are skipped.

    Each attempt finishes before the next begins since a rename may rewrite
    files (and shift offsets) anywhere in the program.

    Args:
        candidates (Iterable[Candidate]): Filtered candidates.

    Returns:
        List[AttemptStatus]: One status per attempted candidate.
    """
    statuses = []
    for candidate in candidates:
      if not candidate.exported:
        continue
      console.print(f"trying to unexport [bold magenta]{escape(candidate.name)}[/bold magenta]... ", end="")
      status = self.try_unexport(candidate)
      console.print(f"({escape(str(status))})")
      statuses.append(status)
    return statuses
