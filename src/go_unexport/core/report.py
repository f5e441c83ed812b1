"""
Result reporting for verbose runs.
"""

from rich.markup import escape

from go_unexport.core.invoker import UnexportResults
from go_unexport.utils.console import console


def print_results(results: UnexportResults, verbose: bool) -> None:
  """
  Prints every recorded success as ``POSITION: Old -> new``.

  Nothing is printed unless `verbose` is set. Entry order is not significant.

  Args:
      results (UnexportResults): Recorded successes.
      verbose (bool): Whether reporting is enabled.
  """
  if not verbose or not results:
    return

  console.print("unexported:")
  for (position, _), renamed in results.success.items():
    console.print(f"\t[bold blue]{escape(position)}[/bold blue]: {escape(renamed)}")
