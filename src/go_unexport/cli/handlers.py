"""
Unexport Command Handler.

Runs the pipeline and converts fatal phase failures into an exit code.
"""

from typing import Optional

from rich.markup import escape

from go_unexport.config import UnexportConfig
from go_unexport.core.renamer import Renamer
from go_unexport.core.session import PackageLoader, UnexportSession
from go_unexport.errors import PipelineError
from go_unexport.utils.console import log_error, log_info, log_success, set_verbose


def handle_unexport(
  config: UnexportConfig,
  loader: Optional[PackageLoader] = None,
  renamer: Optional[Renamer] = None,
) -> int:
  """
  Unexports unused exported symbols of the configured targets.

  Args:
      config (UnexportConfig): Finalised settings.
      loader (PackageLoader, optional): Override for the go package loader.
      renamer (Renamer, optional): Override for the gorename adapter.

  Returns:
      int: 0 when the run completed (refused renames included), 1 on a fatal failure.
  """
  set_verbose(config.verbose)
  session = UnexportSession(config, loader=loader, renamer=renamer)

  try:
    session.run()
  except PipelineError as e:
    log_error(escape(str(e)))
    return 1

  if config.verbose:
    refused = len(session.statuses) - len(session.results)
    log_info(f"{len(session.candidates)} candidates, {refused} refused")
    log_success(f"{len(session.results)} unexported")
  return 0
