"""
Exception hierarchy for go-unexport.

Only setup problems are raised as exceptions. Renamer refusals are ordinary
outcomes and never surface here.
"""


class UnexportError(Exception):
  """Base class for all errors raised by go-unexport."""


class InvalidNameError(UnexportError, ValueError):
  """Raised when a name transform is requested for an empty identifier."""


class LoadError(UnexportError):
  """Raised when the target packages cannot be listed or parsed."""


class RenamerUnavailableError(UnexportError):
  """Raised when the external rename executable cannot be found."""


class PipelineError(UnexportError):
  """
  A fatal failure inside a named pipeline phase.

  Attributes:
      phase (str): Name of the phase that failed (e.g. "load targets").
      cause (Exception): The underlying error.
  """

  def __init__(self, phase: str, cause: Exception):
    super().__init__(f"{phase}: {cause}")
    self.phase = phase
    self.cause = cause
