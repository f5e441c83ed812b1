"""
Enumerations for go-unexport.

Defines the declaration kinds recorded on candidates and the closed taxonomy
of renamer failures.
"""

from enum import Enum


class DeclKind(str, Enum):
  """
  Kind of top-level declaration a candidate was introduced by.

  Recorded for reporting only; the pipeline treats all kinds identically.
  """

  VALUE = "value"  # var / const
  TYPE = "type"  # type spec or alias
  FUNC = "func"  # function or method


class ErrorCategory(str, Enum):
  """
  Stable categories for renamer refusals.
  """

  WOULD_BREAK_CLIENTS = "WouldBreakClients"
  INVALID_POSITION = "InvalidPosition"
  INVALID_IDENTIFIER = "InvalidIdentifier"
  NAME_COLLISION = "NameCollision"
  INTERFACE_ASSIGNABILITY_BROKEN = "InterfaceAssignabilityBroken"
  UNKNOWN = "Unknown"

  @property
  def description(self) -> str:
    """Human readable explanation printed next to a refused symbol."""
    return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
  ErrorCategory.WOULD_BREAK_CLIENTS: "would break package clients",
  ErrorCategory.INVALID_POSITION: "internal error: invalid position",
  ErrorCategory.INVALID_IDENTIFIER: "internal error: invalid identifier",
  ErrorCategory.NAME_COLLISION: "symbols with unexported name form already exists",
  ErrorCategory.INTERFACE_ASSIGNABILITY_BROKEN: "would break interface assignability",
  ErrorCategory.UNKNOWN: "unknown error",
}
