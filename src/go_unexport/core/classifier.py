"""
Renamer failure classification.

The renamer reports refusals as free text. This module maps that text onto
`ErrorCategory` by substring matching. The wording is owned by another tool,
so the whole mapping lives in `FAILURE_PATTERNS` and nowhere else.

Patterns are checked in table order and the first hit wins, which keeps the
result deterministic when a message matches more than one substring.
"""

from typing import Tuple

from go_unexport.enums import ErrorCategory

FAILURE_PATTERNS: Tuple[Tuple[str, ErrorCategory], ...] = (
  ("breaking references", ErrorCategory.WOULD_BREAK_CLIENTS),
  ("no identifier at this position", ErrorCategory.INVALID_POSITION),
  ("not a valid identifier", ErrorCategory.INVALID_IDENTIFIER),
  ("would conflict with this method", ErrorCategory.NAME_COLLISION),
  ("no longer assignable to interface", ErrorCategory.INTERFACE_ASSIGNABILITY_BROKEN),
)


def classify_failure(output: str) -> ErrorCategory:
  """
  Maps raw renamer output to a failure category.

  Args:
      output (str): Combined stdout/stderr of a refused rename.

  Returns:
      ErrorCategory: The first matching category, or `ErrorCategory.UNKNOWN`.
  """
  for needle, category in FAILURE_PATTERNS:
    if needle in output:
      return category
  return ErrorCategory.UNKNOWN
