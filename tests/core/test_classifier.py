"""
Tests for renamer failure classification.
"""

import pytest

from go_unexport.core.classifier import FAILURE_PATTERNS, classify_failure
from go_unexport.enums import ErrorCategory


@pytest.mark.parametrize(
  "output, category",
  [
    (
      "renaming this func \"Baz\" to \"baz\" would make it unexported\n\tbreaking references from packages such as \"example.com/app\"",
      ErrorCategory.WOULD_BREAK_CLIENTS,
    ),
    ("gorename: -offset \"a.go:#12\": no identifier at this position", ErrorCategory.INVALID_POSITION),
    ("gorename: invalid identifier \"1x\": not a valid identifier", ErrorCategory.INVALID_IDENTIFIER),
    ("renaming this method \"Close\" to \"close\"\n\twould conflict with this method", ErrorCategory.NAME_COLLISION),
    (
      "renaming this method \"Read\" to \"read\"\n\twould make *File no longer assignable to interface io.Reader",
      ErrorCategory.INTERFACE_ASSIGNABILITY_BROKEN,
    ),
  ],
)
def test_known_messages(output, category):
  assert classify_failure(output) is category


def test_breaking_references_wins_over_interface():
  """
  A message matching two patterns resolves to the earlier table entry.
  """
  text = "breaking references from x; also no longer assignable to interface y"
  assert classify_failure(text) is ErrorCategory.WOULD_BREAK_CLIENTS


def test_collision_wins_over_interface():
  text = "no longer assignable to interface I ... would conflict with this method"
  assert classify_failure(text) is ErrorCategory.NAME_COLLISION


def test_unmatched_is_unknown():
  assert classify_failure("segmentation fault (core dumped)") is ErrorCategory.UNKNOWN
  assert classify_failure("") is ErrorCategory.UNKNOWN


def test_priority_table_order():
  categories = [category for _, category in FAILURE_PATTERNS]
  assert categories == [
    ErrorCategory.WOULD_BREAK_CLIENTS,
    ErrorCategory.INVALID_POSITION,
    ErrorCategory.INVALID_IDENTIFIER,
    ErrorCategory.NAME_COLLISION,
    ErrorCategory.INTERFACE_ASSIGNABILITY_BROKEN,
  ]


def test_every_category_has_description():
  for category in ErrorCategory:
    assert category.description
  assert ErrorCategory.WOULD_BREAK_CLIENTS.description == "would break package clients"
