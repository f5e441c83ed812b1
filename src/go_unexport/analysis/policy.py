"""
Candidate Filter Policy.

A policy is an *unexport* set (names to attempt) and a *skip* set (names to
never attempt). An empty unexport set means every name is eligible. Skip
always wins.
"""

from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_name_list(raw) -> FrozenSet[str]:
  """
  Normalises a comma-separated string or an iterable of names into a set.

  Blank entries are dropped, so ``""`` and ``"a,,b"`` behave as expected.

  Args:
      raw: None, a comma-separated string, or an iterable of strings.

  Returns:
      FrozenSet[str]: The stripped, non-empty names.
  """
  if raw is None:
    return frozenset()
  if isinstance(raw, str):
    raw = raw.split(",")
  return frozenset(name.strip() for name in raw if name and name.strip())


class Policy(BaseModel):
  """
  Include/skip name sets governing which candidates are attempted.
  """

  model_config = ConfigDict(frozen=True)

  unexport: FrozenSet[str] = Field(default_factory=frozenset, description="Names to attempt; empty means all.")
  skip: FrozenSet[str] = Field(default_factory=frozenset, description="Names never attempted.")

  @field_validator("unexport", "skip", mode="before")
  @classmethod
  def _normalise(cls, v):
    return parse_name_list(v)

  def allows(self, name: str) -> bool:
    """
    Decides whether `name` passes the policy.

    Args:
        name (str): Candidate identifier.

    Returns:
        bool: True if eligible under the unexport set and not skipped.
    """
    if name in self.skip:
      return False
    return not self.unexport or name in self.unexport
