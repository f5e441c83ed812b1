"""
Runtime Configuration Store.

Settings can come from a ``[tool.go_unexport]`` table in the nearest
``pyproject.toml`` and from command line arguments. CLI values win.

.. code-block:: toml

    [tool.go_unexport]
    skip = ["Handler", "New"]
    renamer = "/opt/go/bin/gorename"
"""

import sys
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from go_unexport.analysis.policy import Policy, parse_name_list

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

NameList = Union[str, List[str], None]


class UnexportConfig(BaseModel):
  """
  Finalised settings consumed by the pipeline.
  """

  targets: List[str] = Field(default_factory=lambda: ["."], description="Package patterns to process.")
  verbose: bool = Field(False, description="Print the list of performed renames at the end.")
  unexport: FrozenSet[str] = Field(default_factory=frozenset, description="Names to unexport; empty means all.")
  skip: FrozenSet[str] = Field(default_factory=frozenset, description="Names never to unexport.")
  renamer: str = Field("gorename", description="Rename tool executable.")
  go_command: str = Field("go", description="Go toolchain executable used for package listing.")
  include_tests: bool = Field(True, description="Load in-package test files alongside each package.")

  @field_validator("unexport", "skip", mode="before")
  @classmethod
  def validate_names(cls, v: Any) -> FrozenSet[str]:
    """
    Accepts comma-separated strings or lists of names.

    Args:
        v: Raw value.

    Returns:
        FrozenSet[str]: Normalised names.
    """
    return parse_name_list(v)

  @field_validator("targets", mode="before")
  @classmethod
  def validate_targets(cls, v: Any) -> List[str]:
    if v is None:
      return ["."]
    if isinstance(v, str):
      v = [v]
    return list(v) or ["."]

  @property
  def policy(self) -> Policy:
    """The include/skip policy derived from `unexport` and `skip`."""
    return Policy(unexport=self.unexport, skip=self.skip)

  @classmethod
  def load(
    cls,
    targets: Optional[List[str]] = None,
    verbose: Optional[bool] = None,
    unexport: NameList = None,
    skip: NameList = None,
    renamer: Optional[str] = None,
    go_command: Optional[str] = None,
    include_tests: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "UnexportConfig":
    """
    Loads configuration from pyproject.toml and overrides it with CLI arguments.

    Arguments left as None fall back to the TOML value, then to the default.

    Args:
        targets (List[str], optional): Package patterns.
        verbose (bool, optional): Verbose reporting.
        unexport (str | List[str], optional): Names to unexport.
        skip (str | List[str], optional): Names to skip.
        renamer (str, optional): Rename executable.
        go_command (str, optional): Go executable.
        include_tests (bool, optional): Whether to load test variants.
        search_path (Path, optional): Directory to start searching for TOML config.

    Returns:
        UnexportConfig: The resolved configuration.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    overrides = {
      "targets": targets or None,
      "verbose": verbose,
      "unexport": unexport,
      "skip": skip,
      "renamer": renamer,
      "go_command": go_command,
      "include_tests": include_tests,
    }

    merged: Dict[str, Any] = {k: v for k, v in toml_config.items() if k in cls.model_fields}
    for key, value in overrides.items():
      if value is not None:
        merged[key] = value

    return cls(**merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start the search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``[tool.go_unexport]`` table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None
      return data.get("tool", {}).get("go_unexport", {}), parent

  return {}, None
