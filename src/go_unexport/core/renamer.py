"""
External Renamer Interface.

The renamer performs the actual reference-consistent rename. go-unexport only
knows how to address an identifier (file + byte offset) and how to read the
answer, so the collaborator is modelled as a one-method abstract base class.

`GorenameRenamer` drives the `gorename` command line tool::

    gorename -offset path/to/file.go:#1234 -to newName
"""

import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from go_unexport.errors import RenamerUnavailableError


@dataclass(frozen=True)
class Address:
  """
  Location of an identifier occurrence as understood by the renamer.
  """

  filename: str
  """Path of the file containing the identifier."""

  offset: int
  """Byte offset of the identifier's first character within the file."""

  def __str__(self) -> str:
    return f"{self.filename}:#{self.offset}"


@dataclass(frozen=True)
class RenameOutcome:
  """
  Answer of a single rename request.
  """

  success: bool
  output: str = ""
  """Combined textual output; on failure this is the refusal reason."""


class Renamer(ABC):
  """
  Abstract base class for rename backends.
  """

  @abstractmethod
  def attempt_rename(self, address: Address, new_name: str) -> RenameOutcome:
    """
    Renames the identifier at `address` to `new_name` across the program.

    Implementations must block until the rename has finished (or was refused).

    Args:
        address (Address): File and byte offset of the identifier.
        new_name (str): The desired identifier.

    Returns:
        RenameOutcome: Success flag and the tool's output.
    """
    pass

  def locate(self) -> Optional[str]:
    """
    Checks that the backend is usable before any rename is attempted.

    Returns:
        Optional[str]: Resolved location of the backend, if it has one.

    Raises:
        RenamerUnavailableError: If the backend cannot be used.
    """
    return None


class GorenameRenamer(Renamer):
  """
  Runs `gorename` as a blocking subprocess per request.
  """

  def __init__(self, executable: str = "gorename"):
    """
    Args:
        executable (str): Command name or path of the gorename binary.
    """
    self.executable = executable

  def locate(self) -> str:
    """
    Resolves the executable on PATH.

    Returns:
        str: Absolute path of the renamer.

    Raises:
        RenamerUnavailableError: If the executable cannot be found.
    """
    resolved = shutil.which(self.executable)
    if not resolved:
      raise RenamerUnavailableError(f"'{self.executable}' not found in PATH")
    return resolved

  def build_command(self, address: Address, new_name: str) -> List[str]:
    return [self.executable, "-offset", str(address), "-to", new_name]

  def attempt_rename(self, address: Address, new_name: str) -> RenameOutcome:
    cmd = self.build_command(address, new_name)
    try:
      proc = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True, errors="replace")
    except OSError as e:
      # Spawning failed for this call only; report it like any other refusal.
      return RenameOutcome(success=False, output=str(e))

    return RenameOutcome(success=proc.returncode == 0, output=proc.stdout or "")
