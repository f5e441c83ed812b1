"""
Identifier visibility and the exported -> unexported name transform.

Go decides visibility from the case of the first letter of an identifier,
so both helpers only ever look at the first code point.
"""

from go_unexport.errors import InvalidNameError


def is_exported(name: str) -> bool:
  """
  Checks whether an identifier is visible outside its package.

  Args:
      name (str): The identifier.

  Returns:
      bool: True if the first code point is an upper-case letter.
  """
  return bool(name) and name[0].isupper()


def to_lower_first(name: str) -> str:
  """
  Derives the unexported form of an identifier.

  Only the first code point is lower-cased, so ``HTTPClient`` becomes
  ``hTTPClient`` rather than ``httpClient``. Code points whose full lower-case
  form spans several code points (``İ`` -> ``i̇``) keep only the first one,
  matching Go's single-rune ``unicode.ToLower``.

  Args:
      name (str): The exported identifier.

  Returns:
      str: The identifier with its first code point lower-cased.

  Raises:
      InvalidNameError: If `name` is empty.
  """
  if not name:
    raise InvalidNameError("cannot derive an unexported name from an empty identifier")
  return name[0].lower()[0] + name[1:]
