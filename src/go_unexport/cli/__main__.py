"""
Main Entry Point for the go-unexport CLI.

Parses arguments, merges them with ``[tool.go_unexport]`` settings from
``pyproject.toml`` and dispatches to `handle_unexport`.
"""

import argparse
import sys
from typing import List, Optional

from go_unexport import __version__
from go_unexport.cli import handlers
from go_unexport.config import UnexportConfig


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
    prog="go-unexport",
    description="go-unexport: unexport Go symbols that are not used outside their package",
  )
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("targets", nargs="*", help="Package patterns to process (default: .)")
  parser.add_argument(
    "-v",
    "--verbose",
    action="store_true",
    default=None,
    help="Print more information than usual",
  )
  parser.add_argument(
    "--unexport",
    default=None,
    help="Comma-separated list of symbols to unexport; if empty, reads as 'all'",
  )
  parser.add_argument("--skip", default=None, help="Comma-separated list of symbols not to unexport")
  parser.add_argument("--renamer", default=None, help="Rename tool executable (default: gorename)")
  parser.add_argument("--go", dest="go_command", default=None, help="Go executable (default: go)")
  parser.add_argument(
    "--no-tests",
    dest="include_tests",
    action="store_false",
    default=None,
    help="Do not load in-package test files",
  )
  return parser


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  args = build_parser().parse_args(argv)

  config = UnexportConfig.load(
    targets=args.targets,
    verbose=args.verbose,
    unexport=args.unexport,
    skip=args.skip,
    renamer=args.renamer,
    go_command=args.go_command,
    include_tests=args.include_tests,
  )
  return handlers.handle_unexport(config)


if __name__ == "__main__":
  sys.exit(main())
