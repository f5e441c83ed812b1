"""
Loading Subpackage.

Turns target patterns into parsed Go package units.

Modules:
    - ``parser``: tree-sitter Go parsing and the node position service.
    - ``packages``: ``go list`` driven package discovery.
"""

from go_unexport.loading.packages import GoPackageLoader, PackageUnit
from go_unexport.loading.parser import Position, SourceFile, parse_file, parse_source

__all__ = ["GoPackageLoader", "PackageUnit", "Position", "SourceFile", "parse_file", "parse_source"]
