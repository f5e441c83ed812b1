"""
Analysis Subpackage.

Decides which package-level identifiers are rename candidates.

Modules:
    - ``policy``: Unexport/skip name-set filter.
    - ``symbols``: Top-level declaration collector.
"""

from go_unexport.analysis.policy import Policy, parse_name_list
from go_unexport.analysis.symbols import Candidate, SymbolCollector, collect_symbols

__all__ = ["Candidate", "Policy", "SymbolCollector", "collect_symbols", "parse_name_list"]
