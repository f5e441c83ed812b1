"""
go-unexport Package.

Finds exported identifiers of Go packages that nobody outside the package uses
and unexports them. The actual rename is delegated to ``gorename``, which
refuses any rename that would break a reference; go-unexport decides what to
try and reports what happened.

Usage
-----

Command Line
^^^^^^^^^^^^

.. code-block:: bash

    go-unexport -v --skip New,Handler ./...

Programmatic
^^^^^^^^^^^^

.. code-block:: python

    from go_unexport import UnexportConfig, UnexportSession

    config = UnexportConfig(targets=["./pkg/..."], skip="New")
    results = UnexportSession(config).run()
    for (position, old), new in results.success.items():
      print(position, old, new)
"""

from go_unexport.config import UnexportConfig
from go_unexport.core.session import UnexportSession

__version__ = "0.1.0"

__all__ = [
  "UnexportConfig",
  "UnexportSession",
  "__version__",
]
